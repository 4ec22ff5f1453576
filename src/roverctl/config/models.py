"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rover.toml only contains overrides.
An empty file lands a rover at the origin facing north with f/b/l/r bound.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from roverctl.domain.operations import DEFAULT_BINDINGS, operation_from_spec
from roverctl.domain.types import parse_heading

# --- rover.toml sections ---


class LandingConfig(BaseModel):
    """[landing] section."""

    model_config = {"frozen": True}

    x: int = 0
    y: int = 0
    facing: str = "north"

    @field_validator("facing")
    @classmethod
    def _known_heading(cls, value: str) -> str:
        return parse_heading(value).name.lower()


class BoundsConfig(BaseModel):
    """[sensors.bounds] section.  Omitted sides stay open."""

    model_config = {"frozen": True}

    min_x: int | None = None
    max_x: int | None = None
    min_y: int | None = None
    max_y: int | None = None


class SensorsConfig(BaseModel):
    """[sensors] section."""

    model_config = {"frozen": True}

    bounds: BoundsConfig | None = None
    obstacles: list[tuple[int, int]] = Field(default_factory=list)
    max_distance: float | None = None
    origin: tuple[int, int] = (0, 0)

    @field_validator("max_distance")
    @classmethod
    def _non_negative(cls, value: float | None) -> float | None:
        if value is not None and value < 0:
            msg = "max_distance must be non-negative"
            raise ValueError(msg)
        return value


def validate_bindings(bindings: dict[str, Any]) -> dict[str, Any]:
    """Check that every key is one character and every spec parses."""
    for token, spec in bindings.items():
        if len(token) != 1:
            msg = f"Command token must be a single character, got {token!r}"
            raise ValueError(msg)
        operation_from_spec(spec)
    return bindings


class RoverConfig(BaseModel):
    """Root configuration composing all rover.toml sections."""

    model_config = {"frozen": True}

    landing: LandingConfig = Field(default_factory=LandingConfig)
    commands: dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_BINDINGS))
    sensors: SensorsConfig = Field(default_factory=SensorsConfig)

    @field_validator("commands")
    @classmethod
    def _valid_bindings(cls, value: dict[str, Any]) -> dict[str, Any]:
        return validate_bindings(value)
