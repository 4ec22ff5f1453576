"""Unified settings — CLI flags, env vars, and rover.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROVERCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``rover.toml`` found by :func:`find_config`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from roverctl.config.discovery import find_config, read_toml
from roverctl.config.models import LandingConfig, SensorsConfig, validate_bindings
from roverctl.domain.operations import DEFAULT_BINDINGS


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the parsed rover.toml into the settings merge."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Look up the top-level TOML key matching *field_name*."""
        present = field_name in self._data
        return self._data.get(field_name), field_name, present

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path for the settings object currently under construction.
_active_toml: ContextVar[Path | None] = ContextVar("roverctl_active_toml", default=None)


class RoverSettings(BaseSettings):
    """Everything a CLI invocation needs, frozen after construction.

    Attributes:
        config_path: The rover.toml that was loaded, or None when running
            on code defaults.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROVERCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    landing: LandingConfig = Field(default_factory=LandingConfig)
    commands: dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_BINDINGS))
    sensors: SensorsConfig = Field(default_factory=SensorsConfig)

    @field_validator("commands")
    @classmethod
    def _valid_bindings(cls, value: dict[str, Any]) -> dict[str, Any]:
        return validate_bindings(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Slot the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> RoverSettings:
        """Resolve the config file and build settings from CLI flags.

        Args:
            config_path: Explicit ``--config`` value.  Used only if it
                points at an existing file; discovery is skipped either way.
            start_dir: Where discovery starts walking up (default: cwd).
            **cli_flags: Flag values that override env and TOML.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start_dir)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
