"""Tests for rover.toml section models."""

import pytest
from pydantic import ValidationError

from roverctl.config.models import (
    BoundsConfig,
    LandingConfig,
    RoverConfig,
    SensorsConfig,
)


class TestLandingConfig:
    def test_defaults(self) -> None:
        cfg = LandingConfig()
        assert (cfg.x, cfg.y, cfg.facing) == (0, 0, "north")

    def test_facing_normalized(self) -> None:
        assert LandingConfig(facing="W").facing == "west"

    def test_invalid_facing(self) -> None:
        with pytest.raises(ValidationError):
            LandingConfig(facing="up")

    def test_frozen(self) -> None:
        cfg = LandingConfig()
        with pytest.raises(ValidationError):
            cfg.x = 3  # type: ignore[misc]


class TestSensorsConfig:
    def test_defaults_enable_nothing(self) -> None:
        cfg = SensorsConfig()
        assert cfg.bounds is None
        assert cfg.obstacles == []
        assert cfg.max_distance is None

    def test_obstacles_coerced_to_pairs(self) -> None:
        cfg = SensorsConfig.model_validate({"obstacles": [[0, 2], [1, 1]]})
        assert cfg.obstacles == [(0, 2), (1, 1)]

    def test_negative_distance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SensorsConfig(max_distance=-1)

    def test_partial_bounds(self) -> None:
        cfg = SensorsConfig.model_validate({"bounds": {"max_x": 5}})
        assert cfg.bounds == BoundsConfig(max_x=5)


class TestRoverConfig:
    def test_default_bindings(self) -> None:
        assert RoverConfig().commands == {
            "f": "forward",
            "b": "backward",
            "l": "left",
            "r": "right",
        }

    def test_custom_bindings_replace_defaults(self) -> None:
        cfg = RoverConfig.model_validate({"commands": {"u": ["right", "right"]}})
        assert cfg.commands == {"u": ["right", "right"]}

    def test_multi_character_token_rejected(self) -> None:
        with pytest.raises(ValidationError, match="single character"):
            RoverConfig.model_validate({"commands": {"fw": "forward"}})

    def test_unknown_operation_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown operation"):
            RoverConfig.model_validate({"commands": {"j": "jump"}})
