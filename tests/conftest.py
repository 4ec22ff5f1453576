"""Shared pytest fixtures and test helpers for roverctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from roverctl.domain.operations import move_backward, move_forward, rotate_left, rotate_right
from roverctl.domain.rover import Rover, RoverBuilder
from roverctl.domain.sensors import Sensor


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ROVERCTL_* variables out of every test."""
    monkeypatch.delenv("ROVERCTL_CONFIG", raising=False)
    monkeypatch.delenv("ROVERCTL_VERBOSE", raising=False)
    monkeypatch.delenv("ROVERCTL_QUIET", raising=False)
    monkeypatch.delenv("ROVERCTL_JSON_OUTPUT", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rover = logging.getLogger("roverctl")
    rover_level = rover.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rover.setLevel(rover_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so discovery finds nothing unexpected."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(isolated_dir: Path) -> Callable[[str], Path]:
    """Write a rover.toml into the isolated CWD and return its path."""

    def _write(body: str) -> Path:
        path = isolated_dir / "rover.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class RejectCells:
    """Sensor that rejects an explicit set of cells and records queries."""

    def __init__(self, *cells: tuple[int, int]) -> None:
        self.cells = set(cells)
        self.queries: list[tuple[int, int]] = []

    def is_safe(self, x: int, y: int) -> bool:
        self.queries.append((x, y))
        return (x, y) not in self.cells


class RejectAll:
    def is_safe(self, x: int, y: int) -> bool:
        return False


def standard_rover(*sensors: Sensor) -> Rover:
    """Rover with f/b/l/r bound and the given sensors."""
    builder = (
        RoverBuilder()
        .program_command("f", move_forward())
        .program_command("b", move_backward())
        .program_command("l", rotate_left())
        .program_command("r", rotate_right())
    )
    for sensor in sensors:
        builder.add_sensor(sensor)
    return builder.build()
