"""Pluggy hook specifications for roverctl.

One setup-time hook lets plugins contribute safety sensors; one
run-time hook observes every finished command batch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from roverctl.domain.sensors import Sensor

PROJECT_NAME = "roverctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)


class RoverctlHookSpec:
    """Hook specifications for the roverctl plugin system."""

    @hookspec
    def register_sensors(self) -> list[Sensor] | None:
        """Return extra sensors to install after the configured ones."""

    @hookspec
    def post_execute(
        self,
        commands: str,
        x: int,
        y: int,
        direction: str,
        stopped: bool,
    ) -> None:
        """Called after a command batch finishes, with the resulting state."""
