"""Immutable rover state snapshots.

INVARIANT: A RoverState is never mutated.  Every transition builds a new
value and the rover replaces its current snapshot wholesale.
"""

from __future__ import annotations

from pydantic import BaseModel

from roverctl.domain.types import UNKNOWN_HEADING, Direction, heading_name


class RoverState(BaseModel):
    """Position, heading, and the stopped flag at one point in time.

    The default value (origin, zero vector) is the pre-landing placeholder
    and is never rendered by a landed rover.
    """

    model_config = {"frozen": True}

    x: int = 0
    y: int = 0
    direction: Direction = (0, 0)
    stopped: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def with_stopped(self, stopped: bool) -> RoverState:
        """Return a copy with only the stopped flag changed."""
        return RoverState(x=self.x, y=self.y, direction=self.direction, stopped=stopped)

    def render(self) -> str:
        """Render as ``"(x, y) NAME"`` with an optional ``" stopped"`` suffix.

        A non-canonical direction renders as ``"unknown"`` with no position.
        """
        name = heading_name(self.direction)
        if name == UNKNOWN_HEADING:
            return name
        text = f"({self.x}, {self.y}) {name}"
        if self.stopped:
            text += " stopped"
        return text
