"""The rover, its command dispatcher, and the builder that wires it.

Two-tier error model:
- ``execute`` before ``land`` raises :class:`RoverNotLanded`.
- An unknown command token is reported in-band: the state is marked
  stopped and the rest of the batch is dropped.

INVARIANT: The dispatch loop itself never checks ``stopped`` between
tokens.  Halting after a vetoed move is the job of :class:`Compose`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from roverctl.domain.operations import Operation
from roverctl.domain.sensors import Sensor, SensorArray
from roverctl.domain.state import RoverState
from roverctl.domain.types import Direction, Heading, as_direction

logger = logging.getLogger(__name__)


class RoverNotLanded(Exception):
    """Raised when commands are executed before the rover has landed."""

    def __init__(self) -> None:
        super().__init__("RoverNotLanded")


class Rover:
    """A single agent on an unbounded integer grid.

    Build instances through :class:`RoverBuilder`.  The command mapping and
    sensors are fixed for the rover's lifetime; only the current
    :class:`RoverState` changes, and it is replaced rather than mutated.
    """

    def __init__(
        self,
        operations: Mapping[str, Operation],
        sensors: Iterable[Sensor] = (),
    ) -> None:
        self._operations: Mapping[str, Operation] = MappingProxyType(dict(operations))
        self._sensors = SensorArray(sensors)
        self._state = RoverState()
        self._landed = False

    @property
    def state(self) -> RoverState:
        return self._state

    @property
    def landed(self) -> bool:
        return self._landed

    @property
    def operations(self) -> Mapping[str, Operation]:
        """Read-only view of the token -> operation bindings."""
        return self._operations

    @property
    def sensors(self) -> SensorArray:
        return self._sensors

    def land(self, position: tuple[int, int], direction: Heading | Direction) -> None:
        """Place the rover at *position* facing *direction*.

        Can be called again at any time; each call discards the previous
        state and clears the stopped flag.
        """
        x, y = position
        self._landed = True
        self._state = RoverState(x=x, y=y, direction=as_direction(direction), stopped=False)
        logger.debug("Landed at %s", self._state.render())

    def execute(self, commands: Iterable[str]) -> RoverState:
        """Run *commands* one token at a time and return the final state.

        Raises:
            RoverNotLanded: If :meth:`land` has never been called.  No token
                is processed in that case.
        """
        if not self._landed:
            raise RoverNotLanded()

        self._state = self._state.with_stopped(False)

        for token in commands:
            operation = self._operations.get(token)
            if operation is None:
                logger.debug("Unknown command %r, halting batch", token)
                self._state = self._state.with_stopped(True)
                break
            was_stopped = self._state.stopped
            self._state = operation.apply(self._state, self._sensors)
            if self._state.stopped and not was_stopped:
                logger.debug("Command %r halted at %s", token, self._state.render())
        return self._state

    def danger_exists(self, x: int, y: int) -> bool:
        """True iff any installed sensor reports ``(x, y)`` unsafe."""
        return self._sensors.danger_exists(x, y)

    def __str__(self) -> str:
        return self._state.render()

    def __repr__(self) -> str:
        return f"Rover(landed={self._landed}, state={self._state.render()!r})"


class RoverBuilder:
    """Accumulates command bindings and sensors, then builds rovers.

    ``build()`` copies both collections, so a builder may be reused and
    later changes never leak into rovers already built.

    Usage::

        rover = (
            RoverBuilder()
            .program_command("f", move_forward())
            .program_command("r", rotate_right())
            .add_sensor(ObstacleSensor.of([(0, 2)]))
            .build()
        )
    """

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}
        self._sensors: list[Sensor] = []

    def program_command(self, token: str, operation: Operation) -> RoverBuilder:
        """Bind *token* to *operation*.  Rebinding a token replaces it.

        Raises:
            ValueError: If *token* is not exactly one character.
        """
        if not isinstance(token, str) or len(token) != 1:
            msg = f"Command token must be a single character, got {token!r}"
            raise ValueError(msg)
        self._operations[token] = operation
        return self

    def add_sensor(self, sensor: Sensor) -> RoverBuilder:
        """Append *sensor* to the safety checks."""
        self._sensors.append(sensor)
        return self

    def build(self) -> Rover:
        return Rover(dict(self._operations), list(self._sensors))
