"""Rover operations — moves, rotations, and composites.

The variant set is closed: MoveForward, MoveBackward, RotateLeft,
RotateRight, and Compose.  Every variant exposes one method,
``apply(state, oracle) -> state``; the rover installs the returned value.
Grid math lives in the free functions :func:`step` and :func:`turn`.

Operations also round-trip through config specs: a string names a
primitive, a list builds a :class:`Compose`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from roverctl.domain.state import RoverState

if TYPE_CHECKING:
    from roverctl.domain.sensors import SensorArray


def step(state: RoverState, oracle: SensorArray, sign: int) -> RoverState:
    """Advance one cell along the heading (``sign=1``) or against it (``sign=-1``).

    A vetoed target leaves position and heading unchanged and raises the
    stopped flag.
    """
    dx, dy = state.direction
    new_x = state.x + sign * dx
    new_y = state.y + sign * dy
    if oracle.danger_exists(new_x, new_y):
        return RoverState(x=state.x, y=state.y, direction=state.direction, stopped=True)
    return RoverState(x=new_x, y=new_y, direction=state.direction, stopped=False)


def turn(state: RoverState, clockwise: bool) -> RoverState:
    """Rotate the heading by 90 degrees in place.  Never vetoed."""
    dx, dy = state.direction
    direction = (dy, -dx) if clockwise else (-dy, dx)
    return RoverState(x=state.x, y=state.y, direction=direction, stopped=False)


class Operation(ABC):
    """A unit of rover behavior."""

    name: str = ""

    @abstractmethod
    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        """Return the state that follows *state*."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MoveForward(Operation):
    name = "forward"

    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        return step(state, oracle, 1)


class MoveBackward(Operation):
    name = "backward"

    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        return step(state, oracle, -1)


class RotateLeft(Operation):
    name = "left"

    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        return turn(state, clockwise=False)


class RotateRight(Operation):
    name = "right"

    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        return turn(state, clockwise=True)


class Compose(Operation):
    """Run children in order until the state reports stopped.

    The check happens before every child, so a flag raised before the
    composite started suppresses all of its children.  Composites nest.
    """

    name = "compose"

    def __init__(self, operations: Sequence[Operation]) -> None:
        self._operations: tuple[Operation, ...] = tuple(operations)

    @property
    def operations(self) -> tuple[Operation, ...]:
        return self._operations

    def apply(self, state: RoverState, oracle: SensorArray) -> RoverState:
        for operation in self._operations:
            if state.stopped:
                break
            state = operation.apply(state, oracle)
        return state

    def __repr__(self) -> str:
        return f"Compose({list(self._operations)!r})"


# --- Factories ---


def move_forward() -> MoveForward:
    return MoveForward()


def move_backward() -> MoveBackward:
    return MoveBackward()


def rotate_left() -> RotateLeft:
    return RotateLeft()


def rotate_right() -> RotateRight:
    return RotateRight()


def compose(*operations: Operation) -> Compose:
    return Compose(operations)


# --- Config specs ---

_PRIMITIVES: dict[str, type[Operation]] = {
    "forward": MoveForward,
    "f": MoveForward,
    "backward": MoveBackward,
    "b": MoveBackward,
    "left": RotateLeft,
    "l": RotateLeft,
    "right": RotateRight,
    "r": RotateRight,
}

DEFAULT_BINDINGS: dict[str, str] = {
    "f": "forward",
    "b": "backward",
    "l": "left",
    "r": "right",
}


def operation_from_spec(spec: Any) -> Operation:
    """Build an operation from a config spec.

    ``"forward"`` (or ``"f"``) and friends name primitives; a list such as
    ``["right", ["forward", "left"]]`` builds nested composites.

    Raises:
        ValueError: On unknown names, empty lists, or unsupported types.
    """
    if isinstance(spec, str):
        op_cls = _PRIMITIVES.get(spec.strip().lower())
        if op_cls is None:
            msg = f"Unknown operation: {spec!r}"
            raise ValueError(msg)
        return op_cls()
    if isinstance(spec, (list, tuple)):
        if not spec:
            msg = "Composite operation must have at least one step"
            raise ValueError(msg)
        return Compose([operation_from_spec(item) for item in spec])
    msg = f"Unsupported operation spec: {spec!r}"
    raise ValueError(msg)


def describe_operation(operation: Operation) -> str:
    """Render an operation the way it would be written in a config spec."""
    if isinstance(operation, Compose):
        inner = ", ".join(describe_operation(op) for op in operation.operations)
        return f"[{inner}]"
    return operation.name or type(operation).__name__
