"""Safety sensors — pluggable predicates that veto unsafe target cells.

A sensor answers one question: is cell ``(x, y)`` safe to enter?  The rover
holds an ordered :class:`SensorArray`; a move is vetoed when any sensor
reports danger.

INVARIANT: Sensors are side-effect free and never hold rover state.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sensor(Protocol):
    """Anything with an ``is_safe(x, y)`` predicate."""

    def is_safe(self, x: int, y: int) -> bool: ...


class SensorArray:
    """Ordered, fixed collection of sensors queried as one oracle."""

    def __init__(self, sensors: Iterable[Sensor] = ()) -> None:
        self._sensors: tuple[Sensor, ...] = tuple(sensors)

    def danger_exists(self, x: int, y: int) -> bool:
        """True iff any sensor reports ``(x, y)`` unsafe.

        Stops querying at the first unsafe report.
        """
        return any(not sensor.is_safe(x, y) for sensor in self._sensors)

    def __iter__(self) -> Iterator[Sensor]:
        return iter(self._sensors)

    def __len__(self) -> int:
        return len(self._sensors)


# --- Bundled sensors ---


@dataclass(frozen=True)
class BoundsSensor:
    """Unsafe outside an inclusive rectangle.  ``None`` leaves a side open."""

    min_x: int | None = None
    max_x: int | None = None
    min_y: int | None = None
    max_y: int | None = None

    def is_safe(self, x: int, y: int) -> bool:
        if self.min_x is not None and x < self.min_x:
            return False
        if self.max_x is not None and x > self.max_x:
            return False
        if self.min_y is not None and y < self.min_y:
            return False
        if self.max_y is not None and y > self.max_y:
            return False
        return True


@dataclass(frozen=True)
class ObstacleSensor:
    """Unsafe on any of a fixed set of cells."""

    cells: frozenset[tuple[int, int]] = field(default_factory=frozenset)

    @classmethod
    def of(cls, cells: Iterable[Iterable[int]]) -> ObstacleSensor:
        """Build from any iterable of ``(x, y)`` pairs (lists from TOML included)."""
        return cls(frozenset((int(x), int(y)) for x, y in cells))

    def is_safe(self, x: int, y: int) -> bool:
        return (x, y) not in self.cells


@dataclass(frozen=True)
class RangeSensor:
    """Unsafe beyond *max_distance* (Euclidean) from *origin*."""

    max_distance: float
    origin: tuple[int, int] = (0, 0)

    def is_safe(self, x: int, y: int) -> bool:
        ox, oy = self.origin
        return math.hypot(x - ox, y - oy) <= self.max_distance
