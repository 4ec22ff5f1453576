"""Heading vectors and direction naming.

A direction is an ordered pair ``(dx, dy)``.  The four canonical values
are the members of :class:`Heading`; anything else renders as ``unknown``.
"""

from __future__ import annotations

from enum import Enum

Direction = tuple[int, int]

UNKNOWN_HEADING = "unknown"


class Heading(Enum):
    """The four canonical unit vectors, clockwise from north."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_ALIASES: dict[str, Heading] = {
    "n": Heading.NORTH,
    "e": Heading.EAST,
    "s": Heading.SOUTH,
    "w": Heading.WEST,
}


def heading_name(direction: Direction) -> str:
    """Return ``NORTH``/``EAST``/``SOUTH``/``WEST``, or ``unknown``."""
    try:
        return Heading(tuple(direction)).name
    except ValueError:
        return UNKNOWN_HEADING


def parse_heading(text: str) -> Heading:
    """Parse a heading name (``north``, ``N``, ``West`` ...).

    Raises:
        ValueError: If *text* names no canonical heading.
    """
    key = text.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Heading[key.upper()]
    except KeyError:
        msg = f"Unknown heading: {text!r}"
        raise ValueError(msg) from None


def as_direction(direction: Heading | Direction) -> Direction:
    """Normalize a :class:`Heading` or raw pair to a plain ``(dx, dy)`` tuple."""
    if isinstance(direction, Heading):
        return direction.value
    dx, dy = direction
    return (int(dx), int(dy))


def parse_position(text: str) -> tuple[int, int]:
    """Parse ``"x,y"`` (whitespace and surrounding parentheses allowed).

    Raises:
        ValueError: If *text* is not two comma-separated integers.
    """
    parts = text.strip().strip("()").split(",")
    if len(parts) != 2:
        msg = f"Position must look like 'x,y', got {text!r}"
        raise ValueError(msg)
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        msg = f"Position must contain integers, got {text!r}"
        raise ValueError(msg) from None
