"""Integer vectors and cardinal directions."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Vector2(NamedTuple):
    """An integer point or offset on the board, ``(x, y)`` with y growing down."""

    x: int
    y: int

    def __add__(self, other: Vector2) -> Vector2:  # type: ignore[override]
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: int) -> Vector2:  # type: ignore[override]
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


class Direction(enum.Enum):
    """The four directions the snake can travel in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def unit(self) -> Vector2:
        return _UNIT_VECTORS[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_UNIT_VECTORS: dict[Direction, Vector2] = {
    Direction.UP: Vector2(0, -1),
    Direction.DOWN: Vector2(0, 1),
    Direction.LEFT: Vector2(-1, 0),
    Direction.RIGHT: Vector2(1, 0),
}


def opposite(direction: Direction) -> Direction:
    """Return the reverse of *direction*."""
    return _OPPOSITES[direction]


def unit(direction: Direction) -> Vector2:
    """Return the one-cell step taken when moving in *direction*."""
    return _UNIT_VECTORS[direction]
