"""Logical pixel buffer the game is painted onto before rendering."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

from nsnake.collision import Line
from nsnake.geometry import Vector2

if TYPE_CHECKING:
    from nsnake.engine import GameEngine
    from nsnake.snake import Snake


class Color(enum.IntEnum):
    """The eight basic terminal colors, in curses numbering."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


BACKGROUND = Color.BLACK
FRUIT_COLOR = Color.YELLOW
SNAKE_COLOR = Color.WHITE


class PixelField:
    """NumPy-backed grid of colors, one per board cell.

    Cells are stored ``[y, x]`` to match NumPy row-major indexing.
    """

    def __init__(self, size: Vector2 | tuple[int, int]) -> None:
        width, height = size
        if width < 1 or height < 1:
            raise ValueError("PixelField dimensions must be positive.")
        self.size = Vector2(width, height)
        self.cells = np.full((height, width), BACKGROUND, dtype=np.int8)

    def clear(self, color: Color = BACKGROUND) -> None:
        """Fill every cell with a single color."""
        self.cells[:] = color

    def get(self, x: int, y: int) -> Color:
        """Return the color at the given coordinate."""
        self._check(x, y)
        return Color(int(self.cells[y, x]))

    def set(self, x: int, y: int, color: Color) -> None:
        """Set the color at the given coordinate."""
        self._check(x, y)
        self.cells[y, x] = color

    def _check(self, x: int, y: int) -> None:
        # Negative indices would silently wrap in NumPy.
        if not (0 <= x < self.size.x and 0 <= y < self.size.y):
            raise IndexError(f"Pixel ({x}, {y}) outside field of size {tuple(self.size)}.")


def draw_point(field: PixelField, location: Vector2, color: Color) -> None:
    field.set(location[0], location[1], color)


def draw_line(field: PixelField, line: Line, color: Color = SNAKE_COLOR) -> Vector2:
    """Paint *line* and return the cell just past its end."""
    point = Vector2(*line.start)
    step = line.direction.unit
    for _ in range(line.length):
        field.set(point.x, point.y, color)
        point = point + step
    return point


def draw_snake(field: PixelField, snake: Snake, color: Color = SNAKE_COLOR) -> None:
    """Paint every cell of *snake*, walking tail-ward from the head."""
    start = snake.head
    for segment in snake.segments:
        start = draw_line(
            field, Line(start, segment.direction.opposite, segment.length), color,
        )


def paint_game(field: PixelField, engine: GameEngine) -> PixelField:
    """Rebuild *field* from the current game state."""
    field.clear()
    draw_point(field, engine.fruit, FRUIT_COLOR)
    draw_snake(field, engine.snake)
    return field
