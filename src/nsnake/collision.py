"""Collision tests against the board edge and the run-length encoded body."""

from __future__ import annotations

from typing import NamedTuple

from nsnake.geometry import Direction, Vector2
from nsnake.snake import Snake


class Line(NamedTuple):
    """``length`` cells starting at ``start`` and walking in ``direction``."""

    start: Vector2
    direction: Direction
    length: int


def point_on_line(point: Vector2, line: Line) -> bool:
    """Check whether *point* is one of the cells covered by *line*."""
    dx = point[0] - line.start[0]
    dy = point[1] - line.start[1]
    if line.direction is Direction.UP:
        return dx == 0 and 0 <= -dy < line.length
    if line.direction is Direction.DOWN:
        return dx == 0 and 0 <= dy < line.length
    if line.direction is Direction.LEFT:
        return dy == 0 and 0 <= -dx < line.length
    return dy == 0 and 0 <= dx < line.length


def point_inside_area(point: Vector2, size: Vector2) -> bool:
    """Check whether *point* lies in ``[0, size.x) x [0, size.y)``."""
    return 0 <= point[0] < size[0] and 0 <= point[1] < size[1]


def point_collides_with_snake(
    point: Vector2,
    snake: Snake,
    include_head_segment: bool = True,
) -> bool:
    """Check whether *point* is occupied by *snake*.

    Segments are stored in the direction of travel, so each one is tested
    as a line running tail-ward from the current cursor. With
    ``include_head_segment=False`` the first segment is skipped; the head
    always lies on it, so this restricts the test to the rest of the body.
    """
    start = snake.head
    for i, segment in enumerate(snake.segments):
        backwards = segment.direction.opposite
        if (include_head_segment or i > 0) and point_on_line(
            point, Line(start, backwards, segment.length),
        ):
            return True
        start = start + backwards.unit * segment.length
    return False


def snake_collided(snake: Snake, board_size: Vector2) -> bool:
    """Check whether the head has hit the body or left the board."""
    return (
        point_collides_with_snake(snake.head, snake, include_head_segment=False)
        or not point_inside_area(snake.head, board_size)
    )
