"""nsnake — terminal snake with a run-length encoded body."""

from nsnake.collision import (
    Line,
    point_collides_with_snake,
    point_inside_area,
    point_on_line,
    snake_collided,
)
from nsnake.config import GameConfig
from nsnake.engine import Action, GameEngine
from nsnake.geometry import Direction, Vector2, opposite, unit
from nsnake.pixels import Color, PixelField, paint_game
from nsnake.render import Glyph, HalfBlockRenderer, RenderCell, color_pair_index
from nsnake.snake import Segment, Snake

__all__ = [
    "Action",
    "Color",
    "Direction",
    "GameConfig",
    "GameEngine",
    "Glyph",
    "HalfBlockRenderer",
    "Line",
    "PixelField",
    "RenderCell",
    "Segment",
    "Snake",
    "Vector2",
    "color_pair_index",
    "opposite",
    "paint_game",
    "point_collides_with_snake",
    "point_inside_area",
    "point_on_line",
    "snake_collided",
    "unit",
]
