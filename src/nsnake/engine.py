"""Tick-based game engine composing the snake, collision and fruit logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from nsnake.collision import point_collides_with_snake, snake_collided
from nsnake.geometry import Direction, Vector2
from nsnake.snake import Snake

logger = logging.getLogger(__name__)

DEATH_MESSAGE = "You are dead. Press [Enter] to reset."
WIN_MESSAGE = "You win! Press [Enter] to reset."


class Action(enum.Enum):
    """Input symbols produced by the input adapter."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    QUIT = "quit"


_ACTION_DIRECTIONS: dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


class GameEngine:
    """Single-player snake state machine.

    Each call to :meth:`tick` consumes at most one :class:`Action` and
    either commits the move or rolls the body back to its pre-tick state.
    The random generator is passed in on every call that needs it; the
    engine never owns one.
    """

    def __init__(
        self,
        board_size: Vector2 | tuple[int, int],
        rng: np.random.Generator,
        initial_length: int = 3,
    ) -> None:
        width, height = board_size
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive.")
        if initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if height // 2 + initial_length > height:
            raise ValueError("Initial snake does not fit the board height.")
        self.board_size = Vector2(width, height)
        self.initial_length = initial_length
        self.alive = True
        self.score = 0
        self.message = ""
        self.tick_count = 0
        self.snake = Snake.spawn(self._center(), Direction.UP, initial_length)
        self.fruit = Vector2(0, 0)
        self.reset(rng)

    def _center(self) -> Vector2:
        return Vector2(self.board_size.x // 2, self.board_size.y // 2)

    def reset(self, rng: np.random.Generator) -> None:
        """Start a new round with a centred snake heading up."""
        self.alive = True
        self.score = 0
        self.message = ""
        self.tick_count = 0
        self.snake = Snake.spawn(self._center(), Direction.UP, self.initial_length)
        if not self.spawn_fruit(rng):
            raise ValueError("Board has no room for fruit next to the initial snake.")
        logger.info("Game reset on a %dx%d board.", *self.board_size)

    def spawn_fruit(self, rng: np.random.Generator) -> bool:
        """Place the fruit on a random free cell.

        Draws uniformly over the whole board and redraws until the cell is
        not occupied by the snake. Returns False, leaving the fruit where it
        was, when the snake fills the board.
        """
        width, height = self.board_size
        if len(self.snake) >= width * height:
            logger.debug("No free cell available for fruit.")
            return False

        while True:
            i = int(rng.integers(width * height))
            candidate = Vector2(i % width, i // width)
            if not point_collides_with_snake(candidate, self.snake):
                self.fruit = candidate
                logger.debug("Fruit spawned at %s.", tuple(candidate))
                return True

    def tick(self, action: Action | None, rng: np.random.Generator) -> dict:
        """Advance the game by one step.

        Returns the full game state as a serializable dict.
        """
        if not self.alive:
            if action is Action.CONFIRM:
                self.reset(rng)
            return self.get_state()

        heading = self.snake.heading
        direction = _ACTION_DIRECTIONS.get(action, heading)
        if direction is heading.opposite:
            direction = heading

        previous = self.snake.copy()
        self.snake.move_head(direction)
        self.tick_count += 1

        if self.snake.head == self.fruit:
            self.score += 1
            if not self.spawn_fruit(rng):
                self.alive = False
                self.message = WIN_MESSAGE
                logger.info("Board filled at tick %d with score %d.", self.tick_count, self.score)
                return self.get_state()
        else:
            self.snake.shrink_tail()

        if snake_collided(self.snake, self.board_size):
            self.snake = previous
            self.alive = False
            self.message = DEATH_MESSAGE
            logger.info("Snake died at tick %d with score %d.", self.tick_count, self.score)

        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick_count,
            "score": self.score,
            "alive": self.alive,
            "message": self.message,
            "board_size": list(self.board_size),
            "fruit": list(self.fruit),
            "snake": self.snake.to_dict(),
        }
