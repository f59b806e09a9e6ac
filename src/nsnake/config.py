"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, seeding and pacing for a play session.

    Supports JSON serialization so a session can be reproduced.
    """

    board_width: int = 20
    board_height: int = 20
    seed: int | None = None
    initial_length: int = 3

    # Tick interval in milliseconds is tick_base_ms / (tick_offset + score).
    tick_base_ms: int = 10_000
    tick_offset: int = 40

    def __post_init__(self) -> None:
        if self.board_width < 1 or self.board_height < 1:
            raise ValueError("board_width and board_height must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.board_height // 2 + self.initial_length > self.board_height:
            raise ValueError(
                "initial_length does not fit the configured board height; "
                "increase board_height or reduce initial_length.",
            )
        if self.board_width * self.board_height <= self.initial_length:
            raise ValueError("Board leaves no free cell for fruit.")
        if self.tick_base_ms <= 0 or self.tick_offset <= 0:
            raise ValueError("tick_base_ms and tick_offset must be positive.")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be a non-negative integer.")

    @property
    def board_size(self) -> tuple[int, int]:
        return self.board_width, self.board_height

    def tick_interval(self, score: int) -> float:
        """Seconds to wait before the next tick; shrinks as score grows."""
        return self.tick_base_ms / (self.tick_offset + score) / 1000

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
