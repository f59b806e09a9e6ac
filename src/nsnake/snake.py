"""Run-length encoded snake body and its movement."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from nsnake.geometry import Direction, Vector2


@dataclass
class Segment:
    """A straight run of body cells walked in ``direction``."""

    direction: Direction
    length: int


class Snake:
    """A snake stored as its head plus a deque of segments.

    ``segments[0]`` ends at the head and carries the current heading;
    ``segments[-1]`` holds the tail. The head is the first cell of the
    first segment, so the snake occupies ``sum(lengths)`` cells. Memory
    grows with the number of turns, not with the snake's length.
    """

    def __init__(self, head: Vector2, segments: list[Segment] | None = None) -> None:
        self.head = Vector2(*head)
        self.segments: deque[Segment] = deque(segments or [])

    @classmethod
    def spawn(
        cls,
        head: Vector2,
        direction: Direction = Direction.UP,
        length: int = 3,
    ) -> Snake:
        """Create a straight snake of *length* cells ending at *head*."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        return cls(head, [Segment(direction, length)])

    @property
    def heading(self) -> Direction:
        """Direction of the first segment."""
        return self.segments[0].direction

    def __len__(self) -> int:
        return sum(segment.length for segment in self.segments)

    def move_head(self, direction: Direction) -> None:
        """Advance the head one cell, growing the snake by one.

        A change of direction starts a new, empty segment which is then
        lengthened like any other.
        """
        if not self.segments or self.segments[0].direction != direction:
            self.segments.appendleft(Segment(direction, 0))
        self.head = self.head + direction.unit
        self.segments[0].length += 1

    def shrink_tail(self) -> None:
        """Remove the last cell of the snake.

        Raises :class:`IndexError` on an empty chain.
        """
        tail = self.segments[-1]
        tail.length -= 1
        if tail.length <= 0:
            self.segments.pop()

    def cells(self) -> Iterator[Vector2]:
        """Yield every occupied cell, head first."""
        point = self.head
        for segment in self.segments:
            step = segment.direction.opposite.unit
            for _ in range(segment.length):
                yield point
                point = point + step

    def copy(self) -> Snake:
        """Return an independent copy (segments are mutable)."""
        return Snake(
            self.head,
            [Segment(s.direction, s.length) for s in self.segments],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self.head == other.head and list(self.segments) == list(other.segments)

    def __repr__(self) -> str:
        segs = ", ".join(f"({s.direction.value}, {s.length})" for s in self.segments)
        return f"Snake(head={tuple(self.head)}, segments=[{segs}])"

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "segments": [[s.direction.value, s.length] for s in self.segments],
        }
