"""Directions, positions, and the ordered snake body."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def opposite(self) -> Direction:
        """Return the direction that would cause a 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int

    def translate(self, direction: Direction) -> Position:
        """Return the adjacent position one step in *direction*."""
        dr, dc = direction.value
        return Position(self.row + dr, self.col + dc)


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake does not
    know about the grid, callers keep the two in sync.
    """

    def __init__(self, segments: Iterable[Position] = ()) -> None:
        self.body: deque[Position] = deque(Position(*seg) for seg in segments)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail coordinate."""
        return self.body[-1]

    def add_head(self, position: Position) -> None:
        self.body.appendleft(position)

    def remove_tail(self) -> Position:
        """Drop the tail segment and return the vacated coordinate."""
        return self.body.pop()

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def __contains__(self, position: object) -> bool:
        return position in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
