"""Step-based board engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from snake_board.config import BoardConfig
from snake_board.food import FoodSpawner
from snake_board.grid import CellType, Grid
from snake_board.snake import Direction, Position, Snake

logger = logging.getLogger(__name__)

_MAX_PENDING_DIRECTIONS = 2
_INITIAL_COLUMNS = (1, 2, 3)


class BoardEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, the snake body, and the food spawner, and
    keeps the grid and body in sync on every mutation. Each call to
    :meth:`advance` moves the snake by one cell. Once the game is over,
    nothing changes again; a new game is a new engine.
    """

    def __init__(
        self,
        rows: int = 15,
        cols: int = 15,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = BoardConfig(rows=rows, cols=cols, seed=seed)
        self.grid = Grid(rows, cols)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.snake = Snake()
        row = rows // 2
        for col in _INITIAL_COLUMNS:
            self._add_head(Position(row, col))

        self.food = FoodSpawner(self.grid, rng=self.rng)
        self.food.spawn()

        self._direction = Direction.RIGHT
        self._pending: deque[Direction] = deque()
        self._score = 0
        self._tick = 0
        self._game_over = False

    @classmethod
    def from_config(cls, config: BoardConfig) -> BoardEngine:
        return cls(rows=config.rows, cols=config.cols, seed=config.seed)

    # --- queries ---

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def direction(self) -> Direction:
        """The committed direction used by the most recent move."""
        return self._direction

    @property
    def pending_directions(self) -> tuple[Direction, ...]:
        return tuple(self._pending)

    @property
    def score(self) -> int:
        return self._score

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def game_over(self) -> bool:
        return self._game_over

    def head_position(self) -> Position:
        return self.snake.head

    def tail_position(self) -> Position:
        return self.snake.tail

    def snake_positions(self) -> list[Position]:
        """Return the body segments, head first."""
        return list(self.snake)

    def grid_snapshot(self) -> np.ndarray:
        return self.grid.snapshot()

    # --- input ---

    def change_direction(self, direction: Direction) -> None:
        """Buffer a direction change for an upcoming tick.

        Requests are dropped silently when two changes are already
        buffered, when *direction* repeats or reverses the last buffered
        (or committed) direction, or once the game is over.
        """
        if not self._can_change_direction(direction):
            logger.debug("Dropped direction request %s.", direction.name)
            return
        self._pending.append(direction)

    def _can_change_direction(self, direction: Direction) -> bool:
        if self._game_over:
            return False
        if len(self._pending) >= _MAX_PENDING_DIRECTIONS:
            return False
        last = self._pending[-1] if self._pending else self._direction
        return direction != last and direction != last.opposite()

    # --- transition ---

    def advance(self) -> None:
        """Advance the game by one tick."""
        if self._game_over:
            return

        if self._pending:
            self._direction = self._pending.popleft()

        new_head = self.snake.head.translate(self._direction)
        hit = self._classify(new_head)

        if hit in (CellType.OUTSIDE, CellType.SNAKE):
            self._end_game()
            return

        if hit == CellType.EMPTY:
            self._remove_tail()
            self._add_head(new_head)
        else:
            self._add_head(new_head)
            self._score += 1
            self.food.spawn()

        self._tick += 1

    def _classify(self, position: Position) -> CellType:
        """Return what the head would run into at *position*."""
        if not self.grid.in_bounds(*position):
            return CellType.OUTSIDE
        # The tail leaves its cell on this same tick.
        if position == self.snake.tail:
            return CellType.EMPTY
        return self.grid.get(*position)

    def _add_head(self, position: Position) -> None:
        self.snake.add_head(position)
        self.grid.set(position.row, position.col, CellType.SNAKE)

    def _remove_tail(self) -> None:
        tail = self.snake.remove_tail()
        self.grid.set(tail.row, tail.col, CellType.EMPTY)

    def _end_game(self) -> None:
        self._game_over = True
        self._tick += 1
        logger.info("Game over at tick %d with score %d.", self._tick, self._score)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self._tick,
            "score": self._score,
            "game_over": self._game_over,
            "direction": self._direction.name,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
