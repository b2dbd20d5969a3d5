"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_board.grid import CellType

if TYPE_CHECKING:
    from snake_board.grid import Grid
    from snake_board.snake import Position

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Keeps at most one food cell on the grid.

    Uses a NumPy RNG so placement can be seeded and reproduced.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Position | None = None

    def has_food(self) -> bool:
        """Whether the tracked food cell is still on the board."""
        if self.position is None:
            return False
        return self.grid.get(*self.position) == CellType.FOOD

    def spawn(self) -> Position | None:
        """Place one food cell on a uniformly random empty cell.

        Returns the new position, or ``None`` if the board is full or
        food is already present.
        """
        if self.has_food():
            logger.debug("Food already present at %s.", self.position)
            return None

        empty = self.grid.empty_cells()
        if not empty:
            logger.info("No empty cells left; food placement skipped.")
            self.position = None
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.grid.set(pos.row, pos.col, CellType.FOOD)
        self.position = pos
        return pos

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.has_food() else None,
        }
