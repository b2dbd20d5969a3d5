"""Grid representation for the board engine."""

from __future__ import annotations

import enum

import numpy as np

from snake_board.snake import Position


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array.

    ``OUTSIDE`` is only produced while classifying a move target and is
    never written into the grid.
    """

    OUTSIDE = -1
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed board of fixed shape.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be positive.")
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        if cell_type == CellType.OUTSIDE:
            raise ValueError("OUTSIDE cannot be stored in the grid.")
        self.cells[row, col] = cell_type

    def empty_cells(self) -> list[Position]:
        """Return all empty cell coordinates in row-major order."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return [
            Position(r, c)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def is_full(self) -> bool:
        return not np.any(self.cells == CellType.EMPTY)

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cells == cell_type))

    def snapshot(self) -> np.ndarray:
        """Return an independent copy of the cell array."""
        return self.cells.copy()

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.cells.tolist(),
        }
