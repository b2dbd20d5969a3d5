"""Snake board: grid-based snake rules engine."""

from snake_board.config import BoardConfig, BoardConfigError
from snake_board.engine import BoardEngine
from snake_board.food import FoodSpawner
from snake_board.grid import CellType, Grid
from snake_board.snake import Direction, Position, Snake

__all__ = [
    "BoardConfig",
    "BoardConfigError",
    "BoardEngine",
    "CellType",
    "Direction",
    "FoodSpawner",
    "Grid",
    "Position",
    "Snake",
]
