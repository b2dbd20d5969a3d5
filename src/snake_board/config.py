"""Board configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MIN_ROWS = 1
# The initial snake occupies columns 1-3.
MIN_COLS = 4


class BoardConfigError(ValueError):
    """Raised when a board cannot host the initial snake."""


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions and RNG seed for a single game.

    Supports JSON serialization for reproducibility.
    """

    rows: int = 15
    cols: int = 15
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < MIN_ROWS:
            raise BoardConfigError(f"rows must be at least {MIN_ROWS}, got {self.rows}.")
        if self.cols < MIN_COLS:
            raise BoardConfigError(f"cols must be at least {MIN_COLS}, got {self.cols}.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> BoardConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
