"""Shared constants and enumerations for the daily crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Difficulty(str, Enum):
    """Difficulty tiers exposed to players."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


EMPTY_CELL = ""
DEFAULT_LANGUAGE = "en"
DEFAULT_DIFFICULTY = Difficulty.NORMAL

# Degenerate response dimensions when no word fits the requested tier.
FALLBACK_WIDTH = 5
FALLBACK_HEIGHT = 5

# Puzzle #1 was published on this day.
EPOCH_DATE = "2024-01-01"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
