"""Per-difficulty tier profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .constants import Difficulty
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class TierConfig:
    """Grid size, word length bounds and word target for one difficulty.

    ``max_attempts`` and ``hints`` are not used by the generator; they are
    handed to the game client alongside the grid.
    """

    difficulty: Difficulty
    size: int
    min_length: int
    max_length: int
    target_words: int
    max_attempts: int
    hints: int

    def __post_init__(self) -> None:
        if self.size <= 0 or self.target_words <= 0:
            raise ConfigurationError(f"Tier {self.difficulty.value}: size and target must be positive")
        if not 1 <= self.min_length <= self.max_length:
            raise ConfigurationError(
                f"Tier {self.difficulty.value}: invalid length range {self.min_length}-{self.max_length}"
            )
        if self.max_length > self.size:
            raise ConfigurationError(
                f"Tier {self.difficulty.value}: max length {self.max_length} exceeds grid side {self.size}"
            )

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size


TIERS: Dict[Difficulty, TierConfig] = {
    Difficulty.EASY: TierConfig(
        difficulty=Difficulty.EASY,
        size=10,
        min_length=3,
        max_length=6,
        target_words=8,
        max_attempts=8,
        hints=5,
    ),
    Difficulty.NORMAL: TierConfig(
        difficulty=Difficulty.NORMAL,
        size=12,
        min_length=3,
        max_length=8,
        target_words=12,
        max_attempts=6,
        hints=3,
    ),
    Difficulty.HARD: TierConfig(
        difficulty=Difficulty.HARD,
        size=14,
        min_length=4,
        max_length=10,
        target_words=16,
        max_attempts=4,
        hints=1,
    ),
}
