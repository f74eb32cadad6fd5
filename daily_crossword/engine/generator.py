"""Main crossword generator orchestration.

Pipeline for one call:
  1. Shuffle the language's word pool with a sequence seeded once.
  2. Anchor a starter word across the middle row, then grow the grid by
     crossing pool words with words already placed.
  3. Retry with the next starter when too few words fit.
  4. Number the clues from the final layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.exceptions import ConfigurationError, ValidationError
from ..core.models import Clue, PlacedWord, WordPoolEntry
from ..core.tiers import TierConfig
from ..data.pool import build_word_pool
from ..utils.logger import get_logger
from .grid import CrosswordGrid, GridConfig
from .numbering import number_clues
from .sequence import SEQUENCE_KINDS, SeededSequence, make_sequence
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    tier: TierConfig
    seed: int
    sequence: str = "hash"
    starter_attempts: int = 5
    attempt_budget: int = 1500
    sufficiency_slack: int = 1

    def __post_init__(self) -> None:
        if self.starter_attempts < 1:
            raise ConfigurationError("starter_attempts must be at least 1")
        if self.attempt_budget < 0:
            raise ConfigurationError("attempt_budget cannot be negative")
        if self.sufficiency_slack < 0:
            raise ConfigurationError("sufficiency_slack cannot be negative")
        if self.sequence not in SEQUENCE_KINDS:
            raise ConfigurationError(f"Unknown sequence kind '{self.sequence}'")

    @property
    def sufficient_words(self) -> int:
        return max(1, self.tier.target_words - self.sufficiency_slack)

    def to_grid_config(self) -> GridConfig:
        return GridConfig(height=self.tier.height, width=self.tier.width)


@dataclass(frozen=True)
class CrosswordResult:
    grid: Tuple[Tuple[str, ...], ...]
    placed_words: Tuple[PlacedWord, ...]
    clues: Tuple[Clue, ...]
    width: int
    height: int
    seed: Optional[int] = None

    @classmethod
    def from_grid(cls, grid: CrosswordGrid, seed: Optional[int] = None) -> "CrosswordResult":
        return cls(
            grid=tuple(tuple(row) for row in grid.to_rows()),
            placed_words=tuple(grid.placed),
            clues=tuple(number_clues(grid.placed)),
            width=grid.bounds.cols,
            height=grid.bounds.rows,
            seed=seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "clues": [clue.to_dict() for clue in self.clues],
            "width": self.width,
            "height": self.height,
        }


class CrosswordGenerator:
    """Greedy intersection-based grid builder with starter retries."""

    def __init__(self, config: GeneratorConfig, validator: Optional[GridValidator] = None) -> None:
        self.config = config
        self.validator = validator or GridValidator(max_words=config.tier.target_words)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, table: Mapping[str, Iterable[str]]) -> CrosswordResult:
        """Build a crossword from a ``{category: words}`` table.

        Raises :class:`EmptyPoolError` when no word fits the tier.
        """

        tier = self.config.tier
        sequence = make_sequence(self.config.seed, self.config.sequence)
        pool = build_word_pool(table, tier.min_length, tier.max_length, sequence)
        grid = self.place(pool, sequence)
        result = CrosswordResult.from_grid(grid, seed=self.config.seed)

        validation = self.validator.validate(result)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")
        LOGGER.info(
            "Crossword generation completed with %s/%s words (%s tier)",
            len(result.placed_words),
            tier.target_words,
            tier.difficulty.value,
        )
        return result

    def place(self, pool: Sequence[WordPoolEntry], sequence: SeededSequence) -> CrosswordGrid:
        """Try successive starters until enough words fit.

        When every starter falls short, the last grid whose starter fitted is
        returned.
        """

        last: Optional[CrosswordGrid] = None
        attempts = min(self.config.starter_attempts, len(pool))
        for attempt in range(attempts):
            starter = pool[attempt]
            LOGGER.debug("Starter attempt %s/%s: %s", attempt + 1, attempts, starter.word)
            grid = CrosswordGrid(self.config.to_grid_config())
            if grid.place_starter(starter) is None:
                LOGGER.debug("Starter %s does not fit the grid", starter.word)
                continue

            self._place_remaining(grid, pool, attempt, sequence)
            last = grid
            if len(grid) >= self.config.sufficient_words:
                return grid
            LOGGER.debug(
                "Starter %s placed only %s words (need %s)",
                starter.word,
                len(grid),
                self.config.sufficient_words,
            )

        if last is None:
            LOGGER.warning("No starter word fits a %sx%s grid", self.config.tier.height, self.config.tier.width)
            return CrosswordGrid(self.config.to_grid_config())
        LOGGER.warning(
            "Accepting %s words after %s starters (target %s)",
            len(last),
            attempts,
            self.config.tier.target_words,
        )
        return last

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_remaining(
        self,
        grid: CrosswordGrid,
        pool: Sequence[WordPoolEntry],
        starter_index: int,
        sequence: SeededSequence,
    ) -> None:
        target = self.config.tier.target_words
        evaluations = 0
        for index, entry in enumerate(pool):
            if len(grid) >= target:
                break
            if evaluations >= self.config.attempt_budget:
                LOGGER.debug("Attempt budget of %s exhausted", self.config.attempt_budget)
                break
            if index == starter_index or grid.contains_word(entry.word):
                continue
            evaluations += 1
            self._attempt_crossing(grid, entry, sequence)

    def _attempt_crossing(
        self, grid: CrosswordGrid, entry: WordPoolEntry, sequence: SeededSequence
    ) -> bool:
        targets: List[PlacedWord] = sequence.shuffled(grid.placed)
        for target in targets:
            crossings = sequence.shuffled(grid.intersections(entry.word, target.word))
            for i, j in crossings:
                row, col, direction = grid.crossing_start(target, i, j)
                if grid.can_place(entry.word, row, col, direction):
                    grid.place_word(entry, row, col, direction)
                    return True
        return False
