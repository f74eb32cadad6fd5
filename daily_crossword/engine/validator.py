"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from ..core.constants import EMPTY_CELL, Bounds, Direction
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import CrosswordResult


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished crossword."""

    def __init__(self, max_words: Optional[int] = None) -> None:
        self.max_words = max_words

    def validate(self, result: CrosswordResult) -> ValidationResult:
        try:
            coverage = self._check_words_match_grid(result)
            self._check_letters_valid(result)
            self._check_cells_covered(result, coverage)
            self._check_isolation(result, coverage)
            self._check_no_duplicate_words(result)
            self._check_clues(result)
            self._check_word_count(result)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_words_match_grid(self, result: CrosswordResult) -> Dict[Tuple[int, int], List[Direction]]:
        bounds = Bounds(rows=result.height, cols=result.width)
        coverage: Dict[Tuple[int, int], List[Direction]] = {}
        for word in result.placed_words:
            for (r, c), letter in zip(word.cells, word.word):
                if not bounds.contains(r, c):
                    raise ValidationError(f"Word {word.word} leaves the grid at ({r},{c})")
                if result.grid[r][c] != letter:
                    raise ValidationError(
                        f"Letter conflict at ({r},{c}): grid has '{result.grid[r][c]}', "
                        f"{word.word} needs '{letter}'"
                    )
                directions = coverage.setdefault((r, c), [])
                if word.direction in directions:
                    raise ValidationError(f"Collinear overlap of {word.word} at ({r},{c})")
                directions.append(word.direction)
        return coverage

    def _check_letters_valid(self, result: CrosswordResult) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter == EMPTY_CELL:
                    continue
                if len(letter) != 1 or not letter.isalpha() or letter != letter.upper():
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_cells_covered(
        self, result: CrosswordResult, coverage: Dict[Tuple[int, int], List[Direction]]
    ) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter != EMPTY_CELL and (r, c) not in coverage:
                    raise ValidationError(f"Orphan letter '{letter}' at ({r},{c})")

    def _check_isolation(
        self, result: CrosswordResult, coverage: Dict[Tuple[int, int], List[Direction]]
    ) -> None:
        bounds = Bounds(rows=result.height, cols=result.width)

        def free(r: int, c: int) -> bool:
            return not bounds.contains(r, c) or result.grid[r][c] == EMPTY_CELL

        for word in result.placed_words:
            dr, dc = word.direction.step
            end_r, end_c = word.cells[-1]
            if not free(word.row - dr, word.col - dc) or not free(end_r + dr, end_c + dc):
                raise ValidationError(f"Word {word.word} touches another word end to end")
            for r, c in word.cells:
                if len(coverage[(r, c)]) > 1:
                    continue
                if not free(r - dc, c - dr) or not free(r + dc, c + dr):
                    raise ValidationError(
                        f"Word {word.word} runs alongside another word at ({r},{c})"
                    )

    def _check_no_duplicate_words(self, result: CrosswordResult) -> None:
        seen: Set[str] = set()
        for word in result.placed_words:
            if word.word in seen:
                raise ValidationError(f"Duplicate word '{word.word}'")
            seen.add(word.word)

    def _check_clues(self, result: CrosswordResult) -> None:
        if len(result.clues) != len(result.placed_words):
            raise ValidationError(
                f"{len(result.clues)} clues for {len(result.placed_words)} placed words"
            )
        starts = {(w.row, w.col, w.direction) for w in result.placed_words}
        cell_by_number: Dict[int, Tuple[int, int]] = {}
        seen: Set[Tuple[int, Direction]] = set()
        for clue in result.clues:
            key = (clue.number, clue.direction)
            if key in seen:
                raise ValidationError(f"Clue {clue.number} {clue.direction.value} appears twice")
            seen.add(key)
            cell = cell_by_number.setdefault(clue.number, (clue.row, clue.col))
            if cell != (clue.row, clue.col):
                raise ValidationError(f"Clue number {clue.number} names two start cells")
            if (clue.row, clue.col, clue.direction) not in starts:
                raise ValidationError(f"Clue {clue.number} does not start a placed word")
            dr, dc = clue.direction.step
            read = "".join(
                result.grid[clue.row + dr * i][clue.col + dc * i] for i in range(clue.length)
            )
            if read != clue.answer:
                raise ValidationError(
                    f"Clue {clue.number} {clue.direction.value} reads '{read}', expected '{clue.answer}'"
                )

    def _check_word_count(self, result: CrosswordResult) -> None:
        if self.max_words is not None and len(result.placed_words) > self.max_words:
            raise ValidationError(
                f"{len(result.placed_words)} words placed, limit is {self.max_words}"
            )
