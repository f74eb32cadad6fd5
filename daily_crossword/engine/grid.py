"""Grid representation and placement helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ..core.constants import EMPTY_CELL, Bounds, Direction
from ..core.exceptions import SlotPlacementError
from ..core.models import PlacedWord, WordPoolEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Dimensions of the letter grid."""

    height: int
    width: int

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class CrosswordGrid:
    """Letter matrix plus the words committed to it.

    Owned by a single generation call; mutated in place as words are placed.
    """

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.bounds = config.bounds()
        self.cells: List[List[str]] = [
            [EMPTY_CELL for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self.placed: List[PlacedWord] = []
        self._placed_words: Set[str] = set()
        self._cell_directions: Dict[Tuple[int, int], Set[Direction]] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def is_free(self, row: int, col: int) -> bool:
        """True when ``(row, col)`` is off-grid or holds no letter."""
        if not self.bounds.contains(row, col):
            return True
        return self.cells[row][col] == EMPTY_CELL

    def contains_word(self, word: str) -> bool:
        return word in self._placed_words

    def __len__(self) -> int:
        return len(self.placed)

    # ------------------------------------------------------------------
    # Placement rules
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check the isolation rule for ``word`` starting at ``(row, col)``.

        Letters may only touch existing letters where they cross a
        perpendicular word on the same letter, and the word may not extend
        another word end to end.
        """

        dr, dc = direction.step
        length = len(word)
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        if not (self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)):
            return False

        # Perpendicular neighbours of a letter cell.
        pr, pc = dc, dr
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            existing = self.cells[r][c]
            if existing != EMPTY_CELL:
                if existing != letter:
                    return False
                # A shared cell must be a crossing, never a collinear overlap.
                if direction in self._cell_directions.get((r, c), ()):
                    return False
                continue
            if not (self.is_free(r - pr, c - pc) and self.is_free(r + pr, c + pc)):
                return False

        if not self.is_free(row - dr, col - dc):
            return False
        if not self.is_free(end_row + dr, end_col + dc):
            return False
        return True

    def place_word(
        self, entry: WordPoolEntry, row: int, col: int, direction: Direction
    ) -> PlacedWord:
        if not self.can_place(entry.word, row, col, direction):
            raise SlotPlacementError(
                f"Cannot place {entry.word} {direction.value} at ({row},{col})"
            )
        placed = PlacedWord(
            word=entry.word,
            category=entry.category,
            row=row,
            col=col,
            direction=direction,
        )
        for (r, c), letter in zip(placed.cells, placed.word):
            self.cells[r][c] = letter
            self._cell_directions.setdefault((r, c), set()).add(direction)
        self.placed.append(placed)
        self._placed_words.add(placed.word)
        LOGGER.debug("Placed %s %s at (%s,%s)", placed.word, direction.value, row, col)
        return placed

    def place_starter(self, entry: WordPoolEntry) -> Optional[PlacedWord]:
        """Place the first word across the middle row, centered.

        Returns ``None`` when the word is wider than the grid.
        """

        length = len(entry.word)
        if length > self.bounds.cols:
            return None
        row = self.bounds.rows // 2
        col = min(max((self.bounds.cols - length) // 2, 0), self.bounds.cols - length)
        if not self.can_place(entry.word, row, col, Direction.ACROSS):
            return None
        return self.place_word(entry, row, col, Direction.ACROSS)

    # ------------------------------------------------------------------
    # Crossing geometry
    # ------------------------------------------------------------------
    @staticmethod
    def intersections(word: str, target: str) -> List[Tuple[int, int]]:
        """Every ``(i, j)`` with ``word[i] == target[j]``."""
        return [
            (i, j)
            for i, letter in enumerate(word)
            for j, other in enumerate(target)
            if letter == other
        ]

    @staticmethod
    def crossing_start(target: PlacedWord, i: int, j: int) -> Tuple[int, int, Direction]:
        """Start cell and direction of a word whose ``i``-th letter crosses
        ``target`` at its ``j``-th letter."""

        direction = target.direction.perpendicular
        if direction is Direction.DOWN:
            return target.row - i, target.col + j, direction
        return target.row + j, target.col - i, direction

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self) -> List[List[str]]:
        return [list(row) for row in self.cells]
