"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordPoolEntry:
    """A candidate word together with the category it was drawn from."""

    word: str
    category: str


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the grid. ``row``/``col`` locate its first letter."""

    word: str
    category: str
    row: int
    col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


@dataclass(frozen=True)
class Clue:
    """Numbered clue derived from a placed word."""

    number: int
    direction: Direction
    text: str
    row: int
    col: int
    length: int
    answer: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "direction": self.direction.value,
            "text": self.text,
            "row": self.row,
            "col": self.col,
            "length": self.length,
            "answer": self.answer,
        }
