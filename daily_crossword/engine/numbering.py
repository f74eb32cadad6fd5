"""Crossword-style clue numbering."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..core.constants import Direction
from ..core.models import Clue, PlacedWord


_DIRECTION_ORDER = {Direction.ACROSS: 0, Direction.DOWN: 1}


def number_clues(placed_words: Iterable[PlacedWord]) -> List[Clue]:
    """Assign shared numbers to word start cells in row-major order.

    An across and a down word starting on the same cell share a number. The
    result depends only on final coordinates, never on placement order.
    """

    ordered = sorted(
        placed_words,
        key=lambda word: (word.row, word.col, _DIRECTION_ORDER[word.direction]),
    )
    numbers: Dict[Tuple[int, int], int] = {}
    next_number = 1
    clues: List[Clue] = []
    for word in ordered:
        key = (word.row, word.col)
        if key not in numbers:
            numbers[key] = next_number
            next_number += 1
        clues.append(
            Clue(
                number=numbers[key],
                direction=word.direction,
                text=word.category,
                row=word.row,
                col=word.col,
                length=word.length,
                answer=word.word,
            )
        )
    return clues


__all__ = ["number_clues"]
