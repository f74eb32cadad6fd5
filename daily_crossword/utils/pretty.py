"""Pretty-print helpers for crossword results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import EMPTY_CELL, Direction

if TYPE_CHECKING:
    from ..engine.generator import CrosswordResult


EMPTY_SYMBOL = "."


def format_grid(result: CrosswordResult) -> str:
    width = result.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(result.grid):
        row_render = " ".join(f"{(letter if letter != EMPTY_CELL else EMPTY_SYMBOL):>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(result: CrosswordResult) -> str:
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value.capitalize())
        for clue in result.clues:
            if clue.direction is direction:
                lines.append(f"  {clue.number:>2}. {clue.text} ({clue.length})")
    return "\n".join(lines)


def pretty_print_result(result: CrosswordResult, *, label: str | None = None, stream=None) -> None:
    """Print the grid, clue list and word count in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(result), file=stream)
    print(file=stream)
    print(format_clues(result), file=stream)
    print(file=stream)
    print(f"Words: {len(result.placed_words)}  Size: {result.height} x {result.width}", file=stream)
    if result.seed is not None:
        print(f"Seed: {result.seed}", file=stream)
