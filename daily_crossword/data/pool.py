"""Flatten a language's category table into a shuffled pool of candidates."""

from __future__ import annotations

from typing import Iterable, List, Mapping

from ..core.exceptions import EmptyPoolError
from ..core.models import WordPoolEntry
from ..engine.sequence import SeededSequence
from ..utils.logger import get_logger
from .normalization import is_grid_word, normalize_category, normalize_word


LOGGER = get_logger(__name__)


def build_word_pool(
    table: Mapping[str, Iterable[str]],
    min_length: int,
    max_length: int,
    sequence: SeededSequence,
) -> List[WordPoolEntry]:
    """Return every in-range word of ``table`` tagged with its category, shuffled.

    Words repeated across categories are kept; the placement engine skips a
    word identical to one already on the grid. Raises :class:`EmptyPoolError`
    when nothing fits.
    """

    pool: List[WordPoolEntry] = []
    for category, words in table.items():
        label = normalize_category(category)
        for raw in words:
            word = normalize_word(raw)
            if not min_length <= len(word) <= max_length:
                continue
            if not is_grid_word(word):
                LOGGER.debug("Skipping %r: not a plain run of letters", raw)
                continue
            pool.append(WordPoolEntry(word=word, category=label))

    if not pool:
        raise EmptyPoolError(
            f"No words between {min_length} and {max_length} letters in {len(table)} categories"
        )

    sequence.shuffle(pool)
    LOGGER.debug("Word pool holds %d entries", len(pool))
    return pool


__all__ = ["build_word_pool"]
