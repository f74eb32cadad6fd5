"""Daily crossword generator.

This package exposes the public API surface via:

- ``daily_crossword.engine.generator.CrosswordGenerator``: builds one grid.
- ``daily_crossword.data.word_tables.WordTables``: per-language word tables.
- ``daily_crossword.io.daily.DailyCrosswordService``: date-seeded daily payloads.
- ``daily_crossword.io.web.create_app``: Flask app serving ``/api/crossword``.
"""

from .core.constants import Difficulty, Direction
from .core.tiers import TIERS, TierConfig
from .data.word_tables import WordTables
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from .io.daily import DailyCrosswordService

__all__ = [
    "CrosswordGenerator",
    "CrosswordResult",
    "DailyCrosswordService",
    "Difficulty",
    "Direction",
    "GeneratorConfig",
    "TIERS",
    "TierConfig",
    "WordTables",
]

__version__ = "0.1.0"
