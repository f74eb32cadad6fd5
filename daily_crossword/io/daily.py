"""Daily puzzle service: turns ``(lang, difficulty, date)`` into a response."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from ..core.constants import (
    DEFAULT_DIFFICULTY,
    EPOCH_DATE,
    FALLBACK_HEIGHT,
    FALLBACK_WIDTH,
    Difficulty,
)
from ..core.exceptions import EmptyPoolError, InvalidDateError
from ..core.tiers import TIERS, TierConfig
from ..data.word_tables import WordTables
from ..engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def date_seed(date_string: str) -> int:
    """Additive hash of an ISO date string, stable for a calendar day."""
    return sum(ord(char) for char in date_string)


def puzzle_number(day: date) -> int:
    """Sequential puzzle index; the epoch day is puzzle #1."""
    return (day - date.fromisoformat(EPOCH_DATE)).days + 1


def parse_date(value: Optional[str], today: Optional[date] = None) -> date:
    """Parse ``YYYY-MM-DD`` or an ISO timestamp; blank means today (UTC)."""

    if value is None or not value.strip():
        return today or datetime.now(timezone.utc).date()
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise InvalidDateError(f"Invalid date '{value}', expected YYYY-MM-DD") from None
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def resolve_difficulty(value: Optional[str]) -> Difficulty:
    try:
        return Difficulty((value or "").strip().lower())
    except ValueError:
        return DEFAULT_DIFFICULTY


class DailyCrosswordService:
    """Build the daily crossword payload for the web endpoint and the CLI.

    The word tables are shared read-only; every call builds fresh state, so
    one instance serves concurrent requests.
    """

    def __init__(
        self,
        tables: WordTables,
        tiers: Optional[Dict[Difficulty, TierConfig]] = None,
        sequence: str = "hash",
    ) -> None:
        self.tables = tables
        self.tiers = tiers or TIERS
        self.sequence = sequence

    def build(
        self,
        lang: Optional[str] = None,
        difficulty: Optional[str] = None,
        day: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        language = self.tables.resolve_language(lang)
        tier = self.tiers[resolve_difficulty(difficulty)]
        puzzle_day = parse_date(day, today=today)
        date_string = puzzle_day.isoformat()
        try:
            crossword = self.generate(language, tier.difficulty, puzzle_day).to_dict()
        except EmptyPoolError as exc:
            LOGGER.warning("Empty word pool for %s/%s: %s", language, tier.difficulty.value, exc)
            crossword = self.empty_crossword()

        payload: Dict[str, Any] = {
            "grid": crossword["grid"],
            "clues": crossword["clues"],
            "date": date_string,
            "number": puzzle_number(puzzle_day),
            "width": crossword["width"],
            "height": crossword["height"],
            "difficulty": tier.difficulty.value,
            "maxAttempts": tier.max_attempts,
            "hints": tier.hints,
            "language": language,
        }
        return payload

    def generate(self, lang: Optional[str], difficulty: Difficulty, day: date) -> CrosswordResult:
        """Return the structured result; raises ``EmptyPoolError`` on an empty pool."""
        tier = self.tiers[difficulty]
        generator = CrosswordGenerator(
            GeneratorConfig(tier=tier, seed=date_seed(day.isoformat()), sequence=self.sequence)
        )
        return generator.generate(self.tables.for_language(lang))

    @staticmethod
    def empty_crossword() -> Dict[str, Any]:
        return {"grid": [], "clues": [], "width": FALLBACK_WIDTH, "height": FALLBACK_HEIGHT}
