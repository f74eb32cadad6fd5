"""Per-language ``{category: words}`` tables backing every daily puzzle."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import requests

from ..core.constants import DEFAULT_LANGUAGE
from ..core.exceptions import WordTableLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_TABLES_PATH = Path(__file__).with_name("word_tables.json")

CategoryTable = Mapping[str, Tuple[str, ...]]

_EMPTY_TABLE: CategoryTable = MappingProxyType({})


def _is_url(source: Path | str) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def fetch_payload(url: str, timeout_seconds: float = 10.0) -> Any:
    """Download a JSON word table document."""
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        raise WordTableLoadError(f"Word table request failed: {exc}") from exc
    except ValueError as exc:
        raise WordTableLoadError(f"Word table response from {url} is not JSON: {exc}") from exc


def read_payload(path: Path | str) -> Any:
    source = Path(path)
    if not source.exists():
        raise WordTableLoadError(f"Missing word table file: {source}")
    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise WordTableLoadError(f"Unable to read word tables from {source}: {exc}") from exc


def parse_payload(payload: Any) -> Dict[str, Dict[str, List[str]]]:
    """Check the ``{language: {category: [word, ...]}}`` shape."""

    if not isinstance(payload, dict):
        raise WordTableLoadError("Word tables must be a JSON object keyed by language")
    tables: Dict[str, Dict[str, List[str]]] = {}
    for language, categories in payload.items():
        if not isinstance(categories, dict):
            raise WordTableLoadError(f"Language '{language}' must map categories to word lists")
        table: Dict[str, List[str]] = {}
        for category, words in categories.items():
            if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                raise WordTableLoadError(
                    f"Category '{category}' of language '{language}' must be a list of strings"
                )
            table[str(category)] = list(words)
        tables[str(language)] = table
    return tables


class WordTables:
    """Read-only view over the word tables of every supported language.

    Instances are built once and shared across requests; nothing mutates them
    after construction.
    """

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, Iterable[str]]],
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.default_language = default_language
        self._tables: Mapping[str, CategoryTable] = MappingProxyType(
            {
                language: MappingProxyType(
                    {category: tuple(words) for category, words in categories.items()}
                )
                for language, categories in tables.items()
            }
        )

    @classmethod
    def load(
        cls,
        source: Path | str | None = None,
        default_language: str = DEFAULT_LANGUAGE,
        timeout_seconds: float = 10.0,
    ) -> "WordTables":
        """Load tables from a JSON file path or an ``http(s)`` URL."""

        source = source or DEFAULT_TABLES_PATH
        if _is_url(source):
            payload = fetch_payload(str(source), timeout_seconds)
        else:
            payload = read_payload(source)
        tables = cls(parse_payload(payload), default_language=default_language)
        LOGGER.info(
            "Loaded word tables for %d languages from %s", len(tables.languages()), source
        )
        return tables

    def languages(self) -> List[str]:
        return sorted(self._tables)

    def has_language(self, language: Optional[str]) -> bool:
        return bool(language) and bool(self._tables.get(language))

    def resolve_language(self, language: Optional[str]) -> str:
        """Return ``language`` when it has words, otherwise the default."""
        if self.has_language(language):
            return language  # type: ignore[return-value]
        LOGGER.debug(
            "No word table for language %r, using %s", language, self.default_language
        )
        return self.default_language

    def for_language(self, language: Optional[str]) -> CategoryTable:
        return self._tables.get(self.resolve_language(language), _EMPTY_TABLE)


__all__ = ["WordTables", "DEFAULT_TABLES_PATH", "parse_payload", "fetch_payload", "read_payload"]
