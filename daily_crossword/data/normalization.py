"""Shared helpers for word and category normalization."""

from __future__ import annotations


def normalize_word(text: str) -> str:
    """Return ``text`` stripped and uppercased.

    Accented letters are kept: a grid cell may hold any single uppercase
    letter of the language.
    """

    if not text:
        return ""
    return text.strip().upper()


def normalize_category(text: str) -> str:
    return " ".join((text or "").split()).upper()


def is_grid_word(word: str) -> bool:
    """True when every character can occupy a grid cell on its own."""

    return bool(word) and all(char.isalpha() for char in word)


__all__ = ["normalize_word", "normalize_category", "is_grid_word"]
