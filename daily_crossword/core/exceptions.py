"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class WordTableLoadError(CrosswordError):
    """Raised when the word tables cannot be read or parsed."""


class EmptyPoolError(CrosswordError):
    """Raised when no word of the requested language fits the tier."""


class ConfigurationError(CrosswordError):
    """Raised when a tier or generator configuration is malformed."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""


class InvalidDateError(CrosswordError):
    """Raised when a requested puzzle date cannot be parsed."""


class SlotPlacementError(CrosswordError):
    """Raised when a word is committed at a position the grid rejects."""
