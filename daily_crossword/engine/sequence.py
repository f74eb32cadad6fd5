"""Deterministic pseudo-random streams used by every generation step.

A sequence is a counter: each draw advances ``state`` by one and maps the new
counter value to a float in ``[0, 1)`` through a fixed transform. Restarting
the counter replays the exact same stream.

Two transforms are available:

``HashSequence`` (default)
    32-bit integer avalanche of the counter::

        x = counter & 0xFFFFFFFF
        x ^= x >> 16; x = (x * 0x7FEB352D) & 0xFFFFFFFF
        x ^= x >> 15; x = (x * 0x846CA68B) & 0xFFFFFFFF
        x ^= x >> 16
        value = x / 2**32

    Integer-only, so the stream is bit-identical on every platform.

``SineSequence``
    ``frac(sin(counter) * 10000)``, the transform of the legacy web site. Its
    first draw uses the seed itself rather than ``seed + 1``.
    Only reproducible within a single math library.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Dict, List, MutableSequence, Type, TypeVar

from ..core.exceptions import ConfigurationError


T = TypeVar("T")

UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = float(UINT32_MASK) + 1.0


class SeededSequence(ABC):
    """Base class: counter bookkeeping plus helpers built on ``random()``."""

    # Counter value before the first draw, relative to the seed.
    start_offset = 0

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self.state = self.seed + self.start_offset

    @abstractmethod
    def transform(self, counter: int) -> float:
        """Map a counter value to a float in ``[0, 1)``."""

    def random(self) -> float:
        """Advance the counter and return the next float in ``[0, 1)``."""
        self.state += 1
        return self.transform(self.state)

    def restart(self) -> None:
        self.state = self.seed + self.start_offset

    def randrange(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return min(int(self.random() * n), n - 1)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle ``items`` in place and return it."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randrange(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def shuffled(self, items) -> List[T]:
        return list(self.shuffle(list(items)))


class HashSequence(SeededSequence):
    """Counter mapped through a 32-bit xorshift-multiply hash."""

    def transform(self, counter: int) -> float:
        x = counter & UINT32_MASK
        x ^= x >> 16
        x = (x * 0x7FEB352D) & UINT32_MASK
        x ^= x >> 15
        x = (x * 0x846CA68B) & UINT32_MASK
        x ^= x >> 16
        return x / UINT32_SCALE


class SineSequence(SeededSequence):
    """Legacy ``frac(sin(n) * 10000)`` transform.

    The legacy site reads the counter before advancing it, so the first draw
    is ``sin(seed)``.
    """

    start_offset = -1

    def transform(self, counter: int) -> float:
        x = math.sin(counter) * 10000
        return x - math.floor(x)


SEQUENCE_KINDS: Dict[str, Type[SeededSequence]] = {
    "hash": HashSequence,
    "sine": SineSequence,
}


def make_sequence(seed: int, kind: str = "hash") -> SeededSequence:
    try:
        factory = SEQUENCE_KINDS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown sequence kind '{kind}' (expected one of {sorted(SEQUENCE_KINDS)})"
        ) from None
    return factory(seed)
