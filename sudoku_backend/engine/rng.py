"""Random sources for puzzle generation.

Every engine operation that needs randomness takes an explicit source with a
``next()`` method returning a float in ``[0, 1)``. ``Mulberry32`` reproduces
the mulberry32 stream bit for bit so a seed (for example the daily-challenge
seed) yields the same puzzle on every platform. ``SystemRandomSource`` is used
for ordinary, non-reproducible play.
"""

from __future__ import annotations

import datetime as dt
import random
from typing import List, Optional, Protocol, Sequence, TypeVar

from .errors import PreconditionError

UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = float(UINT32_MASK) + 1.0
MULBERRY32_INCREMENT = 0x6D2B79F5

_T = TypeVar("_T")


class RandomSource(Protocol):
    def next(self) -> float:
        ...


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply, result as an unsigned 32-bit value."""
    return (a * b) & UINT32_MASK


class Mulberry32:
    """Small-state 32-bit mixing generator (not cryptographically secure)."""

    def __init__(self, seed: int):
        self._state = int(seed) & UINT32_MASK

    @classmethod
    def from_seed(cls, seed: int) -> "Mulberry32":
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise PreconditionError(f"Seed must be a non-negative integer, got {seed!r}")
        return cls(seed)

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        self._state = (self._state + MULBERRY32_INCREMENT) & UINT32_MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & UINT32_MASK
        return (t ^ (t >> 14)) & UINT32_MASK

    def next(self) -> float:
        return self.next_uint32() / UINT32_SCALE


class SystemRandomSource:
    """Non-deterministic source backed by ``random.Random``."""

    def __init__(self, generator: Optional[random.Random] = None):
        self._random = generator or random.Random()

    def next(self) -> float:
        return self._random.random()


def make_rng(seed: Optional[int] = None) -> RandomSource:
    """Return a reproducible source for *seed*, or a system source when it is None."""
    if seed is None:
        return SystemRandomSource()
    return Mulberry32.from_seed(seed)


def randbelow(rng: RandomSource, n: int) -> int:
    """Return an integer in ``[0, n)`` drawn with a single ``next()`` call."""
    if n <= 0:
        raise PreconditionError("Upper bound must be positive")
    return int(rng.next() * n)


def shuffled(rng: RandomSource, items: Sequence[_T]) -> List[_T]:
    """Return a Fisher-Yates permutation of *items* using ``len(items) - 1`` draws."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = randbelow(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def seed_from_date_string(text: str) -> int:
    """Hash a calendar date string into a 32-bit seed.

    Computes ``hash = hash * 31 + code_unit`` (wrapped to 32 bits) over the
    UTF-16 code units of *text*, so the value matches the browser build of
    the daily challenge.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & UINT32_MASK
    return value


def daily_seed(today: Optional[dt.date] = None) -> int:
    """Seed for the daily challenge of *today* (UTC date when omitted)."""
    if today is None:
        today = dt.datetime.now(dt.timezone.utc).date()
    return seed_from_date_string(today.isoformat())
