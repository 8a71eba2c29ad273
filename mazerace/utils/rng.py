"""Random source for maze generation.

Every generation run draws from one `SeededRNG`; reusing a seed reproduces
the same maze. Concurrent runs (one per race table) each get their own.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Owns a private `random.Random`, so no two runs share state."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._source = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randint(self, low: int, high: int) -> int:
        """Inclusive on both ends; used to pick interior cells."""
        return self._source.randint(low, high)

    def choice(self, options: Sequence[T]) -> T:
        return self._source.choice(options)

    def spawn(self) -> "SeededRNG":
        """Child source seeded from this one, for a parallel generation run."""
        return SeededRNG(self._source.getrandbits(64))


def make_rng(rng: Optional[SeededRNG] = None, seed: Optional[int] = None) -> SeededRNG:
    """Return `rng` if given, else a new source seeded with `seed`."""
    return rng if rng is not None else SeededRNG(seed)
