"""Injectable random source for quote generation."""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the estimators.

    ``random.Random`` satisfies this protocol; tests pass a seeded instance
    or a scripted source to fix the sequence of draws.
    """

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        ...

    def uniform(self, a: float, b: float) -> float:
        """Return a float N such that a <= N <= b."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        ...


def make_random_source(seed: int | None = None) -> RandomSource:
    """Create the default random source, seeded when ``seed`` is given."""
    return random.Random(seed)
