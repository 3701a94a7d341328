"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random

DEFAULT_SEED = 6


class RNG:
    """Wrapper around random.Random owned by a single play-through."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randbelow(self, upper: int) -> int:
        """Return a random integer N such that 0 <= N < upper."""
        if upper < 1:
            raise ValueError("Upper bound must be at least 1.")
        return self._random.randrange(upper)
