"""
random_source.py
----------------
Unsigned 32-bit integer source used for spawn placement.
"""

import random


class RandomSource:
    """Uniform 32-bit draws backed by random.Random."""

    UINT_BITS = 32
    UINT_MAX = (1 << UINT_BITS) - 1

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def next_uint(self) -> int:
        """Return a uniformly distributed integer in [0, 2**32)."""
        return self._rng.getrandbits(self.UINT_BITS)

    def randomize(self):
        """Reseed from OS entropy."""
        self._rng.seed()

    def seed(self, value):
        self._rng.seed(value)
