"""
random_source.py: Pluggable uniform random numbers for pipe generation.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything with a next() returning a float in [0, 1)."""

    def next(self) -> float:
        ...


class SystemRandomSource:
    """Default source backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()
