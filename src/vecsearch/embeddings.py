"""
Embedding and identifier sources.

The store never generates vectors itself; callers pass in an EmbeddingSource
so that the randomness stays injectable and tests can seed it.
"""

import random
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional


def new_identifier() -> uuid.UUID:
    """Return a fresh random 128-bit identifier."""
    return uuid.uuid4()


class EmbeddingSource(ABC):
    """
    Abstract base class for embedding producers.

    Implementations return vectors of a fixed dimension.
    """

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector this source produces."""
        pass

    @abstractmethod
    def generate(self) -> List[float]:
        """Produce one embedding."""
        pass


class RandomEmbeddingSource(EmbeddingSource):
    """
    Embedding source drawing each component uniformly from [low, high).

    Stands in for a real embedding model in demos and tests.
    """

    def __init__(
        self,
        dimension: int,
        rng: Optional[random.Random] = None,
        low: float = 0.0,
        high: float = 1.0,
    ):
        """
        Args:
            dimension: Vector length
            rng: Random generator (a fresh unseeded one if not provided)
            low: Inclusive lower bound of each component
            high: Exclusive upper bound of each component
        """
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        if high <= low:
            raise ValueError(f"high ({high}) must be greater than low ({low})")

        self._dimension = dimension
        self._rng = rng or random.Random()
        self.low = low
        self.high = high

    @property
    def dimension(self) -> int:
        return self._dimension

    def generate(self) -> List[float]:
        span = self.high - self.low
        return [self.low + self._rng.random() * span for _ in range(self._dimension)]
