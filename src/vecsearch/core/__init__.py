"""
Core subpackage for vecsearch.

Contains exceptions, logging utilities and the store lock.
"""

from .exceptions import (
    VecSearchError,
    DimensionMismatchError,
    InvalidEmbeddingError,
    VecSearchConfigError,
)
from .locks import ReadWriteLock

__all__ = [
    # Exceptions
    "VecSearchError",
    "DimensionMismatchError",
    "InvalidEmbeddingError",
    "VecSearchConfigError",
    # Concurrency
    "ReadWriteLock",
]
