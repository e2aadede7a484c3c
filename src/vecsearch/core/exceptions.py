"""
Custom exceptions for the vecsearch package.
"""

from typing import Optional


class VecSearchError(Exception):
    """Base exception for all vecsearch errors."""
    pass


class DimensionMismatchError(VecSearchError, ValueError):
    """
    Vector length does not match the expected dimension.

    Raised when:
    - An embedding inserted into a store has the wrong length
    - A query vector has the wrong length for the store
    - Two vectors of different length are compared
    """

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidEmbeddingError(VecSearchError, ValueError):
    """
    Embedding cannot be stored.

    Raised when:
    - The embedding is empty
    - A component is not a real number
    """
    pass


class VecSearchConfigError(VecSearchError):
    """
    Error in vecsearch configuration.

    Raised when:
    - Configuration file is missing or invalid
    - Configuration values are out of valid range
    """
    pass
