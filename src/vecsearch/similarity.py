"""
Similarity - Cosine scoring of two embeddings.

Zero-magnitude vectors are defined as dissimilar to everything, themselves
included, and score 0.0 instead of dividing by zero.
"""

import math
from typing import Sequence

from .core.exceptions import DimensionMismatchError


def vector_norm(vec: Sequence[float]) -> float:
    """Return the Euclidean norm of a vector without intermediate overflow or underflow."""
    return math.hypot(*vec)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Each vector is divided by its norm before the dot product, so very large
    or very small components keep their direction instead of overflowing to
    inf or underflowing to zero.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        Cosine similarity score, nominally between -1 and 1. Rounding can
        land marginally outside that range.

    Raises:
        DimensionMismatchError: If vectors have different lengths
    """
    if len(vec_a) != len(vec_b):
        raise DimensionMismatchError(
            f"Vector dimensions must match: {len(vec_a)} != {len(vec_b)}",
            expected=len(vec_a),
            actual=len(vec_b),
        )

    magnitude_a = vector_norm(vec_a)
    magnitude_b = vector_norm(vec_b)

    # Only an all-zero (or empty) vector has a zero norm
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    return sum((a / magnitude_a) * (b / magnitude_b) for a, b in zip(vec_a, vec_b))
