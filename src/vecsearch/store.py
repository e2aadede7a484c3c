"""
Vector Store - In-memory identifier to embedding map with exact top-N search.

Implements:
- Last-write-wins insertion keyed by identifier
- A single embedding dimension per store, checked on every insert and query
- Brute-force cosine ranking over a snapshot of the mapping
- Deterministic ordering with identifier tie-breaks
"""

import logging
import math
import time
import uuid
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .contracts.models import SearchHit, SearchResult, StoreConfig
from .core.exceptions import DimensionMismatchError, InvalidEmbeddingError
from .core.locks import ReadWriteLock
from .similarity import cosine_similarity


logger = logging.getLogger(__name__)

Embedding = Tuple[float, ...]


def _coerce_embedding(values: Iterable[float]) -> Embedding:
    """Copy an embedding into an owned tuple of floats."""
    if isinstance(values, (str, bytes)):
        raise InvalidEmbeddingError("Embedding must be a sequence of numbers, not a string")

    try:
        embedding = tuple(float(x) for x in values)
    except (TypeError, ValueError) as e:
        raise InvalidEmbeddingError(f"Embedding must contain only real numbers: {e}") from e

    if not embedding:
        raise InvalidEmbeddingError("Embedding cannot be empty")

    return embedding


class _IdentifierKey:
    """
    Sort key giving any hashable identifier a place in the tie-break order.

    Identifiers of one type use their natural order, identifiers of different
    types are grouped by type name, and identifiers with no order at all
    (plain objects) compare as equal and keep their insertion order.
    Only consulted when two scores are equal.
    """

    __slots__ = ("value",)

    def __init__(self, value: Hashable):
        self.value = value

    def __eq__(self, other: "_IdentifierKey") -> bool:
        return self.value == other.value

    def __lt__(self, other: "_IdentifierKey") -> bool:
        try:
            return bool(self.value < other.value)
        except TypeError:
            pass
        type_a = type(self.value).__name__
        type_b = type(other.value).__name__
        if type_a != type_b:
            return type_a < type_b
        return False


class VectorStore:
    """
    Exact similarity search over embeddings held in memory.

    Every query scores all stored embeddings; no index is built. Inserts take
    the store's write lock, queries copy the mapping under the read lock and
    score the copy, so a query never sees an entry mid-update.
    """

    def __init__(self, dimension: Optional[int] = None, config: Optional[StoreConfig] = None):
        """
        Initialize an empty store.

        Args:
            dimension: Fixed embedding length. Overrides config.dimension.
                When neither is set, the first insert fixes it.
            config: Store configuration (uses defaults if not provided)
        """
        self.config = config or StoreConfig()
        if dimension is not None:
            self.config = StoreConfig(
                dimension=dimension,
                tie_break_by_identifier=self.config.tie_break_by_identifier,
            )

        self.store_id = uuid.uuid4().hex[:12]
        self._dimension: Optional[int] = self.config.dimension
        self._entries: Dict[Hashable, Embedding] = {}
        self._lock = ReadWriteLock()

    @classmethod
    def new(cls) -> "VectorStore":
        """Return an empty store with default configuration."""
        return cls()

    @property
    def dimension(self) -> Optional[int]:
        """Embedding length accepted by this store, or None before the first insert."""
        with self._lock.read_locked():
            return self._dimension

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __contains__(self, identifier: Hashable) -> bool:
        with self._lock.read_locked():
            return identifier in self._entries

    def _check_dimension(self, embedding: Embedding, what: str) -> None:
        if self._dimension is not None and len(embedding) != self._dimension:
            raise DimensionMismatchError(
                f"{what} has dimension {len(embedding)}, store expects {self._dimension}",
                expected=self._dimension,
                actual=len(embedding),
            )

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert(self, identifier: Hashable, embedding: Iterable[float]) -> None:
        """
        Insert or replace the embedding stored under an identifier.

        Args:
            identifier: Unique key for the embedding
            embedding: Sequence of real numbers of the store's dimension

        Raises:
            DimensionMismatchError: If the length differs from the store's dimension
            InvalidEmbeddingError: If the embedding is empty or non-numeric
        """
        values = _coerce_embedding(embedding)

        with self._lock.write_locked():
            self._check_dimension(values, "Embedding")
            if self._dimension is None:
                self._dimension = len(values)
                logger.debug(
                    f"Store dimension fixed at {self._dimension}",
                    extra={"store_id": self.store_id},
                )
            replaced = identifier in self._entries
            self._entries[identifier] = values

        if replaced:
            logger.debug(f"Replaced embedding for {identifier}", extra={"store_id": self.store_id})

    def delete(self, identifier: Hashable) -> bool:
        """
        Remove an embedding.

        Returns:
            True if the identifier was present
        """
        with self._lock.write_locked():
            return self._entries.pop(identifier, None) is not None

    def clear(self) -> None:
        """Remove all embeddings. A dimension set at construction is kept."""
        with self._lock.write_locked():
            self._entries.clear()
            self._dimension = self.config.dimension

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, identifier: Hashable) -> Optional[List[float]]:
        """Return a copy of the stored embedding, or None if absent."""
        with self._lock.read_locked():
            embedding = self._entries.get(identifier)
        return list(embedding) if embedding is not None else None

    def identifiers(self) -> List[Hashable]:
        """Return the stored identifiers in insertion order."""
        with self._lock.read_locked():
            return list(self._entries)

    # =========================================================================
    # Ranking
    # =========================================================================

    def _sort_key(self, entry: Tuple[Hashable, float]) -> tuple:
        identifier, score = entry
        # NaN scores are unordered; they share one slot after every real score
        if math.isnan(score):
            score_key = (1, 0.0)
        else:
            score_key = (0, -score)
        if self.config.tie_break_by_identifier:
            return score_key + (_IdentifierKey(identifier),)
        return score_key

    def _rank(self, query: Iterable[float], n: int) -> Tuple[List[Tuple[Hashable, float]], int]:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        values = _coerce_embedding(query)

        with self._lock.read_locked():
            self._check_dimension(values, "Query")
            snapshot = list(self._entries.items())

        if n == 0 or not snapshot:
            return [], len(snapshot)

        scored = [
            (identifier, cosine_similarity(values, embedding))
            for identifier, embedding in snapshot
        ]
        scored.sort(key=self._sort_key)

        return scored[:n], len(snapshot)

    def top_n(self, query: Iterable[float], n: int) -> List[Tuple[Hashable, float]]:
        """
        Return the n stored embeddings most similar to a query.

        Args:
            query: Query vector of the store's dimension
            n: Maximum number of results

        Returns:
            (identifier, score) pairs ordered by score descending, then by
            identifier ascending. Fewer than n pairs when the store is smaller.

        Raises:
            DimensionMismatchError: If the query length differs from the store's dimension
            ValueError: If n is negative
        """
        ranked, _ = self._rank(query, n)
        return ranked

    def search(self, query: Iterable[float], n: int) -> SearchResult:
        """
        Run a top-N query and return ranked hits with scan statistics.

        Same ordering and errors as top_n().
        """
        start_time = time.time()
        ranked, total = self._rank(query, n)

        hits = [
            SearchHit(identifier=identifier, score=score, rank=rank)
            for rank, (identifier, score) in enumerate(ranked, start=1)
        ]
        execution_ms = int((time.time() - start_time) * 1000)
        result = SearchResult(
            top_n=n,
            hits=hits,
            total_candidates=total,
            execution_ms=execution_ms,
        )

        logger.info(
            f"Retrieved {len(hits)} of {total} embeddings in {execution_ms}ms",
            extra={
                "store_id": self.store_id,
                "query_id": result.query_id,
                "top_n": n,
                "candidates": total,
            },
        )

        return result
