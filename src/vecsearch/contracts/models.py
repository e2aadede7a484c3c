"""
Vector Search Data Models

Data models for store configuration and ranked query results:
- StoreConfig: dimension and ranking policy of a store
- SearchHit: one ranked (identifier, score) entry
- SearchResult: the hits of a single query plus scan statistics
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple
import uuid


def identifier_to_json(identifier: Hashable) -> Any:
    """Render an identifier as a JSON-safe value (UUIDs become strings)."""
    if isinstance(identifier, uuid.UUID):
        return str(identifier)
    return identifier


@dataclass
class StoreConfig:
    """
    Configuration for a vector store.

    Attributes:
        dimension: Fixed embedding length, or None to adopt the length of
            the first inserted embedding
        tie_break_by_identifier: Order equal scores by ascending identifier.
            When False, ties keep the store's iteration order.
    """
    dimension: Optional[int] = None
    tie_break_by_identifier: bool = True

    def __post_init__(self):
        if self.dimension is not None and self.dimension <= 0:
            raise ValueError(f"dimension must be positive, got {self.dimension}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "dimension": self.dimension,
            "tie_break_by_identifier": self.tie_break_by_identifier,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoreConfig":
        """Create from dictionary."""
        dimension = data.get("dimension")
        return cls(
            dimension=int(dimension) if dimension is not None else None,
            tie_break_by_identifier=bool(data.get("tie_break_by_identifier", True)),
        )


@dataclass(frozen=True)
class SearchHit:
    """
    A single ranked result.

    Attributes:
        identifier: Identifier of the stored embedding
        score: Cosine similarity to the query
        rank: Position in results (1-indexed)
    """
    identifier: Hashable
    score: float
    rank: int

    def as_pair(self) -> Tuple[Hashable, float]:
        return (self.identifier, self.score)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "identifier": identifier_to_json(self.identifier),
            "score": self.score,
            "rank": self.rank,
        }


@dataclass
class SearchResult:
    """
    Outcome of one top-N query.

    Attributes:
        top_n: Number of results requested
        hits: Ranked hits, best first (at most top_n)
        total_candidates: Number of embeddings scanned
        execution_ms: Wall time of the scan in milliseconds
        query_id: Unique identifier for this query
        created_utc: When the query ran
    """
    top_n: int
    hits: List[SearchHit] = field(default_factory=list)
    total_candidates: int = 0
    execution_ms: int = 0
    query_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self) -> Iterator[SearchHit]:
        return iter(self.hits)

    def as_pairs(self) -> List[Tuple[Hashable, float]]:
        """Return the hits as plain (identifier, score) tuples."""
        return [hit.as_pair() for hit in self.hits]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "query_id": self.query_id,
            "top_n": self.top_n,
            "hits": [hit.to_dict() for hit in self.hits],
            "total_candidates": self.total_candidates,
            "execution_ms": self.execution_ms,
            "created_utc": self.created_utc.isoformat(),
        }
