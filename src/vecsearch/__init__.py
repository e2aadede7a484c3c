"""
Vecsearch - In-memory exact vector similarity search.

Key components:
- similarity.py: cosine similarity with a zero-vector policy
- store.py: VectorStore mapping identifiers to embeddings, with top-N queries
- embeddings.py: injectable embedding and identifier sources
- contracts/: data models for store configuration and query results
- config/: YAML + environment configuration
- cli.py: demo entry point

Key concepts:
- Embedding: fixed-dimension vector; all embeddings in one store share it.
- Top-N query: exact linear scan ranked by score, ties broken by identifier.
"""

from .contracts.models import SearchHit, SearchResult, StoreConfig
from .core.exceptions import (
    DimensionMismatchError,
    InvalidEmbeddingError,
    VecSearchConfigError,
    VecSearchError,
)
from .similarity import cosine_similarity
from .store import VectorStore

__version__ = "0.1.0"

__all__ = [
    "VectorStore",
    "StoreConfig",
    "SearchHit",
    "SearchResult",
    "cosine_similarity",
    "VecSearchError",
    "DimensionMismatchError",
    "InvalidEmbeddingError",
    "VecSearchConfigError",
]
