"""
Vector Search Contracts

Data models for store configuration and query results.
"""

from .models import (
    StoreConfig,
    SearchHit,
    SearchResult,
    identifier_to_json,
)

__all__ = [
    "StoreConfig",
    "SearchHit",
    "SearchResult",
    "identifier_to_json",
]
