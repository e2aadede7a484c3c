"""
Configuration loading for vecsearch.
"""

from .config_loader import DEFAULT_CONFIG, SearchConfig

__all__ = [
    "DEFAULT_CONFIG",
    "SearchConfig",
]
