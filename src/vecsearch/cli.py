#!/usr/bin/env python3
"""
Demo CLI: insert one random embedding per word of a phrase, then query.

Usage:
    python -m vecsearch.cli --help
    python -m vecsearch.cli --top-n 3 --seed 42
    python -m vecsearch.cli --config vecsearch.yaml --json
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config.config_loader import SearchConfig
from .contracts.models import StoreConfig
from .core.exceptions import VecSearchConfigError
from .core.logging import configure_logging
from .embeddings import EmbeddingSource, RandomEmbeddingSource, new_identifier
from .store import VectorStore


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the demo CLI."""
    parser = argparse.ArgumentParser(
        prog="vecsearch-demo",
        description="Insert random embeddings and print the most similar to a random query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: 768-dimension vectors, top 3
  python -m vecsearch.cli

  # Reproducible run with JSON output
  python -m vecsearch.cli --seed 42 --json
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--dimension",
        type=int,
        default=None,
        help="Embedding dimension (default: from config, 768)",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of results to print (default: from config, 3)",
    )
    parser.add_argument(
        "--phrase",
        type=str,
        default=None,
        help="Phrase whose words each get one embedding",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random embedding source",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def populate_store(store: VectorStore, source: EmbeddingSource, words: List[str]) -> None:
    """Insert one embedding per word under a fresh identifier."""
    for word in words:
        identifier = new_identifier()
        store.insert(identifier, source.generate())
        logger.debug(f"Inserted {identifier} for word {word!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        config = SearchConfig(args.config)
        store_config = config.get_store_config()
        if args.dimension is not None:
            store_config = StoreConfig(
                dimension=args.dimension,
                tie_break_by_identifier=store_config.tie_break_by_identifier,
            )
    except (VecSearchConfigError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    top_n = args.top_n if args.top_n is not None else config.get_top_n()
    if top_n < 0:
        print(f"Configuration error: --top-n must be non-negative, got {top_n}", file=sys.stderr)
        return 2

    configure_logging(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        structured=bool(config.get("logging.structured", False)),
        stream=sys.stderr,
    )

    phrase = args.phrase if args.phrase is not None else config.get("demo.phrase", "")
    seed = args.seed if args.seed is not None else config.get("demo.seed")

    store = VectorStore(config=store_config)
    source = RandomEmbeddingSource(store_config.dimension or 768, rng=random.Random(seed))

    populate_store(store, source, phrase.split())
    result = store.search(source.generate(), top_n)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"Top {top_n} most similar vectors:")
    for identifier, similarity in result.as_pairs():
        print(f"UUID: {identifier}, Similarity: {similarity:.4f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
