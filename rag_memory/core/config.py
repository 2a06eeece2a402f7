"""
Environment-driven configuration for the memory layer.

Values are read from the environment at call time, so tests and callers can
change them without reloading the module. A local .env file is loaded once
on import.
"""

import logging
import os
from typing import List, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

# Defaults
DEFAULT_EMBED_PROVIDER = "hash"  # hash|sentence
DEFAULT_EMBED_DIM = 384
DEFAULT_EMBED_MODEL = "all-MiniLM-L6-v2"
DEFAULT_MIN_SCORE = 0.0
DEFAULT_LIMIT = 5

VALID_EMBED_PROVIDERS = ["hash", "sentence"]

VERSION = "0.1.0"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def get_embed_provider_name() -> str:
    return os.getenv("RAG_EMBED_PROVIDER", DEFAULT_EMBED_PROVIDER).lower()


def get_embed_dimension() -> int:
    """Dimension for the hash embedder."""
    return int(os.getenv("RAG_EMBED_DIM", str(DEFAULT_EMBED_DIM)))


def get_embed_model_name() -> str:
    return os.getenv("RAG_EMBED_MODEL", DEFAULT_EMBED_MODEL)


def get_min_score() -> float:
    """Minimum similarity a retrieved entry must reach."""
    return float(os.getenv("RAG_MIN_SCORE", str(DEFAULT_MIN_SCORE)))


def get_default_limit() -> int:
    return int(os.getenv("RAG_DEFAULT_LIMIT", str(DEFAULT_LIMIT)))


def strict_dimensions_enabled() -> bool:
    """Check if the store should reject embeddings of the wrong length."""
    return _env_flag("RAG_STRICT_DIMENSIONS")


def debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _env_flag("DEBUG")


def get_embedding_provider():
    """Get configured embedding provider implementation."""
    provider = get_embed_provider_name()

    if provider == "hash":
        from ..vector.embeddings import DeterministicHashEmbedder
        return DeterministicHashEmbedder(get_embed_dimension())
    elif provider == "sentence":
        from ..vector.embeddings import SentenceTransformerEmbedder
        return SentenceTransformerEmbedder(get_embed_model_name())
    else:
        raise ValueError(
            f"Unknown embedding provider: {provider!r}. "
            f"Supported: {VALID_EMBED_PROVIDERS}"
        )


def get_vector_store(dimension: Optional[int] = None):
    """Get configured vector store implementation.

    Args:
        dimension: Embedding length enforced when strict dimensions are on.
    """
    from ..vector.index import SimpleInMemoryVectorStore

    if strict_dimensions_enabled():
        return SimpleInMemoryVectorStore(dimension=dimension)
    return SimpleInMemoryVectorStore()


def configure_logging() -> None:
    """Set the package log level from DEBUG."""
    level = logging.DEBUG if debug_enabled() else logging.INFO
    logging.getLogger("rag_memory").setLevel(level)


def build_memory() -> Tuple:
    """Wire a store, indexer and retriever from configuration.

    Returns:
        (store, indexer, retriever)

    Raises:
        ValueError: configuration is invalid
    """
    from .indexer import DefaultRagIndexer
    from .retriever import DefaultRagRetriever

    issues = validate_rag_config()
    if issues:
        raise ValueError(f"Memory configuration invalid: {issues}")

    configure_logging()

    embedder = get_embedding_provider()
    dimension = embedder.dimensions() if strict_dimensions_enabled() else None
    store = get_vector_store(dimension)

    indexer = DefaultRagIndexer(store, embedder)
    retriever = DefaultRagRetriever(store, embedder, get_min_score())
    return store, indexer, retriever


def validate_rag_config() -> List[str]:
    """Validate memory configuration and return any issues."""
    issues = []

    if get_embed_provider_name() not in VALID_EMBED_PROVIDERS:
        issues.append(f"Invalid RAG_EMBED_PROVIDER: {get_embed_provider_name()}")

    try:
        if get_embed_dimension() < 1:
            issues.append("RAG_EMBED_DIM must be >= 1")
    except ValueError:
        issues.append(f"RAG_EMBED_DIM is not an integer: {os.getenv('RAG_EMBED_DIM')}")

    try:
        min_score = get_min_score()
        if not -1.0 <= min_score <= 1.0:
            issues.append("RAG_MIN_SCORE must be between -1 and 1")
    except ValueError:
        issues.append(f"RAG_MIN_SCORE is not a number: {os.getenv('RAG_MIN_SCORE')}")

    try:
        if get_default_limit() < 1:
            issues.append("RAG_DEFAULT_LIMIT must be >= 1")
    except ValueError:
        issues.append(f"RAG_DEFAULT_LIMIT is not an integer: {os.getenv('RAG_DEFAULT_LIMIT')}")

    return issues
