"""
Error types raised by the indexing and retrieval layers.
"""


class RagMemoryError(Exception):
    """Base class for rag_memory errors."""


class IndexerError(RagMemoryError):
    """Indexing failed for a single record."""

    def __init__(self, record_id: str, message: str):
        super().__init__(message)
        self.record_id = record_id
        self.message = message

    def __repr__(self) -> str:
        return f"IndexerError(record_id={self.record_id!r}, message={self.message!r})"


class RetrieverError(RagMemoryError):
    """A retrieval query failed validation."""
