"""
In-process vector storage and similarity search.

The in-memory store answers queries with a full scan over every record.
There is no secondary index, so query cost grows linearly with the store.
Other backends can be dropped in behind IVectorStore.
"""

from abc import ABC, abstractmethod
import logging
import threading
from typing import Dict, List, Optional

import numpy as np

from .types import Embedding, MemoryScope, SimilarityQuery, SimilarityResult, VectorRecord

logger = logging.getLogger(__name__)


def cosine_similarity(a: Embedding, b: Embedding) -> float:
    """Cosine similarity of two vectors.

    Returns 0.0 when the lengths differ, either vector is empty, either
    vector has zero magnitude, or the result is not finite (NaN or inf input).
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if a.ndim != 1 or b.ndim != 1 or a.shape != b.shape or a.size == 0:
        return 0.0

    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        denominator = np.linalg.norm(a) * np.linalg.norm(b)
        if denominator == 0:
            return 0.0
        score = float(np.dot(a, b) / denominator)

    if not np.isfinite(score):
        return 0.0
    return score


class IVectorStore(ABC):
    """Abstract interface for vector storage operations."""

    @abstractmethod
    def upsert_embedding(self, record: VectorRecord) -> None:
        """Insert a record, replacing any record with the same ID."""
        pass

    @abstractmethod
    def query_similar(self, query: SimilarityQuery) -> List[SimilarityResult]:
        """Return visible records ranked by descending similarity."""
        pass

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Delete a vector record by ID. Missing IDs are ignored."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of records in the store."""
        pass

    def batch_upsert(self, records: List[VectorRecord]) -> None:
        """Upsert multiple vector records."""
        for record in records:
            self.upsert_embedding(record)


class SimpleInMemoryVectorStore(IVectorStore):
    """Simple in-memory implementation of IVectorStore using cosine similarity."""

    def __init__(self, dimension: Optional[int] = None):
        """
        Args:
            dimension: When set, upserts with a different embedding length
                raise ValueError. When None, any length is accepted and
                mismatched records simply score 0.
        """
        if dimension is not None and dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self.dimension = dimension
        self._records: Dict[str, VectorRecord] = {}
        self._lock = threading.RLock()

    def upsert_embedding(self, record: VectorRecord) -> None:
        if self.dimension is not None and len(record.embedding) != self.dimension:
            raise ValueError(
                f"Vector dimension {len(record.embedding)} does not match expected dimension {self.dimension}"
            )

        with self._lock:
            self._records[record.id] = record

    def query_similar(self, query: SimilarityQuery) -> List[SimilarityResult]:
        if query.limit <= 0:
            return []

        with self._lock:
            records = list(self._records.values())

        scopes = set(query.scopes)
        scored = []
        for record in records:
            if record.scope not in scopes:
                continue
            # Owner filtering only applies to USER scope
            if record.scope == MemoryScope.USER and record.metadata.user_id != query.user_id:
                continue

            score = cosine_similarity(query.embedding, record.embedding)
            scored.append(SimilarityResult(record=record, score=score))

        # sorted() is stable, ties keep insertion order
        scored = sorted(scored, key=lambda r: r.score, reverse=True)

        logger.debug("query_similar scanned %d records, %d visible", len(records), len(scored))
        return scored[:query.limit]

    def get(self, record_id: str) -> Optional[VectorRecord]:
        """Get a record by ID, or None."""
        with self._lock:
            return self._records.get(record_id)

    def delete(self, record_id: str) -> None:
        with self._lock:
            self._records.pop(record_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Clear all records from the store."""
        with self._lock:
            self._records.clear()
