"""
Indexing: raw text in, stored vector record out.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import time
from typing import Callable, List, Mapping, Optional, Sequence

from ..util.logging import logger as audit_log
from ..vector.embeddings import IEmbedder
from ..vector.index import IVectorStore
from ..vector.types import IndexerInput, VectorRecord
from .errors import IndexerError


def _now_ms() -> int:
    return int(time.time() * 1000)


def _scope_name(scope) -> str:
    return getattr(scope, "value", str(scope))


def _item_field(item, name: str):
    """Read a field from a malformed input without raising."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


@dataclass
class IndexBatchResult:
    """Outcome of a batch indexing run."""

    indexed: int = 0
    """Number of inputs stored successfully"""

    failed: List[IndexerError] = field(default_factory=list)
    """Per-input failures, in input order"""


class IRagIndexer(ABC):
    """Abstract interface for indexers."""

    @abstractmethod
    def index(self, item: IndexerInput) -> None:
        """Embed and store a single input. Raises IndexerError on invalid input."""
        pass

    @abstractmethod
    def index_batch(self, items: Sequence[IndexerInput]) -> IndexBatchResult:
        """Index each input independently, collecting failures."""
        pass

    @abstractmethod
    def remove(self, record_id: str) -> None:
        """Remove a stored entry. Missing IDs are ignored."""
        pass


class DefaultRagIndexer(IRagIndexer):
    """Indexer that embeds with an IEmbedder and writes to an IVectorStore."""

    def __init__(self, store: IVectorStore, embedder: IEmbedder, clock: Optional[Callable[[], int]] = None):
        """
        Args:
            store: Destination vector store
            embedder: Embedding provider for input text
            clock: Returns the current time in epoch milliseconds
        """
        self.store = store
        self.embedder = embedder
        self._clock = clock or _now_ms

    def index(self, item: IndexerInput) -> None:
        if not item.summarized_text.strip():
            audit_log.log_index_operation(item.id, _scope_name(item.scope), status="failed", error="empty text")
            raise IndexerError(item.id, "Cannot index empty text")

        embedding = self.embedder.embed(item.summarized_text)

        record = VectorRecord(
            id=item.id,
            embedding=embedding,
            text=item.summarized_text,
            scope=item.scope,
            metadata=item.metadata,
            created_at=self._clock(),
        )

        self.store.upsert_embedding(record)
        audit_log.log_index_operation(item.id, _scope_name(item.scope), text=item.summarized_text)

    def index_batch(self, items: Sequence[IndexerInput]) -> IndexBatchResult:
        result = IndexBatchResult()

        for item in items:
            try:
                self.index(item)
                result.indexed += 1
            except IndexerError as e:
                result.failed.append(e)
            except Exception as e:
                # Wrap anything else so the failure stays attributable to its input
                record_id = _item_field(item, "id")
                audit_log.log_index_operation(record_id, _scope_name(_item_field(item, "scope")), status="failed", error=str(e))
                result.failed.append(IndexerError(record_id, str(e)))

        audit_log.log_batch_result(len(items), result.indexed, [e.record_id for e in result.failed])
        return result

    def remove(self, record_id: str) -> None:
        self.store.delete(record_id)
        audit_log.log_vector_operation("delete", record_id)
