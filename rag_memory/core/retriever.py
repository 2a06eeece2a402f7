"""
Retrieval: query text in, ranked memory entries above a score floor out.
"""

from abc import ABC, abstractmethod
import logging
from typing import List

from ..util.logging import logger as audit_log
from ..vector.embeddings import IEmbedder
from ..vector.index import IVectorStore
from ..vector.types import MemoryScope, RetrievalQuery, RetrievalResult, SimilarityQuery
from .errors import RetrieverError

logger = logging.getLogger(__name__)


class IRagRetriever(ABC):
    """Abstract interface for retrievers."""

    @abstractmethod
    def retrieve(self, query: RetrievalQuery) -> List[RetrievalResult]:
        """Return matching entries ranked by descending score."""
        pass

    @abstractmethod
    def retrieve_as_text(self, query: RetrievalQuery) -> List[str]:
        """Return only the text of matching entries, same order as retrieve()."""
        pass


def normalize_scopes(scopes) -> List[MemoryScope]:
    """Coerce a scope collection to MemoryScope members.

    Raises:
        RetrieverError: scopes is not a collection, or an entry names no scope
    """
    if scopes is None or isinstance(scopes, (str, bytes)):
        raise RetrieverError(f"scopes must be a collection of MemoryScope, got {scopes!r}")

    normalized = []
    for scope in scopes:
        if isinstance(scope, MemoryScope):
            normalized.append(scope)
            continue
        try:
            normalized.append(MemoryScope(str(scope).upper()))
        except ValueError:
            raise RetrieverError(f"Unknown memory scope: {scope!r}") from None
    return normalized


class DefaultRagRetriever(IRagRetriever):
    """Retriever that drops candidates scoring below a fixed minimum."""

    def __init__(self, store: IVectorStore, embedder: IEmbedder, min_score: float):
        self.store = store
        self.embedder = embedder
        self.min_score = min_score

    def retrieve(self, query: RetrievalQuery) -> List[RetrievalResult]:
        # Nothing to search for; skip the embedder entirely
        if not query.query_text.strip() or query.limit <= 0:
            return []

        scopes = normalize_scopes(query.scopes)

        query_embedding = self.embedder.embed(query.query_text)

        candidates = self.store.query_similar(SimilarityQuery(
            embedding=query_embedding,
            scopes=scopes,
            user_id=query.user_id,
            limit=query.limit,
        ))

        results = []
        for entry in candidates:
            # NaN scores fail this comparison and are dropped
            if not entry.score >= self.min_score:
                continue

            results.append(RetrievalResult(
                id=entry.record.id,
                text=entry.record.text,
                score=entry.score,
                scope=entry.record.scope,
                metadata=entry.record.metadata,
            ))

        logger.debug("retrieve kept %d of %d candidates", len(results), len(candidates))
        audit_log.log_retrieval(query.user_id, query.query_text, len(candidates), len(results), self.min_score)
        return results

    def retrieve_as_text(self, query: RetrievalQuery) -> List[str]:
        return [result.text for result in self.retrieve(query)]
