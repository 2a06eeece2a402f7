"""
Shared fixtures for the memory test suite.
"""

import pytest

from rag_memory.vector.embeddings import DeterministicHashEmbedder, IEmbedder
from rag_memory.vector.index import SimpleInMemoryVectorStore
from rag_memory.vector.types import IndexerInput, MemoryScope, VectorMetadata, VectorRecord


class CountingEmbedder(IEmbedder):
    """Wraps the hash embedder and counts embed() calls."""

    def __init__(self, dimension: int = 384):
        self._inner = DeterministicHashEmbedder(dimension)
        self.calls = 0

    def embed(self, text):
        self.calls += 1
        return self._inner.embed(text)

    def dimensions(self):
        return self._inner.dimensions()


def make_metadata(user_id="u1", agent_id=None, source="test", **extra):
    return VectorMetadata(user_id=user_id, agent_id=agent_id, source=source, extra=extra)


def make_input(record_id, text, scope=MemoryScope.USER, user_id="u1", **extra):
    return IndexerInput(
        id=record_id,
        summarized_text=text,
        scope=scope,
        metadata=make_metadata(user_id=user_id, **extra),
    )


def make_record(record_id, embedding, scope=MemoryScope.BUSINESS, user_id="u1", text=None, created_at=0):
    return VectorRecord(
        id=record_id,
        embedding=embedding,
        text=text if text is not None else f"text for {record_id}",
        scope=scope,
        metadata=make_metadata(user_id=user_id),
        created_at=created_at,
    )


@pytest.fixture
def store():
    return SimpleInMemoryVectorStore()


@pytest.fixture
def embedder():
    return CountingEmbedder()
