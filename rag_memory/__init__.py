"""
rag_memory - scoped retrieval-augmented memory for AI agents.

Index text into an in-process vector store and retrieve the most similar
entries a given user is allowed to see.
"""

from .core.config import VERSION as __version__
from .core.errors import IndexerError, RagMemoryError, RetrieverError
from .core.indexer import DefaultRagIndexer, IndexBatchResult, IRagIndexer
from .core.retriever import DefaultRagRetriever, IRagRetriever
from .vector import (
    DeterministicHashEmbedder,
    IEmbedder,
    IndexerInput,
    IVectorStore,
    MemoryScope,
    RetrievalQuery,
    RetrievalResult,
    SentenceTransformerEmbedder,
    SimilarityQuery,
    SimilarityResult,
    SimpleInMemoryVectorStore,
    VectorMetadata,
    VectorRecord,
    cosine_similarity,
)

__all__ = [
    'IndexerError',
    'RagMemoryError',
    'RetrieverError',
    'DefaultRagIndexer',
    'IndexBatchResult',
    'IRagIndexer',
    'DefaultRagRetriever',
    'IRagRetriever',
    'DeterministicHashEmbedder',
    'IEmbedder',
    'IndexerInput',
    'IVectorStore',
    'MemoryScope',
    'RetrievalQuery',
    'RetrievalResult',
    'SentenceTransformerEmbedder',
    'SimilarityQuery',
    'SimilarityResult',
    'SimpleInMemoryVectorStore',
    'VectorMetadata',
    'VectorRecord',
    'cosine_similarity',
]
