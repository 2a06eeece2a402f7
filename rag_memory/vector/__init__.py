"""
Vector memory layer - in-process storage, embeddings and similarity search.
"""

# Package initialization for vector module
from .index import IVectorStore, SimpleInMemoryVectorStore, cosine_similarity
from .types import (
    Embedding,
    IndexerInput,
    MemoryScope,
    RetrievalQuery,
    RetrievalResult,
    SimilarityQuery,
    SimilarityResult,
    VectorMetadata,
    VectorRecord,
)
from .embeddings import IEmbedder, DeterministicHashEmbedder, SentenceTransformerEmbedder

__all__ = [
    'IVectorStore',
    'SimpleInMemoryVectorStore',
    'cosine_similarity',
    'Embedding',
    'IndexerInput',
    'MemoryScope',
    'RetrievalQuery',
    'RetrievalResult',
    'SimilarityQuery',
    'SimilarityResult',
    'VectorMetadata',
    'VectorRecord',
    'IEmbedder',
    'DeterministicHashEmbedder',
    'SentenceTransformerEmbedder'
]
