"""
Embedding providers. Text in, fixed-length float vector out.
"""

from abc import ABC, abstractmethod
import hashlib
import logging
import re
from typing import List

import numpy as np

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\w+")


class IEmbedder(ABC):
    """Abstract interface for embedding providers."""

    @abstractmethod
    def embed(self, text: str) -> List[float]:
        """Generate embedding vector for given text."""
        pass

    @abstractmethod
    def dimensions(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass


class DeterministicHashEmbedder(IEmbedder):
    """Deterministic hash-based embedding provider.

    Each lower-cased word token is hashed into one signed bucket and the
    bucket counts are L2-normalized. Texts that share words land close to
    each other under cosine similarity, which is enough for tests and for
    running without a model download.
    """

    def __init__(self, dimension: int = 384):
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self.dimension = dimension

    def embed(self, text: str) -> List[float]:
        """Generate deterministic embedding vector using hash function."""
        vector = np.zeros(self.dimension, dtype=np.float64)

        for token in _TOKEN_RE.findall(text.lower()):
            digest = hashlib.md5(token.encode("utf-8")).digest()
            bucket = int.from_bytes(digest[:4], "big") % self.dimension
            sign = 1.0 if digest[4] & 1 else -1.0
            vector[bucket] += sign

        norm = np.linalg.norm(vector)
        if norm > 0:
            vector = vector / norm

        return vector.tolist()

    def dimensions(self) -> int:
        return self.dimension


class SentenceTransformerEmbedder(IEmbedder):
    """Sentence transformers embedding provider using pre-trained models.

    The model is loaded on first use.
    """

    def __init__(self, model_name: str = "all-MiniLM-L6-v2"):
        self.model_name = model_name
        self._model = None
        self._dimension = None

    @property
    def model(self):
        if self._model is None:
            from sentence_transformers import SentenceTransformer

            logger.info("Loading embedding model: %s", self.model_name)
            self._model = SentenceTransformer(self.model_name)
        return self._model

    def embed(self, text: str) -> List[float]:
        """Generate embedding vector using sentence transformers."""
        embedding = self.model.encode(text, convert_to_tensor=False, show_progress_bar=False)
        return embedding.tolist()

    def dimensions(self) -> int:
        if self._dimension is None:
            self._dimension = self.model.get_sentence_embedding_dimension()
        return self._dimension
