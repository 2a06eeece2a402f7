"""
Vector memory data model.
Records, queries and results shared by the store, indexer and retriever.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np


Embedding = Union[List[float], np.ndarray]


class MemoryScope(str, Enum):
    """Visibility partition for a memory entry."""

    USER = "USER"
    AGENT = "AGENT"
    BUSINESS = "BUSINESS"


# Keys accepted on input for the fixed metadata fields.
_USER_KEYS = ("user_id", "userId")
_AGENT_KEYS = ("agent_id", "agentId")


@dataclass(frozen=True)
class VectorMetadata:
    """Ownership and provenance attached to a vector record."""

    user_id: str
    """Owning user; USER-scoped records are only visible to this user"""

    agent_id: Optional[str] = None
    """Agent that produced the entry, if any"""

    source: str = "unknown"
    """Free-form source tag"""

    extra: Dict[str, Any] = field(default_factory=dict)
    """Open extension fields, carried through untouched"""

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update({
            "user_id": self.user_id,
            "agent_id": self.agent_id,
            "source": self.source,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VectorMetadata":
        data = dict(data)
        user_id = _pop_first(data, _USER_KEYS)
        if user_id is None:
            raise ValueError("metadata requires a user_id")
        agent_id = _pop_first(data, _AGENT_KEYS)
        source = data.pop("source", "unknown")
        return cls(user_id=user_id, agent_id=agent_id, source=source, extra=data)


def _pop_first(data: Dict[str, Any], keys: Sequence[str]) -> Any:
    value = None
    for key in keys:
        if key in data:
            candidate = data.pop(key)
            if value is None:
                value = candidate
    return value


@dataclass(frozen=True)
class VectorRecord:
    """Represents a stored memory entry with its embedding."""

    id: str
    """Unique identifier for the vector record"""

    embedding: Embedding
    """The vector representation of the text"""

    text: str
    """Source text the embedding was computed from"""

    scope: MemoryScope
    """Visibility partition"""

    metadata: VectorMetadata
    """Ownership and provenance"""

    created_at: int
    """Creation time in epoch milliseconds"""

    def to_dict(self) -> Dict[str, Any]:
        """Persistable shape: {id, embedding, text, scope, metadata, created_at}."""
        return {
            "id": self.id,
            "embedding": [float(x) for x in self.embedding],
            "text": self.text,
            "scope": self.scope.value,
            "metadata": self.metadata.to_dict(),
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class SimilarityQuery:
    """Store-level similarity query."""

    embedding: Embedding
    scopes: Sequence[MemoryScope]
    user_id: str
    limit: int


@dataclass(frozen=True)
class SimilarityResult:
    """A scored record returned by the store."""

    record: VectorRecord
    score: float


@dataclass(frozen=True)
class RetrievalQuery:
    """Text query issued to a retriever."""

    query_text: str
    user_id: str
    scopes: Sequence[MemoryScope] = (MemoryScope.USER, MemoryScope.AGENT, MemoryScope.BUSINESS)
    limit: int = 5
    agent_id: Optional[str] = None


@dataclass(frozen=True)
class RetrievalResult:
    """Represents a retrieved memory entry and its similarity score."""

    id: str
    """Identifier for the matching record"""

    text: str
    """Stored text of the match"""

    score: float
    """Cosine similarity of the match (-1 to 1)"""

    scope: MemoryScope
    """Scope of the matched record"""

    metadata: VectorMetadata
    """Metadata of the matched record"""


@dataclass(frozen=True)
class IndexerInput:
    """Raw input to be embedded and stored."""

    id: str
    summarized_text: str
    scope: MemoryScope
    metadata: VectorMetadata
