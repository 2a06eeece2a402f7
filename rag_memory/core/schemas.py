"""
Request models for callers that hand in loosely shaped index/retrieve payloads.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..vector.types import IndexerInput, MemoryScope, RetrievalQuery, VectorMetadata
from .config import get_default_limit


class IndexRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    scope: MemoryScope
    user_id: str = Field(alias="userId")
    agent_id: Optional[str] = Field(default=None, alias="agentId")
    source: str = "api"
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('id', 'user_id', 'source')
    @classmethod
    def must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('must not be blank')
        return v

    @field_validator('scope', mode='before')
    @classmethod
    def scope_upper(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    def to_input(self) -> IndexerInput:
        # Blank text is left to the indexer, which reports it per record
        return IndexerInput(
            id=self.id,
            summarized_text=self.text,
            scope=self.scope,
            metadata=VectorMetadata(
                user_id=self.user_id,
                agent_id=self.agent_id,
                source=self.source,
                extra=dict(self.extra),
            ),
        )


class RetrieveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query_text: str = Field(alias="queryText")
    user_id: str = Field(alias="userId")
    agent_id: Optional[str] = Field(default=None, alias="agentId")
    scopes: List[MemoryScope] = Field(default_factory=lambda: list(MemoryScope))
    limit: int = Field(default_factory=get_default_limit, ge=0)

    @field_validator('user_id')
    @classmethod
    def user_id_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError('user_id cannot be empty')
        return v

    @field_validator('scopes', mode='before')
    @classmethod
    def scopes_upper(cls, v):
        if isinstance(v, (list, tuple, set)):
            return [s.upper() if isinstance(s, str) else s for s in v]
        return v

    def to_query(self) -> RetrievalQuery:
        return RetrievalQuery(
            query_text=self.query_text,
            user_id=self.user_id,
            agent_id=self.agent_id,
            scopes=tuple(self.scopes),
            limit=self.limit,
        )
