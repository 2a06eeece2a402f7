"""
Tests for the vector memory data model.
"""

import dataclasses

import numpy as np
import pytest

from rag_memory.vector.types import MemoryScope, VectorMetadata, VectorRecord


def test_scope_values():
    assert [s.value for s in MemoryScope] == ["USER", "AGENT", "BUSINESS"]
    assert MemoryScope("AGENT") is MemoryScope.AGENT


def test_metadata_to_dict_flattens_extra():
    metadata = VectorMetadata(user_id="u1", agent_id="a1", source="crm", extra={"priority": 2})
    assert metadata.to_dict() == {"user_id": "u1", "agent_id": "a1", "source": "crm", "priority": 2}


def test_metadata_from_dict_accepts_camel_case():
    metadata = VectorMetadata.from_dict({"userId": "u1", "agentId": None, "source": "crm", "region": "eu"})

    assert metadata.user_id == "u1"
    assert metadata.agent_id is None
    assert metadata.source == "crm"
    assert metadata.extra == {"region": "eu"}


def test_metadata_from_dict_requires_user():
    with pytest.raises(ValueError):
        VectorMetadata.from_dict({"source": "crm"})


def test_metadata_round_trip():
    original = VectorMetadata(user_id="u1", agent_id=None, source="crm", extra={"tags": ["a", "b"]})
    assert VectorMetadata.from_dict(original.to_dict()) == original


def test_record_to_dict_shape():
    record = VectorRecord(
        id="doc-1",
        embedding=np.array([0.5, 0.25], dtype=np.float32),
        text="invoice process",
        scope=MemoryScope.USER,
        metadata=VectorMetadata(user_id="u1"),
        created_at=1234,
    )

    data = record.to_dict()
    assert set(data) == {"id", "embedding", "text", "scope", "metadata", "created_at"}
    assert data["embedding"] == [0.5, 0.25]
    assert data["scope"] == "USER"
    assert data["metadata"]["user_id"] == "u1"


def test_record_is_immutable():
    record = VectorRecord(
        id="doc-1", embedding=[1.0], text="t", scope=MemoryScope.AGENT,
        metadata=VectorMetadata(user_id="u1"), created_at=0,
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.text = "changed"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
