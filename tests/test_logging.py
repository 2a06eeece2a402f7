"""
Tests for structured operation logging.
"""

import logging

import pytest

from rag_memory.core.indexer import DefaultRagIndexer
from rag_memory.util.logging import StructuredLogger

from conftest import make_input


@pytest.fixture
def structured_logger():
    return StructuredLogger("rag_memory.test")


def test_log_operation_format(structured_logger, caplog):
    with caplog.at_level(logging.INFO, logger="rag_memory.test"):
        structured_logger.log_operation("vector.upsert", "success", {"record_id": "doc-1"})

    assert "Operation: vector.upsert, Status: success, Details: {'record_id': 'doc-1'}" in caplog.text


def test_single_handler_on_reuse():
    first = StructuredLogger("rag_memory.handlers")
    second = StructuredLogger("rag_memory.handlers")
    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1


def test_index_text_truncated(structured_logger, caplog):
    with caplog.at_level(logging.INFO, logger="rag_memory.test"):
        structured_logger.log_index_operation("doc-1", "USER", text="x" * 120)

    assert "x" * 50 + "..." in caplog.text
    assert "x" * 51 not in caplog.text


def test_failures_logged_as_warnings(structured_logger, caplog):
    with caplog.at_level(logging.INFO, logger="rag_memory.test"):
        structured_logger.log_index_operation("doc-1", "USER", status="failed", error="empty text")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "empty text" in record.getMessage()


def test_batch_result_partial(structured_logger, caplog):
    with caplog.at_level(logging.INFO, logger="rag_memory.test"):
        structured_logger.log_batch_result(3, 2, ["bad"])

    assert "Operation: index.batch, Status: partial" in caplog.text
    assert "'failed_ids': ['bad']" in caplog.text


def test_indexer_emits_audit_lines(store, embedder, caplog):
    indexer = DefaultRagIndexer(store, embedder)

    with caplog.at_level(logging.INFO, logger="rag_memory"):
        indexer.index_batch([make_input("ok", "invoice process"), make_input("bad", "")])

    assert "Operation: index, Status: success" in caplog.text
    assert "Operation: index, Status: failed" in caplog.text
    assert "Operation: index.batch, Status: partial" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
