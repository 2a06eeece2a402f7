"""
Structured operation logging for indexing, retrieval and store mutations.
"""

import logging
from typing import Any, Dict, Optional


def _truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class StructuredLogger:
    """Structured logger for memory operations."""

    def __init__(self, name: str = "rag_memory", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Optional[Dict[str, Any]] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status == "failed":
            self.logger.warning(message)
        else:
            self.logger.info(message)

    def log_vector_operation(self, operation: str, record_id: str, details: Optional[Dict[str, Any]] = None, status: str = "success"):
        """Log a vector store operation."""
        log_details = {"record_id": record_id}
        if details:
            log_details.update(details)

        self.log_operation(f"vector.{operation}", status, log_details)

    def log_index_operation(self, record_id: str, scope: str, text: Optional[str] = None, status: str = "success", error: Optional[str] = None):
        """Log a single indexing attempt."""
        details = {"record_id": record_id, "scope": scope}
        if text is not None:
            details["text"] = _truncate(text)
        if error is not None:
            details["error"] = error

        self.log_operation("index", status, details)

    def log_batch_result(self, total: int, indexed: int, failed_ids: list):
        """Log the outcome of a batch indexing run."""
        details = {"total": total, "indexed": indexed, "failed": len(failed_ids)}
        if failed_ids:
            details["failed_ids"] = failed_ids[:10]

        status = "success" if not failed_ids else "partial"
        self.log_operation("index.batch", status, details)

    def log_retrieval(self, user_id: str, query_text: str, candidates: int, returned: int, min_score: float):
        """Log a retrieval query."""
        details = {
            "user_id": user_id,
            "query": _truncate(query_text),
            "candidates": candidates,
            "returned": returned,
            "min_score": min_score,
        }
        self.log_operation("retrieve", "success", details)


# Global logger instance
logger = StructuredLogger()
