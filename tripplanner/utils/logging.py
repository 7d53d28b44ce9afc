"""Structured logging for quote lookups."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class LookupLogger:
    """Interface for structured lookup logging (no-op)."""

    def log_lookup(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one facade lookup."""
        pass


class StructuredLookupLogger(LookupLogger):
    """Structured logger for quote lookups."""

    def log_lookup(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log lookup outcome with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Quote lookup: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
