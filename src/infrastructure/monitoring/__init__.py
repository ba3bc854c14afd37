"""
Infrastructure Monitoring Module

Structured logging with correlation IDs and OpenTelemetry trace context.
"""

from .logging import (
    StructuredJSONFormatter,
    correlation_context,
    get_correlation_id,
    setup_structured_logging,
)

__all__ = [
    "StructuredJSONFormatter",
    "correlation_context",
    "get_correlation_id",
    "setup_structured_logging",
]
