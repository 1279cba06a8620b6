"""Observability utilities for body matchers.

This package provides:
- Prometheus metrics for match verdicts and correlation lookups
- Structured logging with contextual information
"""

from body_matchers.observability.logging import configure_logging, get_logger
from body_matchers.observability.metrics import (
    record_body_read_failure,
    record_cleanup,
    record_correlation_lookup,
    record_evaluation,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "record_evaluation",
    "record_body_read_failure",
    "record_correlation_lookup",
    "record_cleanup",
]
