"""Structured logging configuration for body matchers.

The matchers emit structlog events and never configure logging on import.
Host applications call configure_logging() once at startup, or configure
structlog themselves.

Events emitted:
- body.read_failed (warning): a body stream raised while being inspected
- correlation.stored / correlation.forced_false / correlation.consumed (debug)
- correlation.missing_token (debug): a response arrived without a token
- cleanup.* : background cleanup lifecycle

Examples:
    Configure logging::

        from body_matchers.observability.logging import configure_logging

        configure_logging(level="DEBUG", json_output=False)

    Output (JSON)::

        {
            "matcher": "request_hash",
            "error": "Error reading body: client disconnected",
            "error_type": "ConnectionResetError",
            "event": "body.read_failed",
            "level": "warning",
            "timestamp": "2024-01-01T00:00:00.000000Z"
        }
"""

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the matchers' events.

    Args:
        level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, emit JSON lines; if False, use console format
        stream: Where to write log lines. Defaults to stdout.

    Raises:
        ValueError: If level is not a known log level name.
    """
    level_number = logging.getLevelName(level.upper())
    if not isinstance(level_number, int):
        raise ValueError(f"Unknown log level: {level!r}")

    processors: list[object] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        # Module-level loggers must pick up later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.get_logger(name)
