"""
Observability Infrastructure

Structured logging with correlation tracking and Prometheus metrics for
the archive-driven job synthesis pipeline.
"""

import contextvars
import logging
import sys
import traceback
import uuid
from typing import Any

import structlog
from prometheus_client import Counter, Histogram

from .config import settings

# Context variables for correlation tracking
correlation_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)

# Prometheus metrics
ARCHIVE_SEARCHES = Counter(
    "archive_engine_searches_total",
    "Archive repository searches",
    ["outcome"],
)

ARCHIVE_SEARCH_DURATION = Histogram(
    "archive_engine_search_duration_seconds",
    "Archive repository search duration",
)

SUGGESTIONS_GENERATED = Counter(
    "archive_engine_suggestions_generated_total",
    "Archive-driven job suggestions returned to callers",
)

JOBS_SYNTHESIZED = Counter(
    "archive_engine_jobs_synthesized_total",
    "Jobs synthesized from archive suggestions",
    ["status"],
)


class CorrelationIdProcessor:
    """Structlog processor to add correlation ID to all log entries."""

    def __call__(
        self, logger: Any, name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id = correlation_id_var.get("")
        if correlation_id:
            event_dict["correlation_id"] = correlation_id
        return event_dict


def setup_structured_logging() -> None:
    """Configure structured logging with JSON output and correlation tracking."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        CorrelationIdProcessor(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.is_local))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set correlation ID for request tracking."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """Get current correlation ID."""
    return correlation_id_var.get("")


def log_error_with_context(
    error: Exception,
    operation: str,
    context: dict[str, Any] | None = None,
    severity: str = "error",
    include_traceback: bool = True,
) -> None:
    """Log an error with operation context at the given severity."""
    logger = get_logger("errors")

    error_data: dict[str, Any] = {
        "operation": operation,
        "error_type": type(error).__name__,
        "error": str(error),
        "correlation_id": get_correlation_id(),
    }
    if context:
        error_data.update(context)
    if include_traceback:
        error_data["traceback"] = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )

    log_method = getattr(logger, severity, logger.error)
    log_method("Operation failed", **error_data)
