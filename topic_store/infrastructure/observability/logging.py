"""Structured logging configuration with structlog.

This module provides centralized structlog configuration for the service,
supporting both production (JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "event_published",
        "service": "BlobEventPublisher",
        "component": "data_plane",
        "topic_name": "payments",
        ...additional context
    }

Loggers handed to core services are fail-safe: a failure inside the
logging pipeline (a broken renderer, a closed stream) is dropped so that
it can never abort a publish, a replay, or a topic creation.

Usage:
    from topic_store.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import Any, TextIO, cast

import structlog
from structlog.typing import Processor

from topic_store.infrastructure.observability.correlation import (
    correlation_id_processor,
)

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_METHODS = frozenset(
    {"debug", "info", "warning", "warn", "error", "exception", "critical", "msg"}
)


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(
    environment: str = "production", stream: TextIO | None = None
) -> None:
    """Configure structlog for the application.

    Should be called once at startup.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
        stream: Where log lines are written (default: stdout).
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        # Exceptions become a plain "exception" field for log aggregation
        final_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


class FailSafeLogger:
    """Bound logger wrapper that never lets a logging failure escape.

    Level methods delegate to the wrapped structlog logger and drop any
    exception raised while emitting. ``bind``/``new``/``unbind`` return
    wrapped loggers so the guarantee survives rebinding.
    """

    def __init__(self, logger: Any) -> None:
        self._logger = logger

    def bind(self, **new_values: Any) -> "FailSafeLogger":
        return FailSafeLogger(self._logger.bind(**new_values))

    def new(self, **new_values: Any) -> "FailSafeLogger":
        return FailSafeLogger(self._logger.new(**new_values))

    def unbind(self, *keys: str) -> "FailSafeLogger":
        return FailSafeLogger(self._logger.unbind(*keys))

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._logger, name)
        if name not in _LOG_METHODS:
            return attr

        def _emit(*args: Any, **kwargs: Any) -> None:
            try:
                attr(*args, **kwargs)
            except Exception:  # noqa: BLE001
                pass

        return _emit


def get_logger_for_service(service_name: str, component: str = "core") -> FailSafeLogger:
    """Get a pre-bound, fail-safe logger for a service.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (e.g. "control_plane", "data_plane").

    Returns:
        A FailSafeLogger with service and component bound.
    """
    return FailSafeLogger(
        structlog.get_logger().bind(
            service=service_name,
            component=component,
        )
    )
