"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID management for tracing
- Fail-safe loggers for core services

Usage:
    from topic_store.infrastructure.observability import (
        configure_structlog,
        get_logger_for_service,
    )

    # At startup
    configure_structlog(environment="production")

    # In services
    log = get_logger_for_service("TopicCatalog", component="control_plane")
"""

from topic_store.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from topic_store.infrastructure.observability.logging import (
    FailSafeLogger,
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "FailSafeLogger",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "set_correlation_id",
]
