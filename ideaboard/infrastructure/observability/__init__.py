"""Observability: structlog configuration and correlation ids."""

from ideaboard.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from ideaboard.infrastructure.observability.logging import (
    configure_structlog,
    get_log_level,
)

__all__ = [
    "configure_structlog",
    "correlation_id_processor",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "get_log_level",
    "set_correlation_id",
]
