"""Correlation ids for board intents.

Every intent issued through the session facade runs under a fresh
correlation id, so the log lines of one vote or one conversion (engine,
synchronizer and store) can be grouped together.

Usage:
    with correlation_scope() as correlation_id:
        service.vote(...)

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Optional
from uuid import uuid4

# Empty string means "no intent in progress"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return uuid4().hex


def get_correlation_id() -> str:
    """Return the current correlation id, or "" outside any intent."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    """Run a block under a correlation id, restoring the previous one after.

    Args:
        correlation_id: Id to use. A fresh one is generated when omitted.

    Yields:
        The correlation id in effect inside the block.
    """
    value = correlation_id or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id when one is set."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
