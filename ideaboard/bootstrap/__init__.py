"""Bootstrap wiring for IdeaBoard."""

from ideaboard.bootstrap.board import (
    create_board_session,
    create_key_value_store,
    get_key_value_store,
    reset_key_value_store,
    set_key_value_store,
)
from ideaboard.bootstrap.logging import configure_structlog

__all__ = [
    "configure_structlog",
    "create_board_session",
    "create_key_value_store",
    "get_key_value_store",
    "reset_key_value_store",
    "set_key_value_store",
]
