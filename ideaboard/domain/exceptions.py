"""Base exception classes for the IdeaBoard domain layer."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Discriminator for recoverable domain failures.

    Presentation layers branch on the kind, never on the concrete class:
    - VALIDATION and PERMISSION are shown as inline feedback
    - NOT_FOUND means the view is stale and should be refreshed
    """

    VALIDATION = "validation"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"


class IdeaBoardError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class and set
    ``error_kind`` so that callers can convert them into failure results.
    """

    error_kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for presentation layers.

        Returns:
            Dictionary with the error kind, class name and message.
        """
        return {
            "kind": self.error_kind.value,
            "error": type(self).__name__,
            "message": self.message,
        }
