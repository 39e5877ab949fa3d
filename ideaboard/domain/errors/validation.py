"""Validation errors (blank required text, unknown enumerated values).

Raised by the mutation service before any new snapshot is produced, so a
validation failure never leaves partial state behind.
"""

from __future__ import annotations

from ideaboard.domain.exceptions import ErrorKind, IdeaBoardError


class ValidationError(IdeaBoardError):
    """Base error for rejected operation input."""

    error_kind = ErrorKind.VALIDATION


class BlankFieldError(ValidationError):
    """Raised when a required text field is empty after trimming.

    Attributes:
        field_name: The offending field (e.g. "title", "name").
    """

    def __init__(self, field_name: str) -> None:
        """Initialize the error.

        Args:
            field_name: The offending field (e.g. "title", "name").
        """
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' must not be blank")


class UnknownValueError(ValidationError):
    """Raised when a value is outside its enumerated set.

    Attributes:
        field_name: The field being parsed (e.g. "role", "category").
        value: The rejected raw value.
    """

    def __init__(self, field_name: str, value: object) -> None:
        """Initialize the error.

        Args:
            field_name: The field being parsed.
            value: The rejected raw value.
        """
        self.field_name = field_name
        self.value = value
        super().__init__(f"Unknown {field_name}: {value!r}")


class InvalidStatusTransitionError(ValidationError):
    """Raised in strict workflow mode for a disallowed status edge.

    Attributes:
        proposal_id: The proposal whose status change was refused.
        from_status: Current status value.
        to_status: Requested status value.
    """

    def __init__(self, proposal_id: str, from_status: str, to_status: str) -> None:
        self.proposal_id = proposal_id
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Proposal {proposal_id} cannot move from {from_status} to {to_status}"
        )
