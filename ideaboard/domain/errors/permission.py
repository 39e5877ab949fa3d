"""Permission errors raised by the authorization policy.

Roles are self-assigned labels, so these errors describe the permission
model only; they are not a security boundary.
"""

from __future__ import annotations

from ideaboard.domain.exceptions import ErrorKind, IdeaBoardError


class PermissionDeniedError(IdeaBoardError):
    """Base error for refused actions.

    Named to avoid shadowing the builtin ``PermissionError``.
    """

    error_kind = ErrorKind.PERMISSION


class CapabilityDeniedError(PermissionDeniedError):
    """Raised when a role lacks the capability an operation needs.

    Attributes:
        participant_id: The acting participant.
        role: The acting participant's role value.
        capability: The capability that was required.
    """

    def __init__(self, participant_id: str, role: str, capability: str) -> None:
        """Initialize the error.

        Args:
            participant_id: The acting participant.
            role: The acting participant's role value.
            capability: The capability that was required.
        """
        self.participant_id = participant_id
        self.role = role
        self.capability = capability
        super().__init__(
            f"Role '{role}' of participant {participant_id} "
            f"may not {capability}"
        )


class TopTierRequiredError(PermissionDeniedError):
    """Raised when an operation is reserved for the top privilege tier."""

    def __init__(self, participant_id: str, role: str, action: str) -> None:
        self.participant_id = participant_id
        self.role = role
        self.action = action
        super().__init__(
            f"Only top-tier roles may {action}; participant {participant_id} "
            f"has role '{role}'"
        )


class NoActiveParticipantError(PermissionDeniedError):
    """Raised when an acting operation runs without a logged-in participant."""

    def __init__(self) -> None:
        super().__init__("No participant is logged in")
