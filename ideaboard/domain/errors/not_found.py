"""Not-found errors for referenced entities.

Callers treat these as a stale-view signal: the entity vanished (for example
it was deleted by another writer) and the view should be refreshed.
"""

from __future__ import annotations

from ideaboard.domain.exceptions import ErrorKind, IdeaBoardError


class NotFoundError(IdeaBoardError):
    """Base error for missing entities."""

    error_kind = ErrorKind.NOT_FOUND


class ProposalNotFoundError(NotFoundError):
    """Raised when a proposal id does not exist in the snapshot.

    Attributes:
        proposal_id: The proposal id that was not found.
    """

    def __init__(self, proposal_id: str) -> None:
        """Initialize the error.

        Args:
            proposal_id: The proposal id that was not found.
        """
        self.proposal_id = proposal_id
        super().__init__(f"Proposal not found: {proposal_id}")


class ParticipantNotFoundError(NotFoundError):
    """Raised when a participant id does not exist in the roster."""

    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(f"Participant not found: {participant_id}")
