"""Proposal workflow table.

The board ships in permissive mode: an authorized moderator may set any
status from any other (manager override). This table describes the intended
review flow and is enforced only when the mutation service is built with
strict workflow enabled.

State Transitions (VALID_TRANSITIONS):
- PROPOSED -> REVIEWING, REJECTED
- REVIEWING -> APPROVED, REJECTED
- APPROVED -> IN_PROJECT, REJECTED
- IN_PROJECT -> DELIVERED, REJECTED
- DELIVERED, REJECTED -> (terminal)
"""

from __future__ import annotations

from ideaboard.domain.errors import InvalidStatusTransitionError
from ideaboard.domain.models.proposal import ProposalStatus

VALID_TRANSITIONS: dict[ProposalStatus, frozenset[ProposalStatus]] = {
    ProposalStatus.PROPOSED: frozenset(
        {ProposalStatus.REVIEWING, ProposalStatus.REJECTED}
    ),
    ProposalStatus.REVIEWING: frozenset(
        {ProposalStatus.APPROVED, ProposalStatus.REJECTED}
    ),
    ProposalStatus.APPROVED: frozenset(
        {ProposalStatus.IN_PROJECT, ProposalStatus.REJECTED}
    ),
    ProposalStatus.IN_PROJECT: frozenset(
        {ProposalStatus.DELIVERED, ProposalStatus.REJECTED}
    ),
    ProposalStatus.DELIVERED: frozenset(),  # Terminal
    ProposalStatus.REJECTED: frozenset(),  # Terminal
}


def can_transition(current: ProposalStatus, target: ProposalStatus) -> bool:
    """Check whether the workflow allows moving from current to target."""
    return target in VALID_TRANSITIONS.get(current, frozenset())


def is_terminal(status: ProposalStatus) -> bool:
    return not VALID_TRANSITIONS.get(status)


def validate_transition(
    proposal_id: str, current: ProposalStatus, target: ProposalStatus
) -> None:
    """Validate a status edge against the workflow table.

    Args:
        proposal_id: Proposal being moved, for the error message.
        current: Current status.
        target: Requested status.

    Raises:
        InvalidStatusTransitionError: If the edge is not in the table.
    """
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(proposal_id, current.value, target.value)
