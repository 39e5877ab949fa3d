"""Domain models for IdeaBoard entities."""

from ideaboard.domain.models.board_state import BoardState
from ideaboard.domain.models.participant import Participant, Role
from ideaboard.domain.models.proposal import (
    STATUS_LABELS,
    Category,
    Comment,
    Project,
    Proposal,
    ProposalStatus,
)

__all__: list[str] = [
    "STATUS_LABELS",
    "BoardState",
    "Category",
    "Comment",
    "Participant",
    "Project",
    "Proposal",
    "ProposalStatus",
    "Role",
]
