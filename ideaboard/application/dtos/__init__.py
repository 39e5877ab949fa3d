"""Application-layer DTOs.

The application layer defines its own result and view types; stored record
shapes live here too because the synchronizer owns the wire format.
"""

from ideaboard.application.dtos.board_views import (
    ALL,
    BoardAnalytics,
    ParticipantProfile,
    ProposalQuery,
    SortMode,
)
from ideaboard.application.dtos.mutation_result import MutationResult

__all__: list[str] = [
    "ALL",
    "BoardAnalytics",
    "MutationResult",
    "ParticipantProfile",
    "ProposalQuery",
    "SortMode",
]
