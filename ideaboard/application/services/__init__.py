"""Application services for IdeaBoard."""

from ideaboard.application.services.board_analytics_service import (
    BoardAnalyticsService,
)
from ideaboard.application.services.board_session_service import (
    BoardSessionService,
)
from ideaboard.application.services.board_synchronizer import (
    BoardSynchronizer,
    LoadedBoard,
)
from ideaboard.application.services.proposal_mutation_service import (
    ProposalMutationService,
    VoteDirection,
)
from ideaboard.application.services.proposal_view_service import (
    ProposalViewService,
)

__all__: list[str] = [
    "BoardAnalyticsService",
    "BoardSessionService",
    "BoardSynchronizer",
    "LoadedBoard",
    "ProposalMutationService",
    "ProposalViewService",
    "VoteDirection",
]
