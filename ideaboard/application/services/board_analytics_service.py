"""Board analytics service.

Computes summary statistics over the full proposal collection. Histograms
enumerate every known status and category, zero counts included, so a
presentation layer can draw empty bars without special cases.
"""

from __future__ import annotations

from collections.abc import Iterable

from structlog import get_logger

from ideaboard.application.dtos.board_views import BoardAnalytics
from ideaboard.domain.models import Category, Proposal, ProposalStatus

logger = get_logger(__name__)


class BoardAnalyticsService:
    """Aggregates proposal counts, votes and histograms."""

    def summarize(self, proposals: Iterable[Proposal]) -> BoardAnalytics:
        """Compute analytics for a proposal collection.

        The top proposal is the first one, in collection order, holding the
        highest vote count.

        Args:
            proposals: Full proposal collection (not modified).

        Returns:
            BoardAnalytics for the collection.
        """
        by_status = {status: 0 for status in ProposalStatus}
        by_category = {category: 0 for category in Category}
        total = 0
        total_votes = 0
        project_count = 0
        top: Proposal | None = None

        for proposal in proposals:
            total += 1
            total_votes += proposal.vote_count
            by_status[proposal.status] += 1
            by_category[proposal.category] += 1
            if proposal.has_project:
                project_count += 1
            if top is None or proposal.vote_count > top.vote_count:
                top = proposal

        logger.debug(
            "analytics_computed",
            total_proposals=total,
            total_votes=total_votes,
            project_count=project_count,
        )
        return BoardAnalytics(
            total_proposals=total,
            total_votes=total_votes,
            project_count=project_count,
            top_proposal=top,
            by_status=by_status,
            by_category=by_category,
        )
