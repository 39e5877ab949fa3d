"""Proposal view service - read-only projections for presentation.

Filters and sorts the proposal collection for display, lists converted
projects, and summarizes a participant's contributions. Every call builds
a fresh list from the snapshot it is given; the source collection is never
reordered or written back.

Filter semantics:
- text: case-insensitive substring of title, description, category label
  or department; blank text matches everything
- category/status: exact match, or pass-through for ALL

Sort semantics:
- TOP: vote count descending, then creation time descending
- NEW: creation time descending
- ACTIVE: comment count descending (ties keep collection order)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TypeVar

from ideaboard.application.dtos.board_views import (
    ALL,
    ParticipantProfile,
    ProposalQuery,
    SortMode,
)
from ideaboard.domain.models import Category, Participant, Proposal, ProposalStatus

T = TypeVar("T")


def _matches_text(proposal: Proposal, needle: str) -> bool:
    haystacks = (
        proposal.title,
        proposal.description,
        proposal.category.label,
        proposal.department or "",
    )
    return any(needle in h.lower() for h in haystacks)


def _resolve_filter(value: object, parser: Callable[[object], T]) -> Optional[T]:
    """Parse a filter value, mapping ALL to None."""
    if isinstance(value, str) and value.strip().lower() == ALL:
        return None
    return parser(value)


class ProposalViewService:
    """Stateless projections over a proposal collection.

    Example:
        >>> views = ProposalViewService()
        >>> views.project(state.proposals, ProposalQuery(sort=SortMode.NEW))
    """

    def project(
        self, proposals: Iterable[Proposal], query: ProposalQuery
    ) -> list[Proposal]:
        """Filter then sort proposals for display.

        Args:
            proposals: Source collection (not modified).
            query: Filter and sort options.

        Returns:
            A new list in display order.

        Raises:
            UnknownValueError: If the category or status filter is neither
                ALL nor a known value, or the sort mode is unknown.
        """
        category = _resolve_filter(query.category, Category.parse)
        status = _resolve_filter(query.status, ProposalStatus.parse)
        # Blank queries skip the filter; others match untrimmed
        needle = query.text.lower() if query.text.strip() else ""

        result = [
            p
            for p in proposals
            if (not needle or _matches_text(p, needle))
            and (category is None or p.category is category)
            and (status is None or p.status is status)
        ]
        return self.sort(result, SortMode.parse(query.sort))

    @staticmethod
    def sort(proposals: Sequence[Proposal], mode: SortMode) -> list[Proposal]:
        """Return a sorted copy of the proposals."""
        if mode is SortMode.TOP:
            return sorted(
                proposals,
                key=lambda p: (p.vote_count, p.created_at),
                reverse=True,
            )
        if mode is SortMode.NEW:
            return sorted(proposals, key=lambda p: p.created_at, reverse=True)
        return sorted(proposals, key=lambda p: p.comment_count, reverse=True)

    @staticmethod
    def list_projects(proposals: Iterable[Proposal]) -> list[Proposal]:
        """Proposals that carry a project, in collection order."""
        return [p for p in proposals if p.project is not None]

    @staticmethod
    def participant_profile(
        proposals: Iterable[Proposal], participant: Participant
    ) -> ParticipantProfile:
        """Summarize the proposals a participant authored.

        Args:
            proposals: Full proposal collection.
            participant: The participant to summarize.

        Returns:
            ParticipantProfile with own proposals and received totals.
        """
        mine = tuple(
            p for p in proposals if p.author_id == participant.participant_id
        )
        return ParticipantProfile(
            participant=participant,
            proposals=mine,
            votes_received=sum(p.vote_count for p in mine),
            comments_received=sum(p.comment_count for p in mine),
        )
