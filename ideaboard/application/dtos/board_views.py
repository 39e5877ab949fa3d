"""Read-side DTOs: proposal queries, analytics and profiles.

These are transient, derived values. They are rebuilt on every read and
never written back into the board snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ideaboard.domain.errors import UnknownValueError
from ideaboard.domain.models import (
    Category,
    Participant,
    Proposal,
    ProposalStatus,
)

ALL = "all"
"""Pass-through value for category and status filters."""


class SortMode(str, Enum):
    """Ordering of projected proposal lists.

    Values:
        TOP: Vote count descending, newest first on ties.
        NEW: Creation time descending.
        ACTIVE: Comment count descending.
    """

    TOP = "top"
    NEW = "new"
    ACTIVE = "active"

    @classmethod
    def parse(cls, value: str | SortMode) -> SortMode:
        """Parse a raw sort mode.

        Raises:
            UnknownValueError: If the value is not a known sort mode.
        """
        if isinstance(value, SortMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownValueError("sort", value) from None


@dataclass(frozen=True)
class ProposalQuery:
    """Filter and sort options for the proposal list.

    Attributes:
        text: Free-text search; blank matches everything.
        category: A Category or ALL.
        status: A ProposalStatus or ALL.
        sort: A SortMode or its raw value.
    """

    text: str = ""
    category: Union[Category, str] = ALL
    status: Union[ProposalStatus, str] = ALL
    sort: Union[SortMode, str] = SortMode.TOP


@dataclass(frozen=True)
class BoardAnalytics:
    """Summary statistics over the full proposal collection.

    Attributes:
        total_proposals: Number of proposals.
        total_votes: Sum of vote counts.
        project_count: Proposals with an attached project.
        top_proposal: Highest-voted proposal (first on ties), None if empty.
        by_status: Count per status; every status present, zeros included.
        by_category: Count per category; every category present, zeros included.
    """

    total_proposals: int
    total_votes: int
    project_count: int
    top_proposal: Optional[Proposal]
    by_status: dict[ProposalStatus, int] = field(default_factory=dict)
    by_category: dict[Category, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ParticipantProfile:
    """Contribution summary for one participant.

    Attributes:
        participant: The participant described.
        proposals: Proposals the participant authored, collection order.
        votes_received: Sum of votes across those proposals.
        comments_received: Sum of comments across those proposals.
    """

    participant: Participant
    proposals: tuple[Proposal, ...]
    votes_received: int
    comments_received: int
