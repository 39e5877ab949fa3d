"""Proposal domain models.

This module defines the domain models for submitted ideas:
- ProposalStatus: Workflow status with display labels
- Category: Fixed set of proposal categories
- Comment: Immutable, append-only remark on a proposal
- Project: Record attached once a proposal is converted
- Proposal: Main entity with voters, comments and optional project

Invariants:
- vote_count is always len(voter_ids); there is no separate counter
- A participant id appears in voter_ids at most once
- Comments keep insertion order and are never edited
- A project is attached at most once per proposal

All models are frozen; every change returns a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from ideaboard.domain.errors import UnknownValueError


class ProposalStatus(str, Enum):
    """Workflow status of a proposal.

    Intended flow: PROPOSED -> REVIEWING -> APPROVED -> IN_PROJECT ->
    DELIVERED, with REJECTED reachable from any non-terminal state. The
    flow is communicated through ordering and labels; only the strict
    workflow mode enforces it.
    """

    PROPOSED = "proposed"
    REVIEWING = "reviewing"
    APPROVED = "approved"
    IN_PROJECT = "in_project"
    DELIVERED = "delivered"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return STATUS_LABELS[self]

    @classmethod
    def parse(cls, value: str | ProposalStatus) -> ProposalStatus:
        """Parse a raw status value.

        Raises:
            UnknownValueError: If the value is not a known status.
        """
        if isinstance(value, ProposalStatus):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownValueError("status", value) from None


STATUS_LABELS: dict[ProposalStatus, str] = {
    ProposalStatus.PROPOSED: "Proposed",
    ProposalStatus.REVIEWING: "In review",
    ProposalStatus.APPROVED: "Approved",
    ProposalStatus.IN_PROJECT: "Converted to project",
    ProposalStatus.DELIVERED: "Delivered",
    ProposalStatus.REJECTED: "Rejected",
}


class Category(str, Enum):
    """Fixed set of proposal categories.

    The value doubles as the display label and is what text search matches.
    """

    PROCESS = "Process"
    SAFETY = "Safety"
    SERVICE_QUALITY = "Service quality"
    TOOLS_IT = "Tools/IT"
    COST_REDUCTION = "Cost reduction"
    CULTURE_HR = "Culture/HR"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """Parse a category by value, member name or legacy label.

        Value and member name match case-insensitively. Legacy labels are
        the Kazakh display names stored by earlier browser builds of the
        board and match exactly.

        Raises:
            UnknownValueError: If the value is not a known category.
        """
        if isinstance(value, Category):
            return value
        raw = str(value).strip()
        for member in cls:
            if raw.lower() in (member.value.lower(), member.name.lower()):
                return member
        legacy = _LEGACY_CATEGORY_LABELS.get(raw)
        if legacy is not None:
            return legacy
        raise UnknownValueError("category", value)


_LEGACY_CATEGORY_LABELS: dict[str, Category] = {
    "Процесс жақсарту": Category.PROCESS,
    "Қауіпсіздік": Category.SAFETY,
    "Қызмет сапасы": Category.SERVICE_QUALITY,
    "Құралдар/IT": Category.TOOLS_IT,
    "Шығынды азайту": Category.COST_REDUCTION,
    "Мәдениет/HR": Category.CULTURE_HR,
}


@dataclass(frozen=True, eq=True)
class Comment:
    """A remark on a proposal.

    Attributes:
        comment_id: Unique identifier.
        author_id: Participant who wrote the comment.
        author_name: Author name captured at creation.
        text: Trimmed, non-empty text.
        created_at: When the comment was added (UTC).
    """

    comment_id: str
    author_id: str
    author_name: str
    text: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("comment text must not be blank")


@dataclass(frozen=True, eq=True)
class Project:
    """Project record attached to a converted proposal.

    Attributes:
        project_id: Unique identifier.
        name: Project name (non-blank).
        owner_id: Participant who performed the conversion.
        created_at: When the conversion happened (UTC).
    """

    project_id: str
    name: str
    owner_id: str
    created_at: datetime


@dataclass(frozen=True, eq=True)
class Proposal:
    """A submitted idea with voting, comments and a workflow status.

    Attributes:
        proposal_id: Unique identifier.
        author_id: Participant who submitted the proposal.
        author_name: Author name captured at submission time.
        department: Author department captured at submission time.
        title: Trimmed, non-empty title.
        description: Trimmed, non-empty description.
        category: One of the fixed categories.
        created_at: Submission time (UTC).
        status: Current workflow status.
        voter_ids: Participants who upvoted, each at most once.
        comments: Comments in insertion order.
        project: Attached project record, if converted.
    """

    proposal_id: str
    author_id: str
    author_name: str
    department: Optional[str]
    title: str
    description: str
    category: Category
    created_at: datetime
    status: ProposalStatus = field(default=ProposalStatus.PROPOSED)
    voter_ids: tuple[str, ...] = field(default_factory=tuple)
    comments: tuple[Comment, ...] = field(default_factory=tuple)
    project: Optional[Project] = field(default=None)

    def __post_init__(self) -> None:
        """Validate proposal fields after initialization.

        Raises:
            ValueError: If the voter set contains duplicates.
        """
        if len(set(self.voter_ids)) != len(self.voter_ids):
            raise ValueError("voter_ids must not contain duplicates")

    @property
    def vote_count(self) -> int:
        """Number of upvotes, derived from the voter set."""
        return len(self.voter_ids)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def has_project(self) -> bool:
        return self.project is not None

    def has_voted(self, participant_id: str) -> bool:
        """Check whether a participant has upvoted this proposal."""
        return participant_id in self.voter_ids

    def with_vote(self, participant_id: str) -> Proposal:
        """Return a copy with the participant added to the voter set.

        Adding an existing voter returns ``self`` unchanged.
        """
        if self.has_voted(participant_id):
            return self
        return replace(self, voter_ids=self.voter_ids + (participant_id,))

    def without_vote(self, participant_id: str) -> Proposal:
        """Return a copy with the participant removed from the voter set.

        Removing a non-voter returns ``self`` unchanged.
        """
        if not self.has_voted(participant_id):
            return self
        return replace(
            self,
            voter_ids=tuple(v for v in self.voter_ids if v != participant_id),
        )

    def with_comment(self, comment: Comment) -> Proposal:
        """Return a copy with the comment appended."""
        return replace(self, comments=self.comments + (comment,))

    def with_status(self, status: ProposalStatus) -> Proposal:
        """Return a copy with the updated status."""
        return replace(self, status=status)

    def with_project(self, project: Project) -> Proposal:
        """Return a copy converted into a project.

        Sets the status to IN_PROJECT together with the project record.
        """
        return replace(self, status=ProposalStatus.IN_PROJECT, project=project)
