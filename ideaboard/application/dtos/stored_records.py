"""Stored record shapes for the durable key-value store.

Pydantic models for the JSON text kept under the three store keys. They
double as the shape check applied on load: anything that fails validation
is treated as malformed and replaced by the synchronizer's fallback.

Wire format (camelCase, compatible with records written by earlier
browser builds of the board, whose Kazakh category labels are accepted
on load):

    participant: {"id", "name", "role", "dept"?}
    proposal:    {"id", "authorId", "authorName", "dept"?, "title", "desc",
                  "category", "status", "votes", "voterIds", "comments",
                  "createdAt", "project"?}
    comment:     {"id", "userId", "userName", "text", "createdAt"}
    project:     {"id", "name", "ownerId", "createdAt"}

Timestamps are epoch milliseconds. "votes" is written for readers of the
raw record but ignored on load; the count is rebuilt from "voterIds".
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter
from structlog import get_logger

from ideaboard.domain.errors import UnknownValueError
from ideaboard.domain.models import (
    Category,
    Comment,
    Participant,
    Project,
    Proposal,
    ProposalStatus,
    Role,
)

logger = get_logger(__name__)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds."""
    return round(value.timestamp() * 1000)


def from_epoch_millis(value: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime.

    Raises:
        ValueError: If the value is outside the platform's datetime range.
    """
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp out of range: {value}") from e


class _StoredRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StoredParticipant(_StoredRecord):
    """Participant record. The string id is the mandatory shape check."""

    id: StrictStr
    name: str = ""
    role: str = Role.EMPLOYEE.value
    dept: Optional[str] = None

    @classmethod
    def from_domain(cls, participant: Participant) -> StoredParticipant:
        return cls(
            id=participant.participant_id,
            name=participant.name,
            role=participant.role.value,
            dept=participant.department,
        )

    def to_domain(self) -> Participant:
        """Convert to a Participant.

        A role label outside the known set degrades to employee, the least
        privileged role, instead of discarding the whole roster.
        """
        try:
            role = Role.parse(self.role)
        except UnknownValueError:
            logger.warning(
                "stored_participant_unknown_role",
                participant_id=self.id,
                role=self.role,
            )
            role = Role.EMPLOYEE
        return Participant(
            participant_id=self.id,
            name=self.name.strip() or self.id,
            role=role,
            department=self.dept or None,
        )


class StoredComment(_StoredRecord):
    id: StrictStr
    user_id: StrictStr = Field(alias="userId")
    user_name: str = Field(alias="userName")
    text: str
    created_at: int = Field(alias="createdAt")

    @classmethod
    def from_domain(cls, comment: Comment) -> StoredComment:
        return cls(
            id=comment.comment_id,
            userId=comment.author_id,
            userName=comment.author_name,
            text=comment.text,
            createdAt=to_epoch_millis(comment.created_at),
        )

    def to_domain(self) -> Comment:
        return Comment(
            comment_id=self.id,
            author_id=self.user_id,
            author_name=self.user_name,
            text=self.text,
            created_at=from_epoch_millis(self.created_at),
        )


class StoredProject(_StoredRecord):
    id: StrictStr
    name: str
    owner_id: StrictStr = Field(alias="ownerId")
    created_at: int = Field(alias="createdAt")

    @classmethod
    def from_domain(cls, project: Project) -> StoredProject:
        return cls(
            id=project.project_id,
            name=project.name,
            ownerId=project.owner_id,
            createdAt=to_epoch_millis(project.created_at),
        )

    def to_domain(self) -> Project:
        return Project(
            project_id=self.id,
            name=self.name,
            owner_id=self.owner_id,
            created_at=from_epoch_millis(self.created_at),
        )


class StoredProposal(_StoredRecord):
    """Proposal record.

    Category and status are kept as raw strings here and parsed in
    to_domain, so an unknown value fails the load like any other shape
    violation.
    """

    id: StrictStr
    author_id: StrictStr = Field(alias="authorId")
    author_name: str = Field(alias="authorName")
    dept: Optional[str] = None
    title: str
    desc: str
    category: str
    status: str = ProposalStatus.PROPOSED.value
    votes: int = 0
    voter_ids: list[StrictStr] = Field(default_factory=list, alias="voterIds")
    comments: list[StoredComment] = Field(default_factory=list)
    created_at: int = Field(alias="createdAt")
    project: Optional[StoredProject] = None

    @classmethod
    def from_domain(cls, proposal: Proposal) -> StoredProposal:
        return cls(
            id=proposal.proposal_id,
            authorId=proposal.author_id,
            authorName=proposal.author_name,
            dept=proposal.department,
            title=proposal.title,
            desc=proposal.description,
            category=proposal.category.value,
            status=proposal.status.value,
            votes=proposal.vote_count,
            voterIds=list(proposal.voter_ids),
            comments=[StoredComment.from_domain(c) for c in proposal.comments],
            createdAt=to_epoch_millis(proposal.created_at),
            project=(
                StoredProject.from_domain(proposal.project)
                if proposal.project is not None
                else None
            ),
        )

    def to_domain(self) -> Proposal:
        """Convert to a Proposal.

        Duplicate voter ids are collapsed (first occurrence kept), which
        also repairs records whose stored counter had drifted.

        Raises:
            UnknownValueError: If category or status is not recognized.
        """
        return Proposal(
            proposal_id=self.id,
            author_id=self.author_id,
            author_name=self.author_name,
            department=self.dept or None,
            title=self.title,
            description=self.desc,
            category=Category.parse(self.category),
            status=ProposalStatus.parse(self.status),
            created_at=from_epoch_millis(self.created_at),
            voter_ids=tuple(dict.fromkeys(self.voter_ids)),
            comments=tuple(c.to_domain() for c in self.comments),
            project=self.project.to_domain() if self.project else None,
        )


PARTICIPANT_LIST_ADAPTER = TypeAdapter(list[StoredParticipant])
PROPOSAL_LIST_ADAPTER = TypeAdapter(list[StoredProposal])


def encode_participants(participants: tuple[Participant, ...]) -> str:
    """Serialize the roster to JSON text."""
    records = [StoredParticipant.from_domain(p) for p in participants]
    return PARTICIPANT_LIST_ADAPTER.dump_json(
        records, by_alias=True, exclude_none=True
    ).decode("utf-8")


def decode_participants(raw: str) -> tuple[Participant, ...]:
    """Parse and shape-check roster JSON text.

    Raises:
        pydantic.ValidationError: If the text is not a JSON array of
            records each bearing a string id.
    """
    records = PARTICIPANT_LIST_ADAPTER.validate_json(raw)
    return tuple(r.to_domain() for r in records)


def encode_proposals(proposals: tuple[Proposal, ...]) -> str:
    """Serialize the proposal collection to JSON text."""
    records = [StoredProposal.from_domain(p) for p in proposals]
    return PROPOSAL_LIST_ADAPTER.dump_json(
        records, by_alias=True, exclude_none=True
    ).decode("utf-8")


def decode_proposals(raw: str) -> tuple[Proposal, ...]:
    """Parse and shape-check proposal JSON text.

    Raises:
        pydantic.ValidationError: If the JSON is malformed or a record
            is missing required fields.
        UnknownValueError: If a category or status is not recognized.
        ValueError: If a record violates a model invariant.
    """
    records = PROPOSAL_LIST_ADAPTER.validate_json(raw)
    return tuple(r.to_domain() for r in records)


def encode_session_id(participant_id: str) -> str:
    """Serialize the current-session participant id as a JSON string."""
    return json.dumps(participant_id)


def decode_session_id(raw: str) -> Optional[str]:
    """Normalize a stored session value to a participant id.

    Accepted shapes:
    - a JSON string: "u1"
    - a JSON object with a string id: {"id": "u1"}
    - unquoted text that is not JSON: u1

    Returns:
        The participant id, or None if the value is empty or an object
        without a string id.
    """
    text = raw.strip()
    if not text:
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return text
    if isinstance(parsed, str):
        return parsed or None
    if isinstance(parsed, dict):
        session_id = parsed.get("id")
        return session_id if isinstance(session_id, str) and session_id else None
    return text
