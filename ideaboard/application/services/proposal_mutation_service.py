"""Proposal mutation service - the sole authority for board state changes.

This module implements the only legal ways to change the board:
register, submit, vote, comment, change status, convert to project and
delete. Every operation takes the current BoardState snapshot and returns
a new one, or the same object when the operation is a no-op. Refusals are
raised as typed domain errors; the session facade converts them into
MutationResult failures.

Invariants:
- Permission is checked first, then existence, then input; a blank
  project name is refused before the proposal lookup
- vote_count is derived from voter_ids, so it cannot drift
- Upvoting twice, or downvoting without an upvote, is a no-op
- Blank comment text is a no-op
- Conversion to a project happens at most once per proposal
- No I/O happens here; persistence follows in the session facade

Developer Golden Rules:
1. NEVER MUTATE - Snapshots are frozen; build new ones
2. FAIL LOUD - Log at warning before raising a refusal
3. NO ROLE STRINGS - Ask the policy about capabilities, never compare roles
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from structlog import get_logger

from ideaboard.application.ports.clock import ClockProtocol
from ideaboard.application.ports.id_generator import IdGeneratorProtocol
from ideaboard.domain.errors import (
    BlankFieldError,
    InvalidStatusTransitionError,
    ProposalNotFoundError,
    UnknownValueError,
)
from ideaboard.domain.models import (
    BoardState,
    Category,
    Comment,
    Participant,
    Project,
    Proposal,
    ProposalStatus,
    Role,
)
from ideaboard.domain.services.authorization_policy import (
    DEFAULT_AUTHORIZATION_POLICY,
    AuthorizationPolicy,
    Capability,
)
from ideaboard.domain.services.status_workflow import validate_transition

logger = get_logger(__name__)

PARTICIPANT_ID_PREFIX = "user"
PROPOSAL_ID_PREFIX = "idea"
COMMENT_ID_PREFIX = "c"
PROJECT_ID_PREFIX = "prj"


class VoteDirection(str, Enum):
    """Direction of a vote intent."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: str | VoteDirection) -> VoteDirection:
        """Parse a raw direction value.

        Raises:
            UnknownValueError: If the value is neither "up" nor "down".
        """
        if isinstance(value, VoteDirection):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownValueError("vote direction", value) from None


def _require_text(field_name: str, value: str) -> str:
    """Trim a required text field.

    Raises:
        BlankFieldError: If the value is empty after trimming.
    """
    trimmed = (value or "").strip()
    if not trimmed:
        logger.warning("blank_field_rejected", field=field_name)
        raise BlankFieldError(field_name)
    return trimmed


class ProposalMutationService:
    """Service applying board mutations to immutable snapshots.

    Example:
        >>> service = ProposalMutationService(clock=SystemClock(), ids=ids)
        >>> state, proposal = service.submit_proposal(
        ...     state, author, "Faster onboarding", "Reduce ramp time", "Process"
        ... )
    """

    def __init__(
        self,
        clock: ClockProtocol,
        ids: IdGeneratorProtocol,
        policy: AuthorizationPolicy = DEFAULT_AUTHORIZATION_POLICY,
        enforce_workflow: bool = False,
    ) -> None:
        """Initialize the mutation service.

        Args:
            clock: Source of creation timestamps.
            ids: Generator for fresh entity ids.
            policy: Role to capability table.
            enforce_workflow: If True, status changes are validated against
                the workflow table. Defaults to the permissive behaviour.
        """
        self._clock = clock
        self._ids = ids
        self._policy = policy
        self._enforce_workflow = enforce_workflow

    @property
    def policy(self) -> AuthorizationPolicy:
        return self._policy

    def _get_proposal(self, state: BoardState, proposal_id: str) -> Proposal:
        proposal = state.find_proposal(proposal_id)
        if proposal is None:
            logger.warning("proposal_not_found", proposal_id=proposal_id)
            raise ProposalNotFoundError(proposal_id)
        return proposal

    def register(
        self,
        state: BoardState,
        name: str,
        role: str | Role,
        department: Optional[str] = None,
    ) -> tuple[BoardState, Participant]:
        """Register a new participant.

        Registration does not log the participant in; the session is a
        presentation concern.

        Args:
            state: Current snapshot.
            name: Display name.
            role: Role value, e.g. "manager".
            department: Optional department label.

        Returns:
            Tuple of (new snapshot, created participant).

        Raises:
            BlankFieldError: Name is blank.
            UnknownValueError: Role is not a known role.
        """
        trimmed_name = _require_text("name", name)
        parsed_role = Role.parse(role)
        participant = Participant(
            participant_id=self._ids.new_id(PARTICIPANT_ID_PREFIX),
            name=trimmed_name,
            role=parsed_role,
            department=(department or "").strip() or None,
        )
        logger.info(
            "participant_registered",
            participant_id=participant.participant_id,
            role=parsed_role.value,
        )
        return state.with_participant(participant), participant

    def submit_proposal(
        self,
        state: BoardState,
        author: Participant,
        title: str,
        description: str,
        category: str | Category,
    ) -> tuple[BoardState, Proposal]:
        """Submit a new proposal.

        The proposal is prepended to the collection. Author name and
        department are copied so display stays stable.

        Returns:
            Tuple of (new snapshot, created proposal).

        Raises:
            CapabilityDeniedError: Author may not submit.
            BlankFieldError: Title or description is blank.
            UnknownValueError: Category is not a known category.
        """
        self._policy.require(author, Capability.SUBMIT)
        trimmed_title = _require_text("title", title)
        trimmed_description = _require_text("description", description)
        parsed_category = Category.parse(category)

        proposal = Proposal(
            proposal_id=self._ids.new_id(PROPOSAL_ID_PREFIX),
            author_id=author.participant_id,
            author_name=author.name,
            department=author.department,
            title=trimmed_title,
            description=trimmed_description,
            category=parsed_category,
            created_at=self._clock.now(),
        )
        logger.info(
            "proposal_submitted",
            proposal_id=proposal.proposal_id,
            author_id=author.participant_id,
            category=parsed_category.value,
        )
        return state.with_proposal_prepended(proposal), proposal

    def vote(
        self,
        state: BoardState,
        participant: Participant,
        proposal_id: str,
        direction: str | VoteDirection,
    ) -> BoardState:
        """Apply an up or down vote.

        UP adds the participant to the voter set, DOWN removes them.
        Repeating an UP, or a DOWN without a prior UP, returns ``state``
        unchanged.

        Raises:
            CapabilityDeniedError: Participant may not vote.
            ProposalNotFoundError: Proposal does not exist.
        """
        self._policy.require(participant, Capability.VOTE)
        proposal = self._get_proposal(state, proposal_id)
        voter_id = participant.participant_id
        parsed_direction = VoteDirection.parse(direction)

        if parsed_direction is VoteDirection.UP:
            updated = proposal.with_vote(voter_id)
        else:
            updated = proposal.without_vote(voter_id)

        if updated is proposal:
            logger.debug(
                "vote_noop",
                proposal_id=proposal_id,
                participant_id=voter_id,
                direction=parsed_direction.value,
            )
            return state

        logger.info(
            "vote_recorded",
            proposal_id=proposal_id,
            participant_id=voter_id,
            direction=parsed_direction.value,
            vote_count=updated.vote_count,
        )
        return state.with_proposal_replaced(updated)

    def comment(
        self,
        state: BoardState,
        author: Participant,
        proposal_id: str,
        text: str,
    ) -> BoardState:
        """Append a comment to a proposal.

        Blank text is a no-op and returns ``state`` unchanged.

        Raises:
            CapabilityDeniedError: Author may not comment.
            ProposalNotFoundError: Proposal does not exist.
        """
        self._policy.require(author, Capability.COMMENT)
        proposal = self._get_proposal(state, proposal_id)

        trimmed = (text or "").strip()
        if not trimmed:
            logger.debug("comment_noop_blank", proposal_id=proposal_id)
            return state

        comment = Comment(
            comment_id=self._ids.new_id(COMMENT_ID_PREFIX),
            author_id=author.participant_id,
            author_name=author.name,
            text=trimmed,
            created_at=self._clock.now(),
        )
        logger.info(
            "comment_added",
            proposal_id=proposal_id,
            comment_id=comment.comment_id,
            author_id=author.participant_id,
        )
        return state.with_proposal_replaced(proposal.with_comment(comment))

    def change_status(
        self,
        state: BoardState,
        actor: Participant,
        proposal_id: str,
        new_status: str | ProposalStatus,
    ) -> BoardState:
        """Set a proposal's status.

        In permissive mode any status is reachable from any other.
        Setting the current status is a no-op.

        Raises:
            CapabilityDeniedError: Actor may not moderate.
            ProposalNotFoundError: Proposal does not exist.
            UnknownValueError: Status value is not recognized.
            InvalidStatusTransitionError: Strict mode and disallowed edge.
        """
        self._policy.require(actor, Capability.MODERATE)
        proposal = self._get_proposal(state, proposal_id)
        target = ProposalStatus.parse(new_status)

        if target is proposal.status:
            return state

        if self._enforce_workflow:
            try:
                validate_transition(proposal_id, proposal.status, target)
            except InvalidStatusTransitionError:
                logger.warning(
                    "status_transition_rejected",
                    proposal_id=proposal_id,
                    from_status=proposal.status.value,
                    to_status=target.value,
                )
                raise

        logger.info(
            "status_changed",
            proposal_id=proposal_id,
            actor_id=actor.participant_id,
            from_status=proposal.status.value,
            to_status=target.value,
        )
        return state.with_proposal_replaced(proposal.with_status(target))

    def convert_to_project(
        self,
        state: BoardState,
        actor: Participant,
        proposal_id: str,
        project_name: str,
    ) -> BoardState:
        """Convert a proposal into a project owned by the actor.

        The first conversion wins: a proposal that already has a project
        is returned unchanged whatever name is given.

        Raises:
            CapabilityDeniedError: Actor may not convert.
            BlankFieldError: Project name is blank.
            ProposalNotFoundError: Proposal does not exist.
        """
        self._policy.require(actor, Capability.CONVERT)
        trimmed_name = _require_text("project_name", project_name)
        proposal = self._get_proposal(state, proposal_id)

        if proposal.has_project:
            logger.debug(
                "conversion_noop_existing_project",
                proposal_id=proposal_id,
                project_id=proposal.project.project_id if proposal.project else None,
            )
            return state

        project = Project(
            project_id=self._ids.new_id(PROJECT_ID_PREFIX),
            name=trimmed_name,
            owner_id=actor.participant_id,
            created_at=self._clock.now(),
        )
        logger.info(
            "proposal_converted",
            proposal_id=proposal_id,
            project_id=project.project_id,
            owner_id=actor.participant_id,
        )
        return state.with_proposal_replaced(proposal.with_project(project))

    def delete_proposal(
        self,
        state: BoardState,
        actor: Participant,
        proposal_id: str,
    ) -> BoardState:
        """Remove a proposal entirely.

        Raises:
            TopTierRequiredError: Actor is not top tier.
            ProposalNotFoundError: Proposal does not exist.
        """
        self._policy.require_top_tier(actor, "delete proposals")
        self._get_proposal(state, proposal_id)
        logger.info(
            "proposal_deleted",
            proposal_id=proposal_id,
            actor_id=actor.participant_id,
        )
        return state.without_proposal(proposal_id)
