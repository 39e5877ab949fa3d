"""Board session service - the entry point for a presentation layer.

Holds the current board snapshot and the logged-in participant for one
session. Every intent:

1. runs under a fresh correlation id
2. resolves the acting participant (PERMISSION failure if nobody is
   logged in)
3. asks the mutation service for a new snapshot
4. swaps the snapshot in, then commits the changed collections

Domain errors never escape: they come back as MutationResult failures
with the unchanged snapshot. Store driver errors do propagate.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from ideaboard.application.dtos.board_views import (
    BoardAnalytics,
    ParticipantProfile,
    ProposalQuery,
)
from ideaboard.application.dtos.mutation_result import MutationResult
from ideaboard.application.services.base import LoggingMixin
from ideaboard.application.services.board_analytics_service import (
    BoardAnalyticsService,
)
from ideaboard.application.services.board_synchronizer import BoardSynchronizer
from ideaboard.application.services.proposal_mutation_service import (
    ProposalMutationService,
    VoteDirection,
)
from ideaboard.application.services.proposal_view_service import (
    ProposalViewService,
)
from ideaboard.domain.errors import NoActiveParticipantError, ParticipantNotFoundError
from ideaboard.domain.exceptions import IdeaBoardError
from ideaboard.domain.models import (
    BoardState,
    Category,
    Participant,
    Proposal,
    ProposalStatus,
    Role,
)
from ideaboard.infrastructure.observability.correlation import correlation_scope

# An action maps the current snapshot to (new snapshot, id of the created entity)
_Action = Callable[[BoardState], tuple[BoardState, Optional[str]]]


class BoardSessionService(LoggingMixin):
    """Session facade over the mutation, view and analytics services.

    Example:
        >>> session = BoardSessionService(engine, BoardSynchronizer(store))
        >>> session.login("u1")
        >>> result = session.submit_proposal("Shorter standups", "...", "Process")
        >>> result.ok, result.entity_id
        (True, 'idea_...')
    """

    def __init__(
        self,
        engine: ProposalMutationService,
        synchronizer: BoardSynchronizer,
        views: Optional[ProposalViewService] = None,
        analytics: Optional[BoardAnalyticsService] = None,
    ) -> None:
        """Load the board and the stored session.

        Args:
            engine: Mutation service producing new snapshots.
            synchronizer: Store client used for load and commit.
            views: Projection service. Defaults to a new instance.
            analytics: Analytics service. Defaults to a new instance.
        """
        self._engine = engine
        self._synchronizer = synchronizer
        self._views = views or ProposalViewService()
        self._analytics = analytics or BoardAnalyticsService()
        self._init_logger()

        loaded = synchronizer.load()
        self._state = loaded.state
        self._participant_id = loaded.session_participant_id

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def current_participant_id(self) -> Optional[str]:
        return self._participant_id

    @property
    def current_participant(self) -> Optional[Participant]:
        """The logged-in participant, or None.

        A stored session id that no longer matches a roster entry resolves
        to None, which reads as "logged out".
        """
        if self._participant_id is None:
            return None
        return self._state.find_participant(self._participant_id)

    def _require_actor(self) -> Participant:
        participant = self.current_participant
        if participant is None:
            raise NoActiveParticipantError()
        return participant

    def _apply(
        self,
        operation: str,
        action: _Action,
        entity_id: Optional[str] = None,
        **context: object,
    ) -> MutationResult:
        with correlation_scope():
            log = self._log_operation(
                operation, participant_id=self._participant_id, **context
            )
            previous = self._state
            try:
                current, created_id = action(previous)
            except IdeaBoardError as e:
                log.info(
                    "intent_refused",
                    error_kind=e.error_kind.value,
                    message=e.message,
                )
                return MutationResult.failure(previous, e, entity_id)

            changed = current is not previous
            if changed:
                self._state = current
                self._synchronizer.commit(previous, current)
            log.debug("intent_applied", changed=changed)
            return MutationResult.success(
                current, changed=changed, entity_id=created_id or entity_id
            )

    # Session

    def login(self, participant_id: str) -> MutationResult:
        """Log a roster participant in and persist the session id."""
        with correlation_scope():
            log = self._log_operation("login", participant_id=participant_id)
            if self._state.find_participant(participant_id) is None:
                log.warning("login_unknown_participant")
                return MutationResult.failure(
                    self._state,
                    ParticipantNotFoundError(participant_id),
                    participant_id,
                )
            self._participant_id = participant_id
            self._synchronizer.save_session(participant_id)
            log.info("participant_logged_in")
            return MutationResult.success(
                self._state, changed=False, entity_id=participant_id
            )

    def logout(self) -> MutationResult:
        """Clear the session and remove the stored session id."""
        with correlation_scope():
            log = self._log_operation(
                "logout", participant_id=self._participant_id
            )
            self._participant_id = None
            self._synchronizer.save_session(None)
            log.info("participant_logged_out")
            return MutationResult.success(self._state, changed=False)

    # Mutations

    def register(
        self,
        name: str,
        role: str | Role,
        department: Optional[str] = None,
    ) -> MutationResult:
        """Register a participant. Needs no login and does not log in."""

        def action(state: BoardState) -> tuple[BoardState, Optional[str]]:
            new_state, participant = self._engine.register(
                state, name, role, department
            )
            return new_state, participant.participant_id

        return self._apply("register", action)

    def submit_proposal(
        self,
        title: str,
        description: str,
        category: str | Category,
    ) -> MutationResult:
        def action(state: BoardState) -> tuple[BoardState, Optional[str]]:
            new_state, proposal = self._engine.submit_proposal(
                state, self._require_actor(), title, description, category
            )
            return new_state, proposal.proposal_id

        return self._apply("submit_proposal", action)

    def vote(
        self, proposal_id: str, direction: str | VoteDirection
    ) -> MutationResult:
        return self._apply(
            "vote",
            lambda state: (
                self._engine.vote(
                    state, self._require_actor(), proposal_id, direction
                ),
                None,
            ),
            proposal_id,
            proposal_id=proposal_id,
        )

    def comment(self, proposal_id: str, text: str) -> MutationResult:
        return self._apply(
            "comment",
            lambda state: (
                self._engine.comment(state, self._require_actor(), proposal_id, text),
                None,
            ),
            proposal_id,
            proposal_id=proposal_id,
        )

    def change_status(
        self, proposal_id: str, new_status: str | ProposalStatus
    ) -> MutationResult:
        return self._apply(
            "change_status",
            lambda state: (
                self._engine.change_status(
                    state, self._require_actor(), proposal_id, new_status
                ),
                None,
            ),
            proposal_id,
            proposal_id=proposal_id,
        )

    def convert_to_project(
        self, proposal_id: str, project_name: str
    ) -> MutationResult:
        return self._apply(
            "convert_to_project",
            lambda state: (
                self._engine.convert_to_project(
                    state, self._require_actor(), proposal_id, project_name
                ),
                None,
            ),
            proposal_id,
            proposal_id=proposal_id,
        )

    def delete_proposal(self, proposal_id: str) -> MutationResult:
        return self._apply(
            "delete_proposal",
            lambda state: (
                self._engine.delete_proposal(
                    state, self._require_actor(), proposal_id
                ),
                None,
            ),
            proposal_id,
            proposal_id=proposal_id,
        )

    # Reads

    def list_proposals(
        self, query: Optional[ProposalQuery] = None
    ) -> list[Proposal]:
        return self._views.project(self._state.proposals, query or ProposalQuery())

    def list_projects(self) -> list[Proposal]:
        return self._views.list_projects(self._state.proposals)

    def analytics(self) -> BoardAnalytics:
        return self._analytics.summarize(self._state.proposals)

    def profile(self) -> Optional[ParticipantProfile]:
        """Contribution summary of the logged-in participant, if any."""
        participant = self.current_participant
        if participant is None:
            return None
        return self._views.participant_profile(self._state.proposals, participant)
