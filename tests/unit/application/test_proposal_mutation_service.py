"""Unit tests for ProposalMutationService.

Covers every board mutation: registration, submission, voting, comments,
status changes (permissive and strict), project conversion and deletion.
Each test checks both the returned snapshot and that refused or no-op
operations leave the input snapshot untouched.
"""

from __future__ import annotations

import pytest

from ideaboard.application.services.proposal_mutation_service import (
    ProposalMutationService,
    VoteDirection,
)
from ideaboard.domain.errors import (
    BlankFieldError,
    CapabilityDeniedError,
    InvalidStatusTransitionError,
    ProposalNotFoundError,
    TopTierRequiredError,
    UnknownValueError,
)
from ideaboard.domain.models import (
    BoardState,
    Category,
    Participant,
    Proposal,
    ProposalStatus,
    Role,
)
from ideaboard.domain.services import AuthorizationPolicy
from tests.helpers import FakeClock, SequentialIdGenerator


@pytest.fixture
def seeded(
    engine: ProposalMutationService,
    roster_state: BoardState,
    employee: Participant,
) -> tuple[BoardState, Proposal]:
    """Snapshot with one proposal submitted by the employee."""
    return engine.submit_proposal(
        roster_state,
        employee,
        "Shorter standups",
        "Cap daily standups at ten minutes",
        "Process",
    )


class TestRegister:
    """Tests for participant registration."""

    def test_register_appends_participant(
        self, engine: ProposalMutationService, roster_state: BoardState
    ) -> None:
        state, participant = engine.register(roster_state, "  Dana  ", "manager", "Sales")

        assert participant.participant_id == "user_1"
        assert participant.name == "Dana"
        assert participant.role is Role.MANAGER
        assert participant.department == "Sales"
        assert state.participants[-1] == participant
        assert len(state.participants) == len(roster_state.participants) + 1

    def test_blank_department_becomes_none(
        self, engine: ProposalMutationService, roster_state: BoardState
    ) -> None:
        _, participant = engine.register(roster_state, "Dana", Role.EMPLOYEE, "  ")
        assert participant.department is None

    def test_blank_name_rejected(
        self, engine: ProposalMutationService, roster_state: BoardState
    ) -> None:
        with pytest.raises(BlankFieldError):
            engine.register(roster_state, "   ", "employee")

    def test_unknown_role_rejected(
        self, engine: ProposalMutationService, roster_state: BoardState
    ) -> None:
        with pytest.raises(UnknownValueError):
            engine.register(roster_state, "Dana", "ceo")


class TestSubmitProposal:
    """Tests for proposal submission."""

    def test_submit_creates_proposed_entry(
        self,
        seeded: tuple[BoardState, Proposal],
        employee: Participant,
    ) -> None:
        state, proposal = seeded

        assert proposal.proposal_id == "idea_1"
        assert proposal.status is ProposalStatus.PROPOSED
        assert proposal.vote_count == 0
        assert proposal.comments == ()
        assert proposal.project is None
        assert proposal.author_id == employee.participant_id
        assert proposal.author_name == employee.name
        assert proposal.department == employee.department
        assert proposal.category is Category.PROCESS
        assert state.proposals[0] == proposal

    def test_submit_prepends(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        other_employee: Participant,
    ) -> None:
        state, first = seeded
        state, second = engine.submit_proposal(
            state, other_employee, "Second monitor", "For every developer", "Tools/IT"
        )
        assert [p.proposal_id for p in state.proposals] == [
            second.proposal_id,
            first.proposal_id,
        ]
        assert second.created_at > first.created_at

    def test_title_and_description_trimmed(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
    ) -> None:
        _, proposal = engine.submit_proposal(
            roster_state, employee, "  Title  ", "\tBody\n", Category.SAFETY
        )
        assert proposal.title == "Title"
        assert proposal.description == "Body"

    @pytest.mark.parametrize(
        ("title", "description"), [("   ", "Body"), ("Title", ""), ("", "")]
    )
    def test_blank_fields_rejected(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
        title: str,
        description: str,
    ) -> None:
        with pytest.raises(BlankFieldError):
            engine.submit_proposal(roster_state, employee, title, description, "Process")

    def test_unknown_category_rejected(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
    ) -> None:
        with pytest.raises(UnknownValueError):
            engine.submit_proposal(roster_state, employee, "Title", "Body", "Parking")

    def test_role_without_submit_refused_before_validation(
        self,
        fake_clock: FakeClock,
        ids: SequentialIdGenerator,
        roster_state: BoardState,
        employee: Participant,
    ) -> None:
        locked = ProposalMutationService(
            clock=fake_clock,
            ids=ids,
            policy=AuthorizationPolicy(role_capabilities={}),
        )
        with pytest.raises(CapabilityDeniedError):
            locked.submit_proposal(roster_state, employee, "", "", "nonsense")


class TestVote:
    """Tests for up and down votes."""

    def test_upvote_adds_voter(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        other_employee: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.vote(state, other_employee, proposal.proposal_id, "up")
        updated = state.find_proposal(proposal.proposal_id)
        assert updated is not None
        assert updated.voter_ids == (other_employee.participant_id,)
        assert updated.vote_count == 1

    def test_repeated_upvote_is_noop(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        other_employee: Participant,
    ) -> None:
        state, proposal = seeded
        once = engine.vote(state, other_employee, proposal.proposal_id, VoteDirection.UP)
        twice = engine.vote(once, other_employee, proposal.proposal_id, VoteDirection.UP)
        assert twice is once

    def test_downvote_without_upvote_is_noop(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        other_employee: Participant,
    ) -> None:
        state, proposal = seeded
        assert engine.vote(state, other_employee, proposal.proposal_id, "down") is state

    def test_downvote_after_upvote_restores_count(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        other_employee: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.vote(state, other_employee, proposal.proposal_id, "up")
        state = engine.vote(state, other_employee, proposal.proposal_id, "down")
        updated = state.find_proposal(proposal.proposal_id)
        assert updated is not None
        assert updated.vote_count == 0
        assert updated.voter_ids == ()

    def test_author_may_vote_own_proposal(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        employee: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.vote(state, employee, proposal.proposal_id, "up")
        assert state.proposals[0].vote_count == 1

    def test_vote_on_missing_proposal(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
    ) -> None:
        with pytest.raises(ProposalNotFoundError):
            engine.vote(roster_state, employee, "idea_404", "up")

    def test_unknown_direction_rejected(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        employee: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(UnknownValueError):
            engine.vote(state, employee, proposal.proposal_id, "sideways")


class TestComment:
    """Tests for comments."""

    def test_comment_appended_with_author(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.comment(state, manager, proposal.proposal_id, "  Good idea  ")
        updated = state.find_proposal(proposal.proposal_id)
        assert updated is not None
        (comment,) = updated.comments
        assert comment.comment_id == "c_1"
        assert comment.text == "Good idea"
        assert comment.author_id == manager.participant_id
        assert comment.author_name == manager.name

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_comment_is_noop(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
        text: str,
    ) -> None:
        state, proposal = seeded
        assert engine.comment(state, manager, proposal.proposal_id, text) is state

    def test_comment_on_missing_proposal(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        manager: Participant,
    ) -> None:
        with pytest.raises(ProposalNotFoundError):
            engine.comment(roster_state, manager, "idea_404", "Hello")


class TestChangeStatus:
    """Tests for moderation in permissive and strict mode."""

    def test_employee_cannot_moderate(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        employee: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(CapabilityDeniedError):
            engine.change_status(state, employee, proposal.proposal_id, "approved")

    def test_permission_checked_before_existence(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
    ) -> None:
        with pytest.raises(CapabilityDeniedError):
            engine.change_status(roster_state, employee, "idea_404", "approved")

    def test_permissive_allows_any_edge(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.change_status(state, manager, proposal.proposal_id, "delivered")
        state = engine.change_status(state, manager, proposal.proposal_id, "proposed")
        assert state.proposals[0].status is ProposalStatus.PROPOSED

    def test_same_status_is_noop(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        assert (
            engine.change_status(state, manager, proposal.proposal_id, "proposed")
            is state
        )

    def test_unknown_status_rejected(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(UnknownValueError):
            engine.change_status(state, manager, proposal.proposal_id, "archived")

    def test_strict_rejects_delivered_to_proposed(
        self,
        strict_engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
        manager: Participant,
    ) -> None:
        state, proposal = strict_engine.submit_proposal(
            roster_state, employee, "Title", "Body", "Safety"
        )
        pid = proposal.proposal_id
        for status in ("reviewing", "approved", "in_project", "delivered"):
            state = strict_engine.change_status(state, manager, pid, status)

        with pytest.raises(InvalidStatusTransitionError):
            strict_engine.change_status(state, manager, pid, "proposed")
        assert state.proposals[0].status is ProposalStatus.DELIVERED

    def test_strict_rejects_skipping_review(
        self,
        strict_engine: ProposalMutationService,
        roster_state: BoardState,
        employee: Participant,
        manager: Participant,
    ) -> None:
        state, proposal = strict_engine.submit_proposal(
            roster_state, employee, "Title", "Body", "Safety"
        )
        with pytest.raises(InvalidStatusTransitionError):
            strict_engine.change_status(state, manager, proposal.proposal_id, "approved")


class TestConvertToProject:
    """Tests for project conversion."""

    def test_convert_attaches_project(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.convert_to_project(
            state, manager, proposal.proposal_id, "  Standup pilot  "
        )
        updated = state.find_proposal(proposal.proposal_id)
        assert updated is not None
        assert updated.status is ProposalStatus.IN_PROJECT
        assert updated.project is not None
        assert updated.project.project_id == "prj_1"
        assert updated.project.name == "Standup pilot"
        assert updated.project.owner_id == manager.participant_id

    def test_second_conversion_is_noop(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
        admin: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.convert_to_project(state, manager, proposal.proposal_id, "First")
        again = engine.convert_to_project(state, admin, proposal.proposal_id, "Second")
        assert again is state
        assert again.proposals[0].project is not None
        assert again.proposals[0].project.name == "First"

    def test_employee_cannot_convert(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        employee: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(CapabilityDeniedError):
            engine.convert_to_project(state, employee, proposal.proposal_id, "Mine")

    def test_blank_name_rejected(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(BlankFieldError):
            engine.convert_to_project(state, manager, proposal.proposal_id, "  ")


class TestDeleteProposal:
    """Tests for deletion, reserved for the top tier."""

    def test_admin_deletes(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        admin: Participant,
    ) -> None:
        state, proposal = seeded
        state = engine.delete_proposal(state, admin, proposal.proposal_id)
        assert state.find_proposal(proposal.proposal_id) is None
        assert state.proposals == ()

    def test_manager_cannot_delete(
        self,
        engine: ProposalMutationService,
        seeded: tuple[BoardState, Proposal],
        manager: Participant,
    ) -> None:
        state, proposal = seeded
        with pytest.raises(TopTierRequiredError):
            engine.delete_proposal(state, manager, proposal.proposal_id)
        assert state.find_proposal(proposal.proposal_id) is not None

    def test_delete_missing_proposal(
        self,
        engine: ProposalMutationService,
        roster_state: BoardState,
        admin: Participant,
    ) -> None:
        with pytest.raises(ProposalNotFoundError):
            engine.delete_proposal(roster_state, admin, "idea_404")
