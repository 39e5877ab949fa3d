"""Integration tests for the wired board.

Exercises the board through create_board_session with a real store,
covering the behaviours a presentation layer relies on: idempotent
voting, comment trimming, first-conversion-wins, admin-only deletion,
view ordering, empty analytics and persistence across restarts.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ideaboard.application.dtos import ALL, ProposalQuery, SortMode
from ideaboard.application.services import BoardSessionService
from ideaboard.bootstrap import create_board_session
from ideaboard.config import (
    TEST_STORAGE_CONFIG,
    BoardEngineConfig,
    BoardStorageConfig,
    StorageBackend,
)
from ideaboard.domain.exceptions import ErrorKind
from ideaboard.domain.models import Category, ProposalStatus
from ideaboard.infrastructure.stubs import InMemoryKeyValueStoreStub
from tests.helpers import FakeClock, SequentialIdGenerator

pytestmark = pytest.mark.integration


@pytest.fixture
def board_store() -> InMemoryKeyValueStoreStub:
    return InMemoryKeyValueStoreStub()


@pytest.fixture
def make_session(board_store: InMemoryKeyValueStoreStub, fake_clock: FakeClock):
    """Factory opening a session over the shared store, as a restart would."""

    def _make(enforce_workflow: bool = False) -> BoardSessionService:
        return create_board_session(
            storage_config=TEST_STORAGE_CONFIG,
            engine_config=BoardEngineConfig(enforce_workflow=enforce_workflow),
            store=board_store,
            clock=fake_clock,
            ids=SequentialIdGenerator(),
            configure_logging=False,
        )

    return _make


def _submit(session: BoardSessionService, title: str) -> str:
    result = session.submit_proposal(title, "Description", "Process")
    assert result.ok, result.message
    assert result.entity_id is not None
    return result.entity_id


class TestRegisterSubmitVote:
    """A new employee registers, submits and votes."""

    def test_new_employee_flow(self, make_session) -> None:
        session = make_session()

        registered = session.register("Aigerim", "employee")
        assert registered.ok
        employee_id = registered.entity_id
        assert employee_id is not None
        assert session.login(employee_id).ok

        submitted = session.submit_proposal(
            "Faster onboarding", "Reduce ramp time", "Process"
        )
        assert submitted.ok
        proposal = submitted.state.find_proposal(submitted.entity_id or "")
        assert proposal is not None
        assert proposal.status is ProposalStatus.PROPOSED
        assert proposal.vote_count == 0
        assert proposal.comments == ()
        assert proposal.category is Category.PROCESS
        assert proposal.author_name == "Aigerim"

        first = session.vote(proposal.proposal_id, "up")
        second = session.vote(proposal.proposal_id, "up")

        voted = session.state.find_proposal(proposal.proposal_id)
        assert voted is not None
        assert first.changed and not second.changed
        assert voted.vote_count == 1
        assert employee_id in voted.voter_ids

    def test_vote_count_tracks_voter_set(self, make_session) -> None:
        session = make_session()
        session.login("u1")
        proposal_id = _submit(session, "Bike racks")

        for participant_id, direction in [
            ("u1", "up"),
            ("u2", "up"),
            ("u2", "up"),
            ("u3", "down"),
            ("u1", "down"),
            ("u4", "up"),
        ]:
            session.login(participant_id)
            session.vote(proposal_id, direction)
            proposal = session.state.find_proposal(proposal_id)
            assert proposal is not None
            assert proposal.vote_count == len(set(proposal.voter_ids))

        proposal = session.state.find_proposal(proposal_id)
        assert proposal is not None
        assert set(proposal.voter_ids) == {"u2", "u4"}


class TestCommentsAndProjects:
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_comments_never_appended(self, make_session, blank: str) -> None:
        session = make_session()
        session.login("u2")
        proposal_id = _submit(session, "Quiet room")

        result = session.comment(proposal_id, blank)

        assert result.ok and not result.changed
        assert session.state.proposals[0].comments == ()

    def test_comment_text_trimmed(self, make_session) -> None:
        session = make_session()
        session.login("u2")
        proposal_id = _submit(session, "Quiet room")

        session.comment(proposal_id, " hi ")

        assert [c.text for c in session.state.proposals[0].comments] == ["hi"]

    def test_first_conversion_wins(self, make_session) -> None:
        session = make_session()
        session.login("u1")
        proposal_id = _submit(session, "Shared calendar")

        session.login("u3")
        session.convert_to_project(proposal_id, "Calendar rollout")
        session.login("u4")
        session.convert_to_project(proposal_id, "Something else")

        proposal = session.state.find_proposal(proposal_id)
        assert proposal is not None
        assert proposal.project is not None
        assert proposal.project.name == "Calendar rollout"
        assert proposal.project.owner_id == "u3"
        assert proposal.status is ProposalStatus.IN_PROJECT


class TestDeletion:
    def test_non_admin_refused_and_collection_unchanged(self, make_session) -> None:
        session = make_session()
        session.login("u1")
        proposal_id = _submit(session, "Standing desks")
        before = session.state.proposals

        for participant_id in ("u1", "u3"):
            session.login(participant_id)
            result = session.delete_proposal(proposal_id)
            assert result.error_kind is ErrorKind.PERMISSION

        assert session.state.proposals == before

    def test_admin_on_missing_id_not_found(self, make_session) -> None:
        session = make_session()
        session.login("u4")
        assert session.delete_proposal("idea_404").error_kind is ErrorKind.NOT_FOUND


class TestViewsAndAnalytics:
    def test_new_sort_strictly_descending(self, make_session) -> None:
        session = make_session()
        session.login("u1")
        for title in ("One", "Two", "Three"):
            _submit(session, title)

        query = ProposalQuery(text="", category=ALL, status=ALL, sort=SortMode.NEW)
        result = session.list_proposals(query)

        assert len(result) == 3
        stamps = [p.created_at for p in result]
        assert all(a > b for a, b in zip(stamps, stamps[1:]))

    def test_empty_analytics(self, make_session) -> None:
        analytics = make_session().analytics()

        assert analytics.total_proposals == 0
        assert analytics.top_proposal is None
        assert set(analytics.by_status) == set(ProposalStatus)
        assert set(analytics.by_category) == set(Category)
        assert not any(analytics.by_status.values())
        assert not any(analytics.by_category.values())


class TestPersistence:
    """State written by one session is visible to the next."""

    def test_restart_restores_board_and_session(self, make_session) -> None:
        first = make_session()
        first.login("u2")
        proposal_id = _submit(first, "Water cooler")
        first.comment(proposal_id, "Please")

        second = make_session()

        assert second.current_participant_id == "u2"
        proposal = second.state.find_proposal(proposal_id)
        assert proposal is not None
        assert proposal.comment_count == 1

    def test_logout_survives_restart(self, make_session) -> None:
        first = make_session()
        first.login("u2")
        first.logout()

        assert make_session().current_participant is None

    def test_strict_workflow_rejects_reopening(self, make_session) -> None:
        session = make_session(enforce_workflow=True)
        session.login("u1")
        proposal_id = _submit(session, "Night bus")
        session.login("u3")
        for status in ("reviewing", "approved", "in_project", "delivered"):
            assert session.change_status(proposal_id, status).ok

        result = session.change_status(proposal_id, "proposed")

        assert result.error_kind is ErrorKind.VALIDATION

    def test_sqlite_backend_end_to_end(self, tmp_path: Path, fake_clock: FakeClock) -> None:
        config = BoardStorageConfig(
            backend=StorageBackend.SQLITE, sqlite_path=str(tmp_path / "board.db")
        )

        def _open() -> BoardSessionService:
            return create_board_session(
                storage_config=config,
                engine_config=BoardEngineConfig(),
                clock=fake_clock,
                configure_logging=False,
            )

        writer = _open()
        writer.login("u1")
        proposal_id = _submit(writer, "Persisted on disk")

        reader = _open()
        assert reader.current_participant_id == "u1"
        assert reader.state.find_proposal(proposal_id) is not None
