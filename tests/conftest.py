"""
Pytest configuration and shared fixtures for IdeaBoard tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the ideaboard package
- Integration tests go in tests/integration/
- Time-dependent tests use FakeClock, never the wall clock
- Redis is replaced by a MagicMock client; no server is needed
"""

from datetime import timedelta

import pytest

from ideaboard.application.services import (
    BoardSessionService,
    BoardSynchronizer,
    ProposalMutationService,
)
from ideaboard.config import DEFAULT_PARTICIPANTS
from ideaboard.domain.models import BoardState, Participant, Role
from ideaboard.infrastructure.stubs import InMemoryKeyValueStoreStub
from tests.helpers import FakeClock, SequentialIdGenerator


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ideaboard import __version__

    return __version__


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock advancing one second per reading."""
    return FakeClock(step=timedelta(seconds=1))


@pytest.fixture
def ids() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def employee() -> Participant:
    return Participant("u1", "Aruzhan S.", Role.EMPLOYEE, "Marketing")


@pytest.fixture
def other_employee() -> Participant:
    return Participant("u2", "Yermek T.", Role.EMPLOYEE, "IT")


@pytest.fixture
def manager() -> Participant:
    return Participant("u3", "Aibek (Manager)", Role.MANAGER, "Operations")


@pytest.fixture
def admin() -> Participant:
    return Participant("u4", "Nurzhan (Admin)", Role.ADMIN, "HQ")


@pytest.fixture
def roster_state() -> BoardState:
    """Snapshot holding the default roster and no proposals."""
    return BoardState(participants=DEFAULT_PARTICIPANTS)


@pytest.fixture
def engine(
    fake_clock: FakeClock, ids: SequentialIdGenerator
) -> ProposalMutationService:
    return ProposalMutationService(clock=fake_clock, ids=ids)


@pytest.fixture
def strict_engine(
    fake_clock: FakeClock, ids: SequentialIdGenerator
) -> ProposalMutationService:
    return ProposalMutationService(clock=fake_clock, ids=ids, enforce_workflow=True)


@pytest.fixture
def store() -> InMemoryKeyValueStoreStub:
    return InMemoryKeyValueStoreStub()


@pytest.fixture
def synchronizer(store: InMemoryKeyValueStoreStub) -> BoardSynchronizer:
    return BoardSynchronizer(store)


@pytest.fixture
def session(
    engine: ProposalMutationService, synchronizer: BoardSynchronizer
) -> BoardSessionService:
    """Session over an empty in-memory store (default roster, nobody logged in)."""
    return BoardSessionService(engine, synchronizer)
