"""Board synchronizer - the only client of the durable key-value store.

Loads and saves the three independently keyed records: the proposal
collection, the participant roster and the current-session participant id.

Load semantics:
- absent, malformed or shape-invalid content is replaced by a fallback
  (empty proposals, the default roster, no session) and logged at warning
- store driver errors are logged and propagate unchanged

Save semantics:
- each collection is written as a whole under its own key
- saving a None session deletes the session key
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from structlog import get_logger

from ideaboard.application.dtos.stored_records import (
    decode_participants,
    decode_proposals,
    decode_session_id,
    encode_participants,
    encode_proposals,
    encode_session_id,
)
from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol
from ideaboard.config.board_config import DEFAULT_PARTICIPANTS, StorageKeys
from ideaboard.domain.exceptions import IdeaBoardError
from ideaboard.domain.models import BoardState, Participant, Proposal

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadedBoard:
    """Result of a full load.

    Attributes:
        state: Snapshot built from the stored collections.
        session_participant_id: Stored current-session id, if any. It is
            not checked against the roster here.
    """

    state: BoardState
    session_participant_id: Optional[str] = None


class BoardSynchronizer:
    """Reads and writes board records through a key-value store.

    Example:
        >>> sync = BoardSynchronizer(InMemoryKeyValueStoreStub())
        >>> loaded = sync.load()
        >>> sync.save_proposals(loaded.state.proposals)
    """

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        keys: StorageKeys | None = None,
        default_participants: Sequence[Participant] = DEFAULT_PARTICIPANTS,
    ) -> None:
        """Initialize the synchronizer.

        Args:
            store: Durable key-value store.
            keys: Record keys. Defaults to StorageKeys().
            default_participants: Roster used when none is stored.
        """
        self._store = store
        self._keys = keys or StorageKeys()
        self._default_participants = tuple(default_participants)

    @property
    def keys(self) -> StorageKeys:
        return self._keys

    def _read(self, key: str) -> Optional[str]:
        try:
            return self._store.get(key)
        except Exception as e:
            logger.error("store_read_failed", key=key, error=str(e))
            raise

    def _write(self, key: str, value: str) -> None:
        try:
            self._store.set(key, value)
        except Exception as e:
            logger.error("store_write_failed", key=key, error=str(e))
            raise

    def load(self) -> LoadedBoard:
        """Load all three records."""
        state = BoardState(
            participants=self.load_participants(),
            proposals=self.load_proposals(),
        )
        session_id = self.load_session_id()
        logger.info(
            "board_loaded",
            participant_count=len(state.participants),
            proposal_count=len(state.proposals),
            has_session=session_id is not None,
        )
        return LoadedBoard(state=state, session_participant_id=session_id)

    def load_proposals(self) -> tuple[Proposal, ...]:
        """Load the proposal collection, or an empty one on bad content."""
        key = self._keys.proposals
        raw = self._read(key)
        if raw is None:
            return ()
        try:
            return decode_proposals(raw)
        except (ValueError, IdeaBoardError) as e:
            logger.warning("stored_proposals_invalid", key=key, error=str(e))
            return ()

    def load_participants(self) -> tuple[Participant, ...]:
        """Load the roster, or the default roster on bad content."""
        key = self._keys.participants
        raw = self._read(key)
        if raw is None:
            return self._default_participants
        try:
            return decode_participants(raw)
        except (ValueError, IdeaBoardError) as e:
            logger.warning("stored_participants_invalid", key=key, error=str(e))
            return self._default_participants

    def load_session_id(self) -> Optional[str]:
        raw = self._read(self._keys.session)
        if raw is None:
            return None
        return decode_session_id(raw)

    def save_proposals(self, proposals: Sequence[Proposal]) -> None:
        self._write(self._keys.proposals, encode_proposals(tuple(proposals)))
        logger.debug("proposals_saved", count=len(proposals))

    def save_participants(self, participants: Sequence[Participant]) -> None:
        self._write(
            self._keys.participants, encode_participants(tuple(participants))
        )
        logger.debug("participants_saved", count=len(participants))

    def save_session(self, participant_id: Optional[str]) -> None:
        """Persist the current-session id; None removes the key."""
        key = self._keys.session
        if participant_id is None:
            try:
                self._store.delete(key)
            except Exception as e:
                logger.error("store_delete_failed", key=key, error=str(e))
                raise
            logger.debug("session_cleared")
            return
        self._write(key, encode_session_id(participant_id))
        logger.debug("session_saved", participant_id=participant_id)

    def commit(self, previous: BoardState, current: BoardState) -> None:
        """Save whichever collections differ between two snapshots."""
        if current.proposals is not previous.proposals:
            self.save_proposals(current.proposals)
        if current.participants is not previous.participants:
            self.save_participants(current.participants)
