"""Bootstrap wiring for the board session.

Builds the store, engine and synchronizer from configuration. A ``.env``
file in the working directory is loaded first, so IDEABOARD_* variables
can live there.

Usage:
    session = create_board_session()
    session.login("u1")
"""

from __future__ import annotations

from typing import Optional

from dotenv import load_dotenv
from structlog import get_logger

from ideaboard.application.ports.clock import ClockProtocol
from ideaboard.application.ports.id_generator import IdGeneratorProtocol
from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol
from ideaboard.application.services import (
    BoardSessionService,
    BoardSynchronizer,
    ProposalMutationService,
)
from ideaboard.bootstrap.logging import configure_structlog
from ideaboard.config import BoardEngineConfig, BoardStorageConfig, StorageBackend
from ideaboard.infrastructure.adapters import (
    RedisKeyValueStore,
    SqliteKeyValueStore,
    SystemClock,
    UuidIdGenerator,
)
from ideaboard.infrastructure.stubs import InMemoryKeyValueStoreStub

logger = get_logger(__name__)

_key_value_store: KeyValueStoreProtocol | None = None


def create_key_value_store(config: BoardStorageConfig) -> KeyValueStoreProtocol:
    """Build the store selected by the configuration."""
    if config.backend is StorageBackend.SQLITE:
        return SqliteKeyValueStore(config.sqlite_path)
    if config.backend is StorageBackend.REDIS:
        return RedisKeyValueStore.from_url(config.redis_url)
    return InMemoryKeyValueStoreStub()


def get_key_value_store() -> KeyValueStoreProtocol:
    """Get the process-wide store, built from the environment on first use."""
    global _key_value_store
    if _key_value_store is None:
        _key_value_store = create_key_value_store(BoardStorageConfig.from_environment())
    return _key_value_store


def set_key_value_store(store: KeyValueStoreProtocol) -> None:
    """Set a custom store (testing override)."""
    global _key_value_store
    _key_value_store = store


def reset_key_value_store() -> None:
    global _key_value_store
    _key_value_store = None


def create_board_session(
    storage_config: Optional[BoardStorageConfig] = None,
    engine_config: Optional[BoardEngineConfig] = None,
    store: Optional[KeyValueStoreProtocol] = None,
    clock: Optional[ClockProtocol] = None,
    ids: Optional[IdGeneratorProtocol] = None,
    configure_logging: bool = True,
) -> BoardSessionService:
    """Wire a ready-to-use board session.

    Args:
        storage_config: Storage settings. Read from the environment if omitted.
        engine_config: Engine settings. Read from the environment if omitted.
        store: Explicit store; overrides the process-wide one.
        clock: Timestamp source. Defaults to SystemClock.
        ids: Id generator. Defaults to UuidIdGenerator.
        configure_logging: Configure structlog for the engine environment.

    Returns:
        A BoardSessionService with the stored board loaded.
    """
    load_dotenv()
    engine_config = engine_config or BoardEngineConfig.from_environment()
    if configure_logging:
        configure_structlog(engine_config.environment)

    if storage_config is None:
        storage_config = BoardStorageConfig.from_environment()
        store = store or get_key_value_store()
    else:
        store = store or create_key_value_store(storage_config)

    engine = ProposalMutationService(
        clock=clock or SystemClock(),
        ids=ids or UuidIdGenerator(),
        enforce_workflow=engine_config.enforce_workflow,
    )
    synchronizer = BoardSynchronizer(store, keys=storage_config.keys)
    logger.info(
        "board_session_created",
        backend=storage_config.backend.value,
        enforce_workflow=engine_config.enforce_workflow,
    )
    return BoardSessionService(engine, synchronizer)
