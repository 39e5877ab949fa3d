"""Board configuration.

This module defines storage and engine configuration with environment
variable overrides, plus the built-in participant roster used when no
valid roster is stored.

Environment Variables (Storage):
- IDEABOARD_STORAGE_BACKEND: memory | sqlite | redis (default: memory)
- IDEABOARD_SQLITE_PATH: SQLite file for the sqlite backend (default: ideaboard.db)
- IDEABOARD_REDIS_URL: Redis URL for the redis backend (default: redis://localhost:6379/0)
- IDEABOARD_PROPOSALS_KEY: Key of the proposal collection (default: ideaboard.ideas)
- IDEABOARD_PARTICIPANTS_KEY: Key of the participant roster (default: ideaboard.users)
- IDEABOARD_SESSION_KEY: Key of the current-session id (default: ideaboard.currentUser)

Environment Variables (Engine):
- IDEABOARD_ENFORCE_WORKFLOW: Validate status changes against the workflow
  table (default: false)
- IDEABOARD_ENVIRONMENT: production | development, selects the log renderer
  (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from ideaboard.domain.models import Participant, Role

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        True for 1/true/yes/on (case-insensitive), False for anything else.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class StorageBackend(str, Enum):
    """Durable key-value store implementations."""

    MEMORY = "memory"
    SQLITE = "sqlite"
    REDIS = "redis"


@dataclass(frozen=True)
class StorageKeys:
    """Keys of the three independently stored records.

    Attributes:
        proposals: Key of the proposal collection.
        participants: Key of the participant roster.
        session: Key of the current-session participant id.
    """

    proposals: str = "ideaboard.ideas"
    participants: str = "ideaboard.users"
    session: str = "ideaboard.currentUser"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        keys = (self.proposals, self.participants, self.session)
        if any(not k for k in keys):
            raise ValueError("storage keys must not be empty")
        if len(set(keys)) != len(keys):
            raise ValueError(f"storage keys must be distinct, got {keys}")

    @classmethod
    def from_environment(cls) -> StorageKeys:
        defaults = cls()
        return cls(
            proposals=_get_str_env("IDEABOARD_PROPOSALS_KEY", defaults.proposals),
            participants=_get_str_env(
                "IDEABOARD_PARTICIPANTS_KEY", defaults.participants
            ),
            session=_get_str_env("IDEABOARD_SESSION_KEY", defaults.session),
        )


@dataclass(frozen=True)
class BoardStorageConfig:
    """Configuration for the durable store.

    Attributes:
        backend: Which store implementation to build.
        sqlite_path: Database file for the sqlite backend.
        redis_url: Connection URL for the redis backend.
        keys: Record keys.
    """

    backend: StorageBackend = StorageBackend.MEMORY
    sqlite_path: str = "ideaboard.db"
    redis_url: str = "redis://localhost:6379/0"
    keys: StorageKeys = field(default_factory=StorageKeys)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.backend is StorageBackend.SQLITE and not self.sqlite_path:
            raise ValueError("sqlite_path is required for the sqlite backend")
        if self.backend is StorageBackend.REDIS and not self.redis_url:
            raise ValueError("redis_url is required for the redis backend")

    @classmethod
    def from_environment(cls) -> BoardStorageConfig:
        """Create config from environment variables with defaults.

        Raises:
            ValueError: If IDEABOARD_STORAGE_BACKEND is not a known backend.
        """
        defaults = cls()
        return cls(
            backend=StorageBackend(
                _get_str_env(
                    "IDEABOARD_STORAGE_BACKEND", defaults.backend.value
                ).lower()
            ),
            sqlite_path=_get_str_env("IDEABOARD_SQLITE_PATH", defaults.sqlite_path),
            redis_url=_get_str_env("IDEABOARD_REDIS_URL", defaults.redis_url),
            keys=StorageKeys.from_environment(),
        )


@dataclass(frozen=True)
class BoardEngineConfig:
    """Configuration for the mutation engine and logging.

    Attributes:
        enforce_workflow: Validate status changes against the workflow table.
        environment: "production" for JSON logs, anything else for console.
    """

    enforce_workflow: bool = False
    environment: str = "development"

    @classmethod
    def from_environment(cls) -> BoardEngineConfig:
        return cls(
            enforce_workflow=_get_bool_env("IDEABOARD_ENFORCE_WORKFLOW", False),
            environment=_get_str_env("IDEABOARD_ENVIRONMENT", "development"),
        )


# Built-in roster used when no valid roster is stored
DEFAULT_PARTICIPANTS: tuple[Participant, ...] = (
    Participant("u1", "Aruzhan S.", Role.EMPLOYEE, "Marketing"),
    Participant("u2", "Yermek T.", Role.EMPLOYEE, "IT"),
    Participant("u3", "Aibek (Manager)", Role.MANAGER, "Operations"),
    Participant("u4", "Nurzhan (Admin)", Role.ADMIN, "HQ"),
)

# Testing config: in-memory store with the default keys
TEST_STORAGE_CONFIG = BoardStorageConfig(backend=StorageBackend.MEMORY)
