"""Configuration for IdeaBoard."""

from ideaboard.config.board_config import (
    DEFAULT_PARTICIPANTS,
    TEST_STORAGE_CONFIG,
    BoardEngineConfig,
    BoardStorageConfig,
    StorageBackend,
    StorageKeys,
)

__all__: list[str] = [
    "DEFAULT_PARTICIPANTS",
    "TEST_STORAGE_CONFIG",
    "BoardEngineConfig",
    "BoardStorageConfig",
    "StorageBackend",
    "StorageKeys",
]
