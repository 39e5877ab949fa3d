"""Durable key-value store adapters."""

from ideaboard.infrastructure.adapters.persistence.redis_key_value_store import (
    RedisKeyValueStore,
)
from ideaboard.infrastructure.adapters.persistence.sqlite_key_value_store import (
    SqliteKeyValueStore,
)

__all__ = ["RedisKeyValueStore", "SqliteKeyValueStore"]
