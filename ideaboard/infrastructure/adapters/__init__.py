"""Adapters implementing the application ports."""

from ideaboard.infrastructure.adapters.id_generator import UuidIdGenerator
from ideaboard.infrastructure.adapters.persistence import (
    RedisKeyValueStore,
    SqliteKeyValueStore,
)
from ideaboard.infrastructure.adapters.system_clock import SystemClock

__all__ = [
    "RedisKeyValueStore",
    "SqliteKeyValueStore",
    "SystemClock",
    "UuidIdGenerator",
]
