"""Stub implementations for testing."""

from ideaboard.infrastructure.stubs.in_memory_key_value_store_stub import (
    InMemoryKeyValueStoreStub,
)

__all__ = ["InMemoryKeyValueStoreStub"]
