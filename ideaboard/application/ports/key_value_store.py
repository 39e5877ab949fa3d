"""Key-value store port - the durable persistence boundary.

This port defines the contract for the string-keyed, string-valued store
that holds the serialized board between process restarts.
Follows hexagonal architecture with port/adapter pattern.

Only the BoardSynchronizer talks to an implementation of this port.

Implementations:
- InMemoryKeyValueStoreStub (tests, ephemeral sessions)
- SqliteKeyValueStore (single-file durable store)
- RedisKeyValueStore (shared Redis instance)
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Protocol


class KeyValueStoreProtocol(Protocol):
    """Protocol for a durable string key-value store.

    Writes are last-writer-wins; no versioning is implied.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: Record key.

        Returns:
            The stored text, or None if the key is absent.
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store text under a key, replacing any previous value.

        Args:
            key: Record key.
            value: Serialized record text.
        """
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key is not an error.

        Args:
            key: Record key.
        """
        ...
