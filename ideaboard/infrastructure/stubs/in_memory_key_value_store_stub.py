"""In-memory key-value store stub for testing.

Implements KeyValueStoreProtocol over a dict. Contents are lost when the
process exits; suitable for tests and throwaway sessions only.

Control Methods:
- clear(): Remove all keys
- snapshot(): Copy of the current contents for assertions
"""

from __future__ import annotations

from typing import Optional

from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol


class InMemoryKeyValueStoreStub(KeyValueStoreProtocol):
    """Dict-backed key-value store.

    Example:
        >>> store = InMemoryKeyValueStoreStub({"ideaboard.currentUser": '"u1"'})
        >>> store.get("ideaboard.currentUser")
        '"u1"'
    """

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    # Test control methods

    def clear(self) -> None:
        self._data.clear()

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
