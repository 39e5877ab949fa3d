"""Redis key-value store.

Stores each board record as a plain Redis string. Several processes
pointing at the same Redis share one board, last writer wins.
"""

from __future__ import annotations

from typing import Optional

import redis
from structlog import get_logger

from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol

logger = get_logger(__name__)


class RedisKeyValueStore(KeyValueStoreProtocol):
    """Key-value store over a synchronous Redis client.

    The client must be created with ``decode_responses=True`` so that
    reads return text; from_url does this.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> RedisKeyValueStore:
        """Build a store from a Redis URL such as redis://localhost:6379/0."""
        logger.debug("redis_store_configured", host=url.rsplit("@", 1)[-1])
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value)

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        self._client.close()
