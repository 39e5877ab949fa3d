"""SQLite key-value store.

Keeps the board records in a single-table SQLite file, so a board survives
process restarts without any server.

Example:
    with SqliteKeyValueStore("./ideaboard.db") as store:
        store.set("ideaboard.currentUser", '"u1"')
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from structlog import get_logger

from ideaboard.application.ports.key_value_store import KeyValueStoreProtocol

logger = get_logger(__name__)


class SqliteKeyValueStore(KeyValueStoreProtocol):
    """Key-value store over one SQLite table.

    The connection is opened lazily on first use, and the schema is created
    at that point. Each write commits immediately.

    Attributes:
        path: Path to the SQLite database file (":memory:" is accepted).
    """

    SCHEMA = """
    CREATE TABLE IF NOT EXISTS kv (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    );
    """

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        self._conn: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        """Open the connection and make sure the schema exists."""
        if self._conn is not None:
            return
        self._conn = sqlite3.connect(self.path)
        self._conn.executescript(self.SCHEMA)
        self._conn.commit()
        logger.debug("sqlite_store_opened", path=self.path)

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        self.connect()
        assert self._conn is not None
        return self._conn

    def get(self, key: str) -> Optional[str]:
        row = (
            self._connection()
            .execute("SELECT value FROM kv WHERE key = ?", (key,))
            .fetchone()
        )
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        conn = self._connection()
        conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
        conn.commit()

    def delete(self, key: str) -> None:
        conn = self._connection()
        conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        conn.commit()

    def __enter__(self) -> SqliteKeyValueStore:
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
