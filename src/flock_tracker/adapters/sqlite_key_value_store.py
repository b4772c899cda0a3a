"""SQLite-backed key-value store."""

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from flock_tracker.services.store import (
    KeyValueStore,
    StorageReadError,
    StorageWriteError,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value BLOB NOT NULL
)
"""


@dataclass
class SqliteKeyValueStore(KeyValueStore):
    """Key-value store persisted in a single SQLite table."""

    connection: sqlite3.Connection

    @classmethod
    def create(cls, path: Path | str) -> "SqliteKeyValueStore":
        """Open (or create) the database file and ensure the table exists."""
        connection = sqlite3.connect(str(path))
        with connection:
            connection.execute(_SCHEMA)
        return cls(connection=connection)

    def get(self, key: str) -> bytes | None:
        """Return the stored value for a key, if present."""
        try:
            row = self.connection.execute(
                "SELECT value FROM kv WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageReadError(f"Failed to read {key}") from exc
        if row is None:
            return None
        return bytes(row[0])

    def put(self, key: str, value: bytes) -> None:
        """Insert or replace the value for a key and commit."""
        try:
            with self.connection:
                self.connection.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, sqlite3.Binary(value)),
                )
        except sqlite3.Error as exc:
            raise StorageWriteError(f"Failed to write {key}") from exc

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()
