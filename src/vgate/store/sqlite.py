"""SQLite-backed key-value store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from loguru import logger

from ..core.exceptions import StoreError

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SQLiteStore:
    """Key-value store in a single SQLite table.

    Every write is committed before returning, so the value is visible to
    the next process that opens the same file.

    Example:
        with SQLiteStore(Path("~/.local/state/app/ledger.db").expanduser()) as store:
            gate = MigrationGate(store, current_version="1.4")
    """

    def __init__(self, path: Path):
        """Initialize store with path.

        Args:
            path: Path to the SQLite database file.
        """
        self.path = path
        self._connection: sqlite3.Connection | None = None

    def connect(self) -> None:
        """Open the connection and create the table if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path))
            self._connection.executescript(SCHEMA)
        except Exception as e:
            raise StoreError(f"Failed to open store: {e}") from e
        logger.debug(f"Opened SQLite store at {self.path}")

    def close(self) -> None:
        """Close the connection."""
        if self._connection:
            try:
                self._connection.close()
            except Exception as e:
                raise StoreError(f"Failed to close store: {e}") from e
            finally:
                self._connection = None

    def __enter__(self) -> "SQLiteStore":
        self.connect()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, key: str) -> str | None:
        """Read a value.

        Raises:
            StoreError: If the store is not connected or the query fails.
        """
        conn = self._require_connection()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read {key!r}: {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str | None) -> None:
        """Write a value, or delete the key when value is None.

        Raises:
            StoreError: If the store is not connected or the write fails.
        """
        conn = self._require_connection()
        try:
            if value is None:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            else:
                conn.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Failed to write {key!r}: {e}") from e

    def _require_connection(self) -> sqlite3.Connection:
        if not self._connection:
            raise StoreError("Store not connected")
        return self._connection
