"""Tests for SQLiteStore."""

from pathlib import Path

import pytest

from vgate.core.exceptions import StoreError
from vgate.gate import MigrationGate, MigrationOutcome
from vgate.store import SQLiteStore


class TestSQLiteStore:
    """Tests for SQLiteStore."""

    def test_get_missing_key_returns_none(self, sqlite_store: SQLiteStore):
        assert sqlite_store.get("missing") is None

    def test_set_and_get(self, sqlite_store: SQLiteStore):
        sqlite_store.set("key", "1.0")
        assert sqlite_store.get("key") == "1.0"

    def test_set_overwrites(self, sqlite_store: SQLiteStore):
        sqlite_store.set("key", "1.0")
        sqlite_store.set("key", "2.0")
        assert sqlite_store.get("key") == "2.0"

    def test_set_none_deletes(self, sqlite_store: SQLiteStore):
        sqlite_store.set("key", "1.0")
        sqlite_store.set("key", None)
        assert sqlite_store.get("key") is None

    def test_set_none_on_missing_key_is_noop(self, sqlite_store: SQLiteStore):
        sqlite_store.set("missing", None)
        assert sqlite_store.get("missing") is None

    def test_value_persists_across_connections(self, test_db_path: Path):
        """Writes are committed before the connection closes."""
        with SQLiteStore(test_db_path) as first:
            first.set("key", "3.1")

        with SQLiteStore(test_db_path) as second:
            assert second.get("key") == "3.1"

    def test_creates_parent_directories(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "ledger.db"
        with SQLiteStore(path) as store:
            store.set("key", "1")
        assert path.exists()

    def test_operations_require_connection(self, test_db_path: Path):
        store = SQLiteStore(test_db_path)
        with pytest.raises(StoreError, match="not connected"):
            store.get("key")
        with pytest.raises(StoreError, match="not connected"):
            store.set("key", "1.0")

    def test_close_is_idempotent(self, test_db_path: Path):
        store = SQLiteStore(test_db_path)
        store.connect()
        store.close()
        store.close()

    def test_connect_failure_raises_store_error(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(StoreError, match="Failed to open store"):
            SQLiteStore(blocker / "ledger.db").connect()


class TestGateOverSQLite:
    """End-to-end gate behaviour across simulated app launches."""

    def test_upgrade_across_launches(self, test_db_path: Path):
        calls = []

        # First install at 1.0
        with SQLiteStore(test_db_path) as store:
            gate = MigrationGate(store, current_version="1.0")
            gate.run_if_due("1.0", lambda: calls.append("1.0"))

        # Upgrade to 2.0
        with SQLiteStore(test_db_path) as store:
            gate = MigrationGate(store, current_version="2.0")
            gate.run_if_due("1.0", lambda: calls.append("1.0"))
            outcome = gate.run_if_due("2.0", lambda: calls.append("2.0"))

        # Relaunch at 2.0
        with SQLiteStore(test_db_path) as store:
            gate = MigrationGate(store, current_version="2.0")
            replay = gate.run_if_due("2.0", lambda: calls.append("again"))

        assert calls == ["2.0"]
        assert outcome is MigrationOutcome.EXECUTED
        assert replay is MigrationOutcome.SKIPPED
