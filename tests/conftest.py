"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tests.fakes import RecordingStore
from vgate.core.config import DEFAULT_BASE_KEY
from vgate.store import SQLiteStore


@pytest.fixture
def store() -> RecordingStore:
    """Provide an empty recording store."""
    return RecordingStore()


@pytest.fixture
def migrated_store() -> RecordingStore:
    """Provide a store whose default ledger is at version 1.0."""
    return RecordingStore(data={DEFAULT_BASE_KEY: "1.0"})


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary SQLite store path."""
    return tmp_path / "ledger.db"


@pytest.fixture
def sqlite_store(test_db_path: Path) -> SQLiteStore:
    """Provide a connected SQLite store."""
    sqlite = SQLiteStore(test_db_path)
    sqlite.connect()
    yield sqlite
    sqlite.close()
