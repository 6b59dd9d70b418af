"""Test fakes for gates without real infrastructure.

Example:
    from tests.fakes import RecordingStore

    store = RecordingStore()
    gate = MigrationGate(store, current_version="2.0")
    assert store.writes == [("MigrationGateLastVersionKey", "2.0")]
"""

from .stores import CountingVersionProvider, FailingStore, RecordingStore

__all__ = [
    "CountingVersionProvider",
    "FailingStore",
    "RecordingStore",
]
