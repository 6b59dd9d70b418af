"""Key-value stores for the migration ledger."""

from .json_file import JSONFileStore
from .memory import InMemoryStore
from .sqlite import SQLiteStore

__all__ = [
    "InMemoryStore",
    "JSONFileStore",
    "SQLiteStore",
]
