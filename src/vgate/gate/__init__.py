"""Migration gate and ledger."""

from .gate import MigrationGate, MigrationOutcome, ledger_key
from .ledger import MigrationLedger

__all__ = [
    "MigrationGate",
    "MigrationLedger",
    "MigrationOutcome",
    "ledger_key",
]
