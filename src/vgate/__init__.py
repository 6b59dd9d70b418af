"""vgate - one-shot version-gated migrations.

Example:
    from vgate import MigrationGate
    from vgate.store import SQLiteStore

    with SQLiteStore(path) as store:
        gate = MigrationGate(store, current_version="2.3")
        gate.run_if_due("2.0", move_settings_file)
        gate.run_if_due("2.3", rebuild_thumbnails)
"""

from .core.exceptions import (
    ConfigurationError,
    InvalidVersionError,
    MigrationAheadOfAppError,
    OutOfOrderDeclarationError,
    StoreError,
    VersionGateError,
    VGateError,
)
from .core.version import Ordering, VersionString
from .gate import MigrationGate, MigrationLedger, MigrationOutcome

__version__ = "0.1.0"

__all__ = [
    "MigrationGate",
    "MigrationLedger",
    "MigrationOutcome",
    "VersionString",
    "Ordering",
    "VGateError",
    "VersionGateError",
    "InvalidVersionError",
    "OutOfOrderDeclarationError",
    "MigrationAheadOfAppError",
    "StoreError",
    "ConfigurationError",
]
