"""Migration ledger: what has run, and what has been declared.

The persisted half lives in the injected store under one key. The
declared half only lasts as long as the ledger instance and enforces
that declarations arrive in strictly increasing order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.exceptions import OutOfOrderDeclarationError
from ..core.version import VersionString

if TYPE_CHECKING:
    from ..app.protocols import KeyValueStoreProtocol


class MigrationLedger:
    """State behind a MigrationGate."""

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        key: str,
        current_version: VersionString,
    ):
        """Initialize ledger.

        Args:
            store: Store holding the last migrated version.
            key: Store key for this ledger.
            current_version: Running application version.
        """
        self.store = store
        self.key = key
        self.current_version = current_version
        self._last_declared: VersionString | None = None

    @property
    def last_migrated_version(self) -> VersionString | None:
        """Last version whose migration completed, or None if never migrated.

        Raises:
            InvalidVersionError: If the stored value is not a valid version.
        """
        raw = self.store.get(self.key)
        if raw is None:
            return None
        return VersionString.parse(raw)

    @property
    def last_declared_version(self) -> VersionString | None:
        return self._last_declared

    def seed(self) -> bool:
        """Record the current version if nothing is stored yet.

        A fresh install therefore starts out fully migrated.

        Returns:
            True if the ledger was seeded.
        """
        if self.store.get(self.key) is not None:
            return False
        logger.debug(f"Seeding {self.key} with current version {self.current_version}")
        self.store.set(self.key, str(self.current_version))
        return True

    def declare(self, version: VersionString) -> None:
        """Accept a declaration if it is newer than the previous one.

        Raises:
            OutOfOrderDeclarationError: If version is not strictly greater
                than the last declared version.
        """
        previous = self._last_declared
        if previous is not None and not version > previous:
            raise OutOfOrderDeclarationError(str(version), str(previous))
        self._last_declared = version

    def is_due(self, version: VersionString) -> bool:
        """Check whether version has not been migrated to yet."""
        last = self.last_migrated_version
        if last is None:
            return True
        logger.debug(f"Comparing {version} to {last}")
        return version > last

    def record_migrated(self, version: VersionString) -> None:
        self.store.set(self.key, str(version))

    def clear(self) -> None:
        """Forget the persisted version. Declarations are kept."""
        self.store.set(self.key, None)
