"""Version-gated one-shot migrations.

A MigrationGate runs each declared migration block at most once, the
first time the app starts at or past that block's version. Blocks are
declared in increasing version order, typically during startup:

    gate = MigrationGate(store, current_version="3.1")
    gate.run_if_due("2.0", convert_legacy_settings)
    gate.run_if_due("3.0", drop_old_cache)
    gate.run_if_due("3.1", reindex)

On a fresh install the ledger is seeded with the current version, so no
block runs. After an upgrade from 2.0, only the 3.0 and 3.1 blocks run.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, TypeVar

from loguru import logger

from ..core.config import DEFAULT_BASE_KEY
from ..core.exceptions import (
    ConfigurationError,
    MigrationAheadOfAppError,
    VersionGateError,
)
from ..core.version import VersionString
from .ledger import MigrationLedger

if TYPE_CHECKING:
    from ..app.protocols import AppVersionProviderProtocol, KeyValueStoreProtocol

F = TypeVar("F", bound=Callable[[], object])


class MigrationOutcome(Enum):
    """What run_if_due did with a declared migration."""

    EXECUTED = "executed"
    SKIPPED = "skipped"


def ledger_key(base_key: str, domain: str | None) -> str:
    """Build the store key for a migration domain."""
    if domain is None:
        return base_key
    return f"{base_key}-{domain}"


class MigrationGate:
    """Decides whether each declared migration is due and runs it once.

    Gates for different domains keep separate ledgers in the same store.
    Construct one gate per domain at startup and pass it where needed.
    Not thread-safe; serialize a migration pass externally if required.
    """

    def __init__(
        self,
        store: KeyValueStoreProtocol,
        domain: str | None = None,
        current_version: str | None = None,
        version_provider: AppVersionProviderProtocol | None = None,
        base_key: str = DEFAULT_BASE_KEY,
    ):
        """Initialize gate and seed its ledger on first use.

        Args:
            store: Persistent store for the last migrated version.
            domain: Optional name giving this gate its own ledger key.
            current_version: Running app version. Takes precedence over
                version_provider.
            version_provider: Supplies the app version when current_version
                is not given.
            base_key: Store key prefix.

        Raises:
            ConfigurationError: If no app version can be resolved.
            InvalidVersionError: If the app version is malformed.
        """
        if current_version is None:
            if version_provider is None:
                raise ConfigurationError(
                    "Either current_version or version_provider is required"
                )
            current_version = version_provider.get_version()

        self.domain = domain
        self.ledger = MigrationLedger(
            store=store,
            key=ledger_key(base_key, domain),
            current_version=VersionString.parse(current_version),
        )
        self.ledger.seed()

    @property
    def key(self) -> str:
        return self.ledger.key

    @property
    def current_version(self) -> VersionString:
        return self.ledger.current_version

    @property
    def last_migrated_version(self) -> VersionString | None:
        return self.ledger.last_migrated_version

    @property
    def last_declared_version(self) -> VersionString | None:
        return self.ledger.last_declared_version

    def run_if_due(self, version: str, action: Callable[[], object]) -> MigrationOutcome:
        """Run action once if the app has not yet migrated to version.

        Args:
            version: Version this migration belongs to.
            action: Zero-argument callable doing the migration work.

        Returns:
            EXECUTED if action ran, SKIPPED if it was already migrated.

        Raises:
            InvalidVersionError: If version is malformed.
            MigrationAheadOfAppError: If version is newer than the app.
            OutOfOrderDeclarationError: If version is not greater than the
                previously declared one.
            Exception: Whatever action raises; the ledger is not advanced.
        """
        try:
            parsed = self._validate(version)
        except VersionGateError as e:
            logger.warning(f"Rejected migration declaration: {e}")
            raise

        if not self.ledger.is_due(parsed):
            logger.debug(f"Migration {parsed} already applied for {self.key}, skipping")
            return MigrationOutcome.SKIPPED

        logger.info(f"Running migration {parsed} for {self.key}")
        try:
            action()
        except Exception as e:
            logger.error(f"Migration {parsed} failed: {e}")
            raise

        self.ledger.record_migrated(parsed)
        logger.debug(f"Ledger {self.key} advanced to {parsed}")
        return MigrationOutcome.EXECUTED

    def migration(self, version: str) -> Callable[[F], F]:
        """Decorator form of run_if_due.

        The decorated function runs immediately, if due, and is returned
        unchanged:

            @gate.migration("2.0")
            def move_settings():
                ...
        """

        def decorator(func: F) -> F:
            self.run_if_due(version, func)
            return func

        return decorator

    def reset(self) -> None:
        """Forget the persisted ledger for this gate's key.

        The next gate constructed for this key reseeds with the app version
        of that run, so older migrations are not replayed.
        """
        logger.debug(f"Resetting ledger {self.key}")
        self.ledger.clear()

    def _validate(self, version: str) -> VersionString:
        parsed = VersionString.parse(version)

        current = self.ledger.current_version
        logger.debug(f"Comparing {parsed} to current version {current}")
        if parsed.strip_sub_version() > current:
            raise MigrationAheadOfAppError(str(parsed), str(current))

        self.ledger.declare(parsed)
        return parsed
