"""Composition root for migration gates.

Example:
    from vgate.app import create_gate
    from vgate.core.config import GateConfig

    gate = create_gate(GateConfig.from_env(), domain="search-index")
    gate.run_if_due("1.2", rebuild_index)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ..core.config import STORE_BACKENDS
from ..core.exceptions import ConfigurationError
from ..gate import MigrationGate
from ..store import InMemoryStore, JSONFileStore, SQLiteStore

if TYPE_CHECKING:
    from ..core.config import GateConfig
    from .protocols import AppVersionProviderProtocol, KeyValueStoreProtocol


def create_store(config: GateConfig) -> KeyValueStoreProtocol:
    """Create the store backend named in the configuration.

    SQLite stores are returned connected; the caller closes them.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    backend = config.store_backend
    logger.debug(f"Creating {backend} store at {config.state_path}")

    if backend == "sqlite":
        store = SQLiteStore(config.state_path)
        store.connect()
        return store
    if backend == "json":
        return JSONFileStore(config.state_path)
    if backend == "memory":
        return InMemoryStore()

    raise ConfigurationError(
        f"Unknown store backend {backend!r}, expected one of {', '.join(STORE_BACKENDS)}"
    )


def create_gate(
    config: GateConfig,
    domain: str | None = None,
    store: KeyValueStoreProtocol | None = None,
    version_provider: AppVersionProviderProtocol | None = None,
) -> MigrationGate:
    """Wire a MigrationGate from configuration.

    Args:
        config: Gate configuration.
        domain: Optional migration domain name.
        store: Store to use instead of the configured backend.
        version_provider: Used when config.app_version is unset.

    Returns:
        A seeded MigrationGate.
    """
    if store is None:
        store = create_store(config)

    return MigrationGate(
        store,
        domain=domain,
        current_version=config.app_version,
        version_provider=version_provider,
        base_key=config.base_key,
    )
