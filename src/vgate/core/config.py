"""Configuration management for vgate."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BASE_KEY = "MigrationGateLastVersionKey"

STORE_BACKENDS = ("sqlite", "json", "memory")


def _default_state_path() -> Path:
    """Get default ledger path."""
    state_dir = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    return state_dir / "vgate" / "ledger.db"


@dataclass
class GateConfig:
    """Migration gate configuration."""

    state_path: Path = field(default_factory=_default_state_path)
    store_backend: str = "sqlite"  # One of STORE_BACKENDS
    base_key: str = DEFAULT_BASE_KEY
    # Falls back to an AppVersionProvider when unset
    app_version: str | None = None

    @classmethod
    def from_env(cls) -> "GateConfig":
        """Load configuration from environment variables."""
        config = cls()

        if path := os.environ.get("VGATE_STATE_PATH"):
            config.state_path = Path(path)

        if backend := os.environ.get("VGATE_STORE_BACKEND"):
            config.store_backend = backend

        if base_key := os.environ.get("VGATE_BASE_KEY"):
            config.base_key = base_key

        if version := os.environ.get("VGATE_APP_VERSION"):
            config.app_version = version

        return config
