"""Core types for vgate: versions, errors and configuration."""

from .config import DEFAULT_BASE_KEY, STORE_BACKENDS, GateConfig
from .exceptions import (
    ConfigurationError,
    InvalidVersionError,
    MigrationAheadOfAppError,
    OutOfOrderDeclarationError,
    StoreError,
    VersionGateError,
    VGateError,
)
from .version import Ordering, VersionString, is_valid

__all__ = [
    "GateConfig",
    "DEFAULT_BASE_KEY",
    "STORE_BACKENDS",
    "VGateError",
    "ConfigurationError",
    "StoreError",
    "VersionGateError",
    "InvalidVersionError",
    "OutOfOrderDeclarationError",
    "MigrationAheadOfAppError",
    "Ordering",
    "VersionString",
    "is_valid",
]
