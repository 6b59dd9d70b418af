"""Integration surface: collaborator protocols, providers and wiring."""

from .factory import create_gate, create_store
from .protocols import AppVersionProviderProtocol, KeyValueStoreProtocol
from .providers import EnvVersionProvider, PackageVersionProvider, StaticVersionProvider

__all__ = [
    "create_gate",
    "create_store",
    "AppVersionProviderProtocol",
    "KeyValueStoreProtocol",
    "EnvVersionProvider",
    "PackageVersionProvider",
    "StaticVersionProvider",
]
