"""Protocol definitions for vgate's injected collaborators.

A gate depends on two things it does not own:

- a string key-value store holding the last migrated version
- a provider for the host application's current version

Any object with the right methods satisfies these protocols, so hosts can
pass their own preferences layer or settings table.

Example:
    class RedisStore:
        def get(self, key: str) -> str | None:
            value = self._client.get(key)
            return value.decode() if value is not None else None

        def set(self, key: str, value: str | None) -> None:
            if value is None:
                self._client.delete(key)
            else:
                self._client.set(key, value)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStoreProtocol(Protocol):
    """Persistent string key-value store."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str | None) -> None:
        """Store a value. Passing None removes the key."""
        ...


@runtime_checkable
class AppVersionProviderProtocol(Protocol):
    """Source of the host application's current version."""

    def get_version(self) -> str:
        """Return the running application's version string."""
        ...
