"""In-memory key-value store."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InMemoryStore:
    """Dict-backed store for tests and ephemeral processes.

    Values do not survive the process, so a gate backed by this store
    reseeds on every start.
    """

    data: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str | None) -> None:
        if value is None:
            self.data.pop(key, None)
        else:
            self.data[key] = value
