"""JSON file key-value store.

Keeps all keys in one flat JSON object, much like an application
preferences file. The file is re-read on every access and replaced
atomically on every write.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from ..core.exceptions import StoreError


class JSONFileStore:
    """Key-value store backed by a JSON object on disk."""

    def __init__(self, path: Path):
        self.path = path

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str | None) -> None:
        data = self._load()
        if value is None:
            if key not in data:
                return
            del data[key]
        else:
            data[key] = value
        self._dump(data)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Expected a JSON object in {self.path}")
        return data

    def _dump(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}") from e
