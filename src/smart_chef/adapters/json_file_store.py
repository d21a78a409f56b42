"""Key-value store persisted as a single local JSON file."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from smart_chef.services.profile import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores string values in one JSON object file."""

    path: Path

    @classmethod
    def create(cls, path: str) -> "JsonFileKeyValueStore":
        """Create a store for the given file path."""
        return cls(path=Path(path).expanduser())

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Write ``value`` under ``key``, replacing the file atomically."""
        entries = self._read()
        entries[key] = value
        self._write(entries)

    def delete(self, key: str) -> None:
        """Remove ``key`` if it is stored."""
        entries = self._read()
        if entries.pop(key, None) is not None:
            self._write(entries)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning("Ignoring unreadable store file %s", self.path)
            return {}
        if not isinstance(data, dict):
            _logger.warning("Ignoring malformed store file %s", self.path)
            return {}
        return data

    def _write(self, entries: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.path)
