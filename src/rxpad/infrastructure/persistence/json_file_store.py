"""JSON file key/value store - one object file per origin."""

import json
import logging
import os
import tempfile
from pathlib import Path

from rxpad.domain.exceptions import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


def stored_size(entries: dict[str, str]) -> int:
    """Approximate footprint: UTF-8 bytes of all keys and values."""
    return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in entries.items())


class JsonFileKeyValueStore:
    """Durable key/value store backed by a single JSON file.

    Writes replace the file atomically. When ``quota_bytes`` is set, a write
    that would grow the store past it fails with PersistenceWriteError and
    leaves the file untouched.
    """

    def __init__(self, path: Path | str, quota_bytes: int | None = None) -> None:
        self._path = Path(path).expanduser()
        self._quota = quota_bytes

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceReadError(f"Cannot read {self._path}: {e}") from e
        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            raise PersistenceReadError(f"Corrupt storage file {self._path}: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise PersistenceReadError(f"Storage file {self._path} is not a string map")
        return data

    def _dump(self, entries: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".rxpad-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(entries, f, ensure_ascii=False)
                os.replace(tmp, self._path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceWriteError(f"Cannot write {self._path}: {e}") from e

    def _load_for_write(self) -> dict[str, str]:
        try:
            return self._load()
        except PersistenceReadError as e:
            # An unreadable file is replaced by the next write.
            logger.warning("Discarding unreadable storage file: %s", e)
            return {}

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._load_for_write()
        before = stored_size(entries)
        entries[key] = value
        after = stored_size(entries)
        # Writes that shrink the store are allowed even above a lowered quota.
        if self._quota is not None and after > self._quota and after > before:
            raise PersistenceWriteError(f"Storage quota of {self._quota} bytes exceeded")
        self._dump(entries)

    def remove(self, key: str) -> None:
        entries = self._load_for_write()
        if entries.pop(key, None) is not None:
            self._dump(entries)
