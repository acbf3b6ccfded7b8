"""In-memory key/value store."""

from rxpad.domain.exceptions import PersistenceWriteError
from rxpad.infrastructure.persistence.json_file_store import stored_size


class InMemoryKeyValueStore:
    """Process-local key/value store, optionally capped at ``quota_bytes``.

    Size is measured in UTF-8 bytes, the same as the JSON file store.
    """

    def __init__(self, initial: dict[str, str] | None = None, quota_bytes: int | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._quota = quota_bytes

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            before = stored_size(self._data)
            after = stored_size({**self._data, key: value})
            if after > self._quota and after > before:
                raise PersistenceWriteError(f"Storage quota of {self._quota} bytes exceeded")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
