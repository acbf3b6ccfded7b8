"""Key/value persistence port - durable, origin-scoped string store."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Port for durable key/value persistence.

    ``get`` returns None for keys never written and may raise
    PersistenceReadError. ``set`` and ``remove`` are best-effort and may raise
    PersistenceWriteError. No transaction spans multiple keys.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...
