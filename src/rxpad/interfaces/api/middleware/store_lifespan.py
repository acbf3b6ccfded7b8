"""Store lifespan middleware - hydrates the document store on startup."""

from typing import Any

from rxpad.application.services.document_store import LocalDocumentStore


class StoreLifespanMiddleware:
    """Load persisted templates, signatures and logo when the server starts."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        self._store.load()
