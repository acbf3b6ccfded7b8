"""Reset API resource."""

import falcon.asgi

from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.interfaces.api.confirmation import RequestConfirmation, declined_response


class ResetResource:
    """POST /v1/reset - wipe templates, signatures and logo."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not self._store.reset_all(RequestConfirmation.from_request(req)):
            declined_response(resp, "reset")
            return
        resp.media = {"status": "reset"}
        resp.status = falcon.HTTP_200
