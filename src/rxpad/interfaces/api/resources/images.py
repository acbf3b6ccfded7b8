"""Logo and signature API resources."""

import falcon.asgi

from rxpad.application.ports import UploadedFile
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.application.use_cases.upload.upload_image import ImageSlot, UploadImageUseCase
from rxpad.domain.exceptions import FileReadError, NotFound, ValidationError
from rxpad.interfaces.api.confirmation import RequestConfirmation, declined_response


async def _uploaded_file(req: falcon.asgi.Request, fallback_name: str) -> UploadedFile:
    """Raw request body as an uploaded file (``?filename=`` optional)."""
    data = await req.stream.read()
    return UploadedFile(
        filename=req.get_param("filename") or fallback_name,
        content_type=req.content_type,
        data=data,
    )


async def _upload(
    upload: UploadImageUseCase,
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    slot: ImageSlot,
    doctor: str | None = None,
) -> None:
    source = await _uploaded_file(req, slot.value)
    try:
        blob = await upload.execute(slot, source, doctor=doctor)
    except NotFound as e:
        resp.status = falcon.HTTP_404
        resp.media = {"error": str(e)}
        return
    except (FileReadError, ValidationError) as e:
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(e)}
        return
    resp.media = {"image": blob.value}
    resp.status = falcon.HTTP_200


class LogoResource:
    """GET/PUT/DELETE /v1/logo - clinic logo."""

    def __init__(self, store: LocalDocumentStore, upload: UploadImageUseCase) -> None:
        self._store = store
        self._upload = upload

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        logo = self._store.logo
        resp.media = {"image": logo.value if logo else None}
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Upload the raw image body as the new logo."""
        await _upload(self._upload, req, resp, ImageSlot.LOGO)

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Clear the logo. The editor asks before removing it."""
        if not RequestConfirmation.from_request(req)():
            declined_response(resp, "clear logo")
            return
        self._store.set_logo(None)
        resp.media = {"image": None}
        resp.status = falcon.HTTP_200


class SignaturesResource:
    """GET /v1/signatures - all stored signatures by doctor."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"items": {d: b.value for d, b in self._store.signatures.items()}}
        resp.status = falcon.HTTP_200


class SignatureResource:
    """GET/PUT/DELETE /v1/signatures/{doctor} - one doctor's signature."""

    def __init__(
        self, store: LocalDocumentStore, upload: UploadImageUseCase, doctors: list[str]
    ) -> None:
        self._store = store
        self._upload = upload
        self._doctors = doctors

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, doctor: str
    ) -> None:
        if doctor not in self._doctors:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Doctor not found"}
            return
        blob = self._store.get_signature(doctor)
        resp.media = {"doctor": doctor, "image": blob.value if blob else None}
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, doctor: str
    ) -> None:
        await _upload(self._upload, req, resp, ImageSlot.SIGNATURE, doctor=doctor)

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, doctor: str
    ) -> None:
        confirm = RequestConfirmation.from_request(req)
        removed = self._store.clear_signature(doctor, confirm)
        if confirm.declined:
            declined_response(resp, "clear signature")
            return
        resp.media = {"deleted": removed}
        resp.status = falcon.HTTP_200
