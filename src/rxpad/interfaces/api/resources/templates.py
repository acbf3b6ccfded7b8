"""Template API resources."""

import falcon.asgi

from rxpad.application.ports import Downloader
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.application.use_cases.draft.apply_template import ApplyTemplateUseCase
from rxpad.domain.entities import Draft
from rxpad.domain.exceptions import ValidationError
from rxpad.domain.value_objects import ApplyMode
from rxpad.infrastructure.editor.editor_session import EditorSession
from rxpad.interfaces.api.confirmation import RequestConfirmation, declined_response


def _check_routable(name: str) -> None:
    """Names are path segments in /v1/templates/{name}; '/' cannot be routed."""
    if "/" in name:
        raise ValidationError("Template name must not contain '/'")


class TemplatesResource:
    """GET/POST /v1/templates - list and save templates."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List templates in insertion order."""
        resp.media = {"items": [t.to_dict() for t in self._store.templates]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Save draft content as a template. Overwrite needs ``confirm``."""
        try:
            body = await req.get_media()
            name = body.get("name") or ""
            content = body["content"]
            if not isinstance(name, str) or not isinstance(content, str):
                raise ValueError("name and content must be strings")
            confirm = RequestConfirmation.from_request(req, body)
        except (AttributeError, KeyError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        # The form trims the name before saving.
        name = name.strip()
        existed = self._store.get_template(name) is not None
        try:
            _check_routable(name)
            template = self._store.save_template(name, content, confirm)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        if template is None:
            declined_response(resp, "overwrite")
            return
        resp.media = template.to_dict()
        resp.status = falcon.HTTP_200 if existed else falcon.HTTP_201


class TemplateResource:
    """GET/DELETE /v1/templates/{name} - get and delete one template."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        template = self._store.get_template(name)
        if template is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Template not found"}
            return
        resp.media = template.to_dict()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Delete by exact name; deleting a missing template is a no-op."""
        confirm = RequestConfirmation.from_request(req)
        removed = self._store.delete_template(name, confirm)
        if confirm.declined:
            declined_response(resp, "delete")
            return
        resp.media = {"deleted": removed}
        resp.status = falcon.HTTP_200


class TemplateApplyResource:
    """POST /v1/templates/{name}/apply - replace or append draft content."""

    def __init__(self, apply_template: ApplyTemplateUseCase) -> None:
        self._apply_template = apply_template

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        try:
            body = await req.get_media()
            mode = ApplyMode(body.get("mode", ApplyMode.REPLACE))
            current = body.get("content", "")
            if not isinstance(current, str):
                raise ValueError("content must be a string")
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        editor = EditorSession(Draft(doctor=str(body.get("doctor", "")), content=current))
        applied = self._apply_template.execute(editor, name, mode)
        resp.media = {"applied": applied, "content": editor.get_content()}
        resp.status = falcon.HTTP_200


class _ResponseDownloader:
    """Downloader that keeps the payload for the HTTP response."""

    def __init__(self) -> None:
        self.data = b""
        self.filename = ""
        self.media_type = ""

    def save(self, data: bytes, filename: str, media_type: str) -> str:
        self.data, self.filename, self.media_type = data, filename, media_type
        return filename


class TemplatesExportResource:
    """GET /v1/templates/export - download all templates as JSON.

    With ``?save=true`` the export is written by the configured downloader
    instead and its location is returned.
    """

    def __init__(
        self, store: LocalDocumentStore, filename: str, downloader: Downloader | None = None
    ) -> None:
        self._store = store
        self._filename = filename
        self._downloader = downloader

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if req.get_param_as_bool("save"):
            if self._downloader is None:
                resp.status = falcon.HTTP_400
                resp.media = {"error": "No export directory configured"}
                return
            resp.media = {"path": self._store.export_templates(self._downloader, self._filename)}
            resp.status = falcon.HTTP_200
            return

        download = _ResponseDownloader()
        self._store.export_templates(download, self._filename)
        resp.data = download.data
        resp.content_type = download.media_type
        resp.downloadable_as = download.filename
        resp.status = falcon.HTTP_200
