"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from rxpad.application.ports import Downloader, FileReader, Printer
from rxpad.application.services.document_store import EXPORT_FILENAME, LocalDocumentStore
from rxpad.application.use_cases.draft.apply_template import ApplyTemplateUseCase
from rxpad.application.use_cases.draft.start_draft import StartDraftUseCase
from rxpad.application.use_cases.printing.print_prescription import PrintPrescriptionUseCase
from rxpad.application.use_cases.upload.upload_image import UploadImageUseCase
from rxpad.domain.value_objects import ToolbarConfig
from rxpad.interfaces.api.middleware.cors import CORSMiddleware
from rxpad.interfaces.api.middleware.store_lifespan import StoreLifespanMiddleware
from rxpad.interfaces.api.resources.draft import DoctorsResource, DraftResource
from rxpad.interfaces.api.resources.health import HealthResource
from rxpad.interfaces.api.resources.images import (
    LogoResource,
    SignatureResource,
    SignaturesResource,
)
from rxpad.interfaces.api.resources.printing import PrintResource
from rxpad.interfaces.api.resources.reset import ResetResource
from rxpad.interfaces.api.resources.templates import (
    TemplateApplyResource,
    TemplateResource,
    TemplatesExportResource,
    TemplatesResource,
)

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    store: LocalDocumentStore,
    file_reader: FileReader,
    printer: Printer,
    doctors: list[str],
    clinic_name: str,
    *,
    default_content: str = "",
    export_filename: str = EXPORT_FILENAME,
    toolbar: ToolbarConfig | None = None,
    downloader: Downloader | None = None,
    cors_origins: list[str] | None = None,
) -> App:
    """Create Falcon ASGI app with routes. The store is loaded on ASGI startup."""
    upload_image = UploadImageUseCase(store, file_reader, doctors)
    apply_template = ApplyTemplateUseCase(store)
    start_draft = StartDraftUseCase(doctors, default_content)
    print_prescription = PrintPrescriptionUseCase(store, printer, clinic_name)

    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins or []),
            StoreLifespanMiddleware(store),
        ],
    )
    app.add_error_handler(Exception, _log_exception)

    app.add_route("/v1/health", HealthResource())
    app.add_route("/v1/doctors", DoctorsResource(doctors, clinic_name))
    app.add_route("/v1/draft", DraftResource(start_draft, toolbar or ToolbarConfig()))
    app.add_route("/v1/templates", TemplatesResource(store))
    app.add_route("/v1/templates/export", TemplatesExportResource(store, export_filename, downloader))
    app.add_route("/v1/templates/{name}", TemplateResource(store))
    app.add_route("/v1/templates/{name}/apply", TemplateApplyResource(apply_template))
    app.add_route("/v1/logo", LogoResource(store, upload_image))
    app.add_route("/v1/signatures", SignaturesResource(store))
    app.add_route("/v1/signatures/{doctor}", SignatureResource(store, upload_image, doctors))
    app.add_route("/v1/reset", ResetResource(store))
    app.add_route("/v1/print", PrintResource(print_prescription, doctors))
    return app
