"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from rxpad import __version__
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.config import Settings, get_settings
from rxpad.infrastructure.export.filesystem_downloader import FileSystemDownloader
from rxpad.infrastructure.files.data_uri_reader import DataUriFileReader
from rxpad.infrastructure.persistence.json_file_store import JsonFileKeyValueStore
from rxpad.infrastructure.persistence.memory_store import InMemoryKeyValueStore
from rxpad.infrastructure.printing.html_printer import HtmlPrinter
from rxpad.interfaces.api.app import create_app

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send rxpad logs to stderr at ``level``."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_store(settings: Settings) -> LocalDocumentStore:
    """Document store over the configured key/value backend."""
    if settings.storage_backend == "memory":
        storage = InMemoryKeyValueStore(quota_bytes=settings.storage_quota_bytes)
    else:
        storage = JsonFileKeyValueStore(settings.storage_path, quota_bytes=settings.storage_quota_bytes)
    return LocalDocumentStore(
        storage,
        templates_key=settings.templates_key,
        signatures_key=settings.signatures_key,
        logo_key=settings.logo_key,
    )


def create_rxpad_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    store = create_store(settings)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        store,
        DataUriFileReader(max_bytes=settings.max_upload_bytes),
        HtmlPrinter(settings.print_dir),
        settings.doctors,
        settings.clinic_name,
        default_content=settings.default_content,
        export_filename=settings.export_filename,
        downloader=FileSystemDownloader(settings.export_dir),
        cors_origins=cors_origins,
    )


def main() -> None:
    """CLI entry point - serve the API on the configured address."""
    import uvicorn

    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    storage = settings.storage_path if settings.storage_backend == "file" else "memory"
    logger.info("rxpad v%s, storage: %s", __version__, storage)
    uvicorn.run(
        create_rxpad_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
