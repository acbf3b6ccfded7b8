"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.infrastructure.files.data_uri_reader import DataUriFileReader
from rxpad.interfaces.api.app import create_app

from tests.conftest import FakeClock, FakeDownloader, FakeKeyValueStore, FakePrinter

API_DOCTORS = ["alpha", "beta"]


@pytest.fixture
def api_kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def api_store(api_kv: FakeKeyValueStore) -> LocalDocumentStore:
    s = LocalDocumentStore(api_kv, clock=FakeClock())
    s.load()
    return s


@pytest.fixture
def api_printer() -> FakePrinter:
    return FakePrinter()


@pytest.fixture
def api_downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def app(api_store: LocalDocumentStore, api_printer: FakePrinter, api_downloader: FakeDownloader):
    """Falcon ASGI app over an in-memory store."""
    return create_app(
        api_store,
        DataUriFileReader(max_bytes=1024),
        api_printer,
        API_DOCTORS,
        "Test Clinic",
        default_content="<p>Rx:</p>",
        downloader=api_downloader,
        cors_origins=["http://localhost:5173"],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
