"""Pytest fixtures for rxpad tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from rxpad.application.ports import UploadedFile
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.domain.entities import PrintableSheet
from rxpad.domain.exceptions import FileReadError, PersistenceReadError, PersistenceWriteError
from rxpad.domain.value_objects import ImageBlob

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
LOGO = ImageBlob("data:image/png;base64,bG9nbw==")
SIGNATURE_A = ImageBlob("data:image/png;base64,c2lnLWE=")
SIGNATURE_B = ImageBlob("data:image/jpeg;base64,c2lnLWI=")
DOCTORS = ["Dr. Alpha", "Dr. Beta", "Dr. Gamma"]


# --- Fake collaborators ---


class FakeKeyValueStore:
    """In-memory key/value store with switchable read/write failures."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.fail_reads: set[str] = set()
        self.fail_writes = False
        self.writes: list[tuple[str, str | None]] = []

    def get(self, key: str) -> str | None:
        if key in self.fail_reads:
            raise PersistenceReadError(f"cannot read {key}")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceWriteError("quota exceeded")
        self.data[key] = value
        self.writes.append((key, value))

    def remove(self, key: str) -> None:
        if self.fail_writes:
            raise PersistenceWriteError("quota exceeded")
        self.data.pop(key, None)
        self.writes.append((key, None))


class FakeClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class FakeDownloader:
    """Downloader that records saved files."""

    def __init__(self) -> None:
        self.saved: list[tuple[bytes, str, str]] = []

    def save(self, data: bytes, filename: str, media_type: str) -> str:
        self.saved.append((data, filename, media_type))
        return f"/downloads/{filename}"


class FakePrinter:
    """Printer that records sheets."""

    def __init__(self) -> None:
        self.sheets: list[PrintableSheet] = []

    def print_sheet(self, sheet: PrintableSheet) -> str:
        self.sheets.append(sheet)
        return f"/print/{len(self.sheets)}.html"


class FakeFileReader:
    """File reader returning a fixed blob, or failing for named files."""

    def __init__(self, blob: ImageBlob = LOGO) -> None:
        self.blob = blob
        self.bad_names: set[str] = set()

    async def read(self, source: UploadedFile) -> ImageBlob:
        if source.filename in self.bad_names:
            raise FileReadError(f"{source.filename} is not an image")
        return self.blob


class Confirm:
    """Confirmation stub recording how often it was asked."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.answer


# --- Fixtures ---


@pytest.fixture
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(kv: FakeKeyValueStore, clock: FakeClock) -> LocalDocumentStore:
    """Loaded store over an empty fake key/value store."""
    s = LocalDocumentStore(kv, clock=clock)
    s.load()
    return s


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def printer() -> FakePrinter:
    return FakePrinter()


@pytest.fixture
def file_reader() -> FakeFileReader:
    return FakeFileReader()
