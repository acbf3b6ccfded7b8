"""Unit tests for use cases."""

import asyncio
from datetime import date

import pytest

from rxpad.application.ports import UploadedFile, always
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.application.use_cases.draft.apply_template import ApplyTemplateUseCase
from rxpad.application.use_cases.draft.start_draft import StartDraftUseCase
from rxpad.application.use_cases.printing.print_prescription import PrintPrescriptionUseCase
from rxpad.application.use_cases.upload.upload_image import ImageSlot, UploadImageUseCase
from rxpad.domain.entities import Draft
from rxpad.domain.exceptions import FileReadError, NotFound, ValidationError
from rxpad.domain.value_objects import ImageBlob
from rxpad.infrastructure.editor.editor_session import EditorSession

from tests.conftest import DOCTORS, LOGO, SIGNATURE_A, SIGNATURE_B, FakeFileReader


# --- StartDraftUseCase ---


def test_start_draft_defaults() -> None:
    use_case = StartDraftUseCase(DOCTORS, "<p>Rx:</p>", today=lambda: date(2026, 3, 1))
    draft = use_case.execute()
    assert draft.doctor == "Dr. Alpha"
    assert draft.content == "<p>Rx:</p>"
    assert draft.issue_date == date(2026, 3, 1)
    assert draft.patient_name == ""
    assert draft.history_number == ""


def test_start_draft_returns_independent_drafts() -> None:
    use_case = StartDraftUseCase(DOCTORS)
    first = use_case.execute()
    first.content = "edited"
    assert use_case.execute().content == ""


def test_start_draft_requires_roster() -> None:
    with pytest.raises(ValidationError):
        StartDraftUseCase([])


# --- ApplyTemplateUseCase ---


def test_apply_template_replace_sets_editor_content(store: LocalDocumentStore) -> None:
    store.save_template("Flu", "<p>Rest</p>", always)
    editor = EditorSession(Draft(doctor="Dr. Alpha", content="<p>old</p>"))

    assert ApplyTemplateUseCase(store).execute(editor, "Flu", "replace") is True
    assert editor.get_content() == "<p>Rest</p>"
    assert editor.draft.content == "<p>Rest</p>"


def test_apply_template_append_extends_editor_content(store: LocalDocumentStore) -> None:
    store.save_template("Flu", "<p>Rest</p>", always)
    editor = EditorSession(Draft(doctor="Dr. Alpha", content="<p>old</p>"))

    ApplyTemplateUseCase(store).execute(editor, "Flu", "append")
    assert editor.get_content() == "<p>old</p><p>Rest</p>"


def test_apply_template_missing_leaves_draft(store: LocalDocumentStore) -> None:
    editor = EditorSession(Draft(doctor="Dr. Alpha", content="<p>old</p>"))
    assert ApplyTemplateUseCase(store).execute(editor, "Nope", "replace") is False
    assert editor.get_content() == "<p>old</p>"


# --- UploadImageUseCase ---


@pytest.mark.asyncio
async def test_upload_logo(store: LocalDocumentStore, file_reader: FakeFileReader) -> None:
    use_case = UploadImageUseCase(store, file_reader, DOCTORS)
    blob = await use_case.execute(ImageSlot.LOGO, UploadedFile(filename="logo.png", data=b"x"))
    assert blob == LOGO
    assert store.logo == LOGO


@pytest.mark.asyncio
async def test_upload_signature_for_doctor(store: LocalDocumentStore) -> None:
    use_case = UploadImageUseCase(store, FakeFileReader(SIGNATURE_A), DOCTORS)
    await use_case.execute("signature", UploadedFile(filename="sig.png", data=b"x"), doctor="Dr. Beta")
    assert store.signatures == {"Dr. Beta": SIGNATURE_A}


@pytest.mark.asyncio
async def test_upload_signature_unknown_doctor(store: LocalDocumentStore, file_reader) -> None:
    use_case = UploadImageUseCase(store, file_reader, DOCTORS)
    with pytest.raises(NotFound):
        await use_case.execute(ImageSlot.SIGNATURE, UploadedFile(filename="s.png"), doctor="Dr. Who")
    with pytest.raises(ValidationError):
        await use_case.execute(ImageSlot.SIGNATURE, UploadedFile(filename="s.png"))
    assert store.signatures == {}


@pytest.mark.asyncio
async def test_upload_read_failure_keeps_prior_logo(store: LocalDocumentStore, file_reader) -> None:
    store.set_logo(LOGO)
    file_reader.bad_names.add("notes.txt")
    use_case = UploadImageUseCase(store, file_reader, DOCTORS)

    with pytest.raises(FileReadError):
        await use_case.execute(ImageSlot.LOGO, UploadedFile(filename="notes.txt", data=b"hi"))
    assert store.logo == LOGO


class _GatedReader:
    """Reader whose conversions finish when their event is set."""

    def __init__(self) -> None:
        self.gates: dict[str, asyncio.Event] = {}

    async def read(self, source: UploadedFile) -> ImageBlob:
        gate = self.gates.setdefault(source.filename, asyncio.Event())
        await gate.wait()
        return ImageBlob.from_bytes(source.filename.encode(), "image/png")


@pytest.mark.asyncio
async def test_concurrent_uploads_last_to_complete_wins(store: LocalDocumentStore) -> None:
    reader = _GatedReader()
    use_case = UploadImageUseCase(store, reader, DOCTORS)
    reader.gates["first"] = asyncio.Event()
    reader.gates["second"] = asyncio.Event()

    first = asyncio.create_task(use_case.execute("logo", UploadedFile(filename="first")))
    second = asyncio.create_task(use_case.execute("logo", UploadedFile(filename="second")))
    reader.gates["second"].set()
    await second
    reader.gates["first"].set()
    await first

    assert store.logo == ImageBlob.from_bytes(b"first", "image/png")


@pytest.mark.asyncio
async def test_upload_applies_to_state_at_completion(store: LocalDocumentStore) -> None:
    reader = _GatedReader()
    reader.gates["sig"] = asyncio.Event()
    use_case = UploadImageUseCase(store, reader, DOCTORS)

    task = asyncio.create_task(use_case.execute("signature", UploadedFile(filename="sig"), doctor="Dr. Alpha"))
    await asyncio.sleep(0)
    store.set_signature("Dr. Beta", SIGNATURE_B)
    reader.gates["sig"].set()
    await task

    assert set(store.signatures) == {"Dr. Alpha", "Dr. Beta"}


# --- PrintPrescriptionUseCase ---


def test_print_prescription_uses_selected_doctor_signature(store: LocalDocumentStore, printer) -> None:
    store.set_logo(LOGO)
    store.set_signature("Dr. Alpha", SIGNATURE_A)
    store.set_signature("Dr. Beta", SIGNATURE_B)
    draft = Draft(
        doctor="Dr. Beta",
        content="<p>Rx</p>",
        patient_name="Jane Roe",
        history_number="H-17",
        issue_date=date(2026, 2, 2),
    )

    location = PrintPrescriptionUseCase(store, printer, "Clinic").execute(draft)

    assert location == "/print/1.html"
    sheet = printer.sheets[0]
    assert sheet.clinic_name == "Clinic"
    assert sheet.signature == SIGNATURE_B
    assert sheet.logo == LOGO
    assert sheet.patient_name == "Jane Roe"
    assert sheet.issue_date == date(2026, 2, 2)


def test_print_prescription_without_assets(store: LocalDocumentStore, printer) -> None:
    sheet = PrintPrescriptionUseCase(store, printer, "Clinic").build_sheet(Draft(doctor="Dr. Gamma"))
    assert sheet.logo is None
    assert sheet.signature is None
    assert printer.sheets == []
