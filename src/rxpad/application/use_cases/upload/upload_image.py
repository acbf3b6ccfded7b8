"""Upload image use case - logo or doctor signature."""

import logging
from enum import StrEnum

from rxpad.application.ports import FileReader, UploadedFile
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.domain.exceptions import NotFound, ValidationError
from rxpad.domain.value_objects import ImageBlob

logger = logging.getLogger(__name__)


class ImageSlot(StrEnum):
    """Where an uploaded image goes."""

    LOGO = "logo"
    SIGNATURE = "signature"


class UploadImageUseCase:
    """Convert an uploaded file to a blob and store it in its slot.

    The store mutation happens after the conversion completes, against the
    state at that moment. Concurrent uploads to one slot: last to finish wins.
    """

    def __init__(
        self,
        store: LocalDocumentStore,
        file_reader: FileReader,
        doctors: list[str],
    ) -> None:
        self._store = store
        self._file_reader = file_reader
        self._doctors = list(doctors)

    async def execute(
        self,
        slot: ImageSlot | str,
        source: UploadedFile,
        doctor: str | None = None,
    ) -> ImageBlob:
        """Store the uploaded image. FileReadError propagates; prior blob is kept."""
        slot = ImageSlot(slot)
        if slot is ImageSlot.SIGNATURE:
            if not doctor:
                raise ValidationError("Doctor is required for a signature upload")
            if doctor not in self._doctors:
                raise NotFound("Doctor", doctor)

        blob = await self._file_reader.read(source)

        if slot is ImageSlot.LOGO:
            self._store.set_logo(blob)
        else:
            self._store.set_signature(doctor, blob)
        logger.info("Stored %s image from %r (%s)", slot.value, source.filename, blob.media_type)
        return blob
