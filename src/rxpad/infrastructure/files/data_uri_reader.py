"""Data URI file reader - uploaded image file to embeddable blob."""

import asyncio
import mimetypes

from rxpad.application.ports import UploadedFile
from rxpad.domain.exceptions import FileReadError
from rxpad.domain.value_objects import ImageBlob

# Leading bytes of common image formats, for uploads without a usable type.
_SIGNATURES: list[tuple[bytes, str]] = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
]


def _sniff(data: bytes) -> str | None:
    """Guess image type from magic bytes."""
    for magic, media_type in _SIGNATURES:
        if data.startswith(magic):
            return media_type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    head = data[:256].lstrip().lower()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head):
        return "image/svg+xml"
    return None


class DataUriFileReader:
    """Read an uploaded file and encode it as a ``data:image/...;base64`` URI."""

    def __init__(self, max_bytes: int | None = None) -> None:
        self._max_bytes = max_bytes

    async def read(self, source: UploadedFile) -> ImageBlob:
        data = source.data
        if data is None:
            if source.path is None:
                raise FileReadError(f"No data for {source.filename!r}")
            try:
                data = await asyncio.to_thread(source.path.read_bytes)
            except OSError as e:
                raise FileReadError(f"Cannot read {source.filename!r}: {e}") from e

        if not data:
            raise FileReadError(f"{source.filename!r} is empty")
        if self._max_bytes is not None and len(data) > self._max_bytes:
            raise FileReadError(f"{source.filename!r} exceeds {self._max_bytes} bytes")

        media_type = self._media_type(source, data)
        if media_type is None:
            raise FileReadError(f"{source.filename!r} is not an image")
        return ImageBlob.from_bytes(data, media_type)

    @staticmethod
    def _media_type(source: UploadedFile, data: bytes) -> str | None:
        declared = (source.content_type or "").split(";")[0].strip().lower()
        if declared.startswith("image/"):
            return declared
        guessed, _ = mimetypes.guess_type(source.filename)
        if guessed and guessed.startswith("image/"):
            return guessed
        return _sniff(data)
