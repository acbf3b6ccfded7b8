"""File reader port - uploaded file to embeddable image blob."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from rxpad.domain.value_objects import ImageBlob


@dataclass(frozen=True)
class UploadedFile:
    """User-selected file: raw bytes or a path on disk."""

    filename: str
    content_type: str | None = None
    data: bytes | None = None
    path: Path | None = None


class FileReader(Protocol):
    """Port for converting an uploaded file into an ImageBlob.

    Raises FileReadError when the file cannot be decoded.
    """

    async def read(self, source: UploadedFile) -> ImageBlob: ...
