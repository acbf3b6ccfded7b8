"""Image blob stored as a self-describing data URI."""

import base64
import re
from dataclasses import dataclass

_DATA_URI = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[\w-]+=[^;,]*)*)(?P<b64>;base64)?,")


@dataclass(frozen=True)
class ImageBlob:
    """Opaque image payload, embeddable directly in markup (``<img src=...>``)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _DATA_URI.match(self.value):
            raise ValueError("Image blob must be a data: URI")

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str) -> "ImageBlob":
        """Encode raw bytes as a base64 data URI."""
        payload = base64.b64encode(data).decode("ascii")
        return cls(f"data:{media_type};base64,{payload}")

    @property
    def media_type(self) -> str:
        match = _DATA_URI.match(self.value)
        return (match.group("mime") if match else None) or "text/plain"

    def __str__(self) -> str:
        return self.value
