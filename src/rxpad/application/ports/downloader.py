"""Downloader port - offer a serialized document to the user."""

from typing import Protocol


class Downloader(Protocol):
    """Port for saving a generated file; returns where it went."""

    def save(self, data: bytes, filename: str, media_type: str) -> str: ...
