"""Filesystem downloader - writes exported files to a directory."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemDownloader:
    """Save generated files under ``directory``; returns the written path."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory).expanduser()

    def save(self, data: bytes, filename: str, media_type: str) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / Path(filename).name
        target.write_bytes(data)
        logger.info("Wrote %s (%s, %d bytes)", target, media_type, len(data))
        return str(target)
