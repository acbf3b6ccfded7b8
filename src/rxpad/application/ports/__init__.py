"""Application ports - interfaces for external adapters."""

from rxpad.application.ports.confirmation import Confirmation, always, never
from rxpad.application.ports.downloader import Downloader
from rxpad.application.ports.file_reader import FileReader, UploadedFile
from rxpad.application.ports.key_value_store import KeyValueStore
from rxpad.application.ports.printer import Printer
from rxpad.application.ports.rich_text_editor import RichTextEditor

__all__ = [
    "Confirmation",
    "Downloader",
    "FileReader",
    "KeyValueStore",
    "Printer",
    "RichTextEditor",
    "UploadedFile",
    "always",
    "never",
]
