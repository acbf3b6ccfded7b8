"""Printable sheet - everything that appears on a printed prescription."""

from dataclasses import dataclass
from datetime import date

from rxpad.domain.value_objects import ImageBlob


@dataclass(frozen=True)
class PrintableSheet:
    """A4 prescription sheet handed to the printer."""

    clinic_name: str
    patient_name: str
    history_number: str
    issue_date: date
    doctor: str
    content: str
    logo: ImageBlob | None = None
    signature: ImageBlob | None = None
