"""Draft entity - the unpersisted document being edited."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class Draft:
    """Draft - patient fields, selected doctor and current content."""

    doctor: str
    content: str = ""
    patient_name: str = ""
    history_number: str = ""
    issue_date: date = field(default_factory=date.today)
