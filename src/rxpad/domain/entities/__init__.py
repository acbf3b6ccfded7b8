"""Domain entities."""

from rxpad.domain.entities.draft import Draft
from rxpad.domain.entities.printable_sheet import PrintableSheet
from rxpad.domain.entities.template import Template

__all__ = [
    "Draft",
    "PrintableSheet",
    "Template",
]
