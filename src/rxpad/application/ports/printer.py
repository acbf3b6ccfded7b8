"""Printer port - native print / save-as-PDF flow."""

from typing import Protocol

from rxpad.domain.entities import PrintableSheet


class Printer(Protocol):
    """Port for printing a prescription sheet; returns the output location."""

    def print_sheet(self, sheet: PrintableSheet) -> str: ...
