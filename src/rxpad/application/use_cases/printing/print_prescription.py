"""Print prescription use case."""

from rxpad.application.ports import Printer
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.domain.entities import Draft, PrintableSheet


class PrintPrescriptionUseCase:
    """Assemble the printable sheet for a draft and send it to the printer."""

    def __init__(self, store: LocalDocumentStore, printer: Printer, clinic_name: str) -> None:
        self._store = store
        self._printer = printer
        self._clinic_name = clinic_name

    def build_sheet(self, draft: Draft) -> PrintableSheet:
        return PrintableSheet(
            clinic_name=self._clinic_name,
            patient_name=draft.patient_name,
            history_number=draft.history_number,
            issue_date=draft.issue_date,
            doctor=draft.doctor,
            content=draft.content,
            logo=self._store.logo,
            signature=self._store.get_signature(draft.doctor),
        )

    def execute(self, draft: Draft) -> str:
        """Print the draft; returns where the printer put the output."""
        return self._printer.print_sheet(self.build_sheet(draft))
