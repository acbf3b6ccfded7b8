"""HTML printer - A4 prescription sheet for the browser print dialog."""

import logging
from html import escape
from pathlib import Path

from rxpad.domain.entities import PrintableSheet

logger = logging.getLogger(__name__)

_STYLE = """
@page { size: A4; margin: 15mm; }
@media print { .no-print { display: none !important; } }
body { font-family: sans-serif; margin: 0; }
.prescription-sheet { max-width: 180mm; margin: 0 auto; }
.header { text-align: center; margin-bottom: 1em; }
.header img { max-height: 20mm; }
.clinic { font-size: 1.1em; font-weight: 600; }
.meta { display: flex; gap: 2em; font-size: 0.9em; margin-bottom: 1em; }
.meta .label { color: #555; font-size: 0.8em; display: block; }
.footer { display: flex; justify-content: space-between; margin-top: 3em; }
.footer .signature img { max-height: 24mm; }
.muted { color: #999; font-size: 0.8em; }
"""


def _image(blob, alt: str) -> str:
    return f'<img src="{escape(blob.value)}" alt="{escape(alt)}">'


def render_sheet(sheet: PrintableSheet) -> str:
    """Render the sheet as a standalone HTML page.

    ``content`` is editor HTML and is embedded as is; every other field is
    escaped.
    """
    logo = _image(sheet.logo, "clinic logo") if sheet.logo else ""
    signature = (
        _image(sheet.signature, "signature")
        if sheet.signature
        else '<div class="muted no-print">No signature uploaded</div>'
    )
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(sheet.patient_name or "Prescription")}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="no-print"><button onclick="window.print()">Print</button></div>
<div class="prescription-sheet">
  <div class="header">
    {logo}
    <div class="clinic">{escape(sheet.clinic_name)}</div>
  </div>
  <div class="meta">
    <div><span class="label">Patient</span>{escape(sheet.patient_name)}</div>
    <div><span class="label">History No.</span>{escape(sheet.history_number)}</div>
    <div><span class="label">Date</span>{sheet.issue_date.isoformat()}</div>
  </div>
  <div class="content">{sheet.content}</div>
  <div class="footer">
    <div class="doctor"><span class="label">Doctor</span><div>{escape(sheet.doctor)}</div></div>
    <div class="signature">{signature}<div class="muted">{escape(sheet.doctor)}</div></div>
  </div>
</div>
</body>
</html>
"""


class HtmlPrinter:
    """Write the rendered sheet to ``directory``; open it and print / save as PDF."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory).expanduser()

    def print_sheet(self, sheet: PrintableSheet) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        stem = "-".join(
            part for part in (sheet.issue_date.isoformat(), sheet.history_number.strip()) if part
        )
        target = self._directory / f"prescription-{Path(stem).name or 'draft'}.html"
        target.write_text(render_sheet(sheet), encoding="utf-8")
        logger.info("Printable sheet written to %s", target)
        return str(target)
