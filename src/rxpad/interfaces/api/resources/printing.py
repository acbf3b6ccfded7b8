"""Print API resource."""

from datetime import date

import falcon.asgi

from rxpad.application.use_cases.printing.print_prescription import PrintPrescriptionUseCase
from rxpad.domain.entities import Draft
from rxpad.infrastructure.printing.html_printer import render_sheet


def _draft_from_body(body: dict, doctors: list[str]) -> Draft:
    """Build a draft from request JSON. Raises KeyError/ValueError."""
    doctor = body.get("doctor") or doctors[0]
    if doctor not in doctors:
        raise ValueError(f"Unknown doctor: {doctor}")
    issue_date = body.get("issue_date")
    return Draft(
        doctor=doctor,
        content=str(body.get("content", "")),
        patient_name=str(body.get("patient_name", "")),
        history_number=str(body.get("history_number", "")),
        issue_date=date.fromisoformat(issue_date) if issue_date else date.today(),
    )


class PrintResource:
    """POST /v1/print - printable A4 sheet for the current draft.

    Returns the HTML inline; with ``?save=true`` it is also written by the
    printer and its location is returned in ``X-Printed-To``.
    """

    def __init__(self, print_prescription: PrintPrescriptionUseCase, doctors: list[str]) -> None:
        self._print = print_prescription
        self._doctors = doctors

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            draft = _draft_from_body(body, self._doctors)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        if req.get_param_as_bool("save"):
            resp.set_header("X-Printed-To", self._print.execute(draft))
        resp.text = render_sheet(self._print.build_sheet(draft))
        resp.content_type = falcon.MEDIA_HTML
        resp.status = falcon.HTTP_200
