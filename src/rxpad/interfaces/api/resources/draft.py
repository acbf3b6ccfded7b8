"""Roster and draft API resources."""

import falcon.asgi

from rxpad.application.use_cases.draft.start_draft import StartDraftUseCase
from rxpad.domain.value_objects import ToolbarConfig


class DoctorsResource:
    """GET /v1/doctors - doctor roster and clinic name."""

    def __init__(self, doctors: list[str], clinic_name: str) -> None:
        self._doctors = doctors
        self._clinic_name = clinic_name

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"clinic_name": self._clinic_name, "doctors": list(self._doctors)}
        resp.status = falcon.HTTP_200


class DraftResource:
    """GET /v1/draft - defaults for a new session draft and the editor toolbar."""

    def __init__(self, start_draft: StartDraftUseCase, toolbar: ToolbarConfig) -> None:
        self._start_draft = start_draft
        self._toolbar = toolbar

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        draft = self._start_draft.execute()
        resp.media = {
            "patient_name": draft.patient_name,
            "history_number": draft.history_number,
            "issue_date": draft.issue_date.isoformat(),
            "doctor": draft.doctor,
            "content": draft.content,
            "toolbar": self._toolbar.to_dict(),
        }
        resp.status = falcon.HTTP_200
