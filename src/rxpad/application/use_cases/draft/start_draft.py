"""Start draft use case."""

from collections.abc import Callable
from datetime import date

from rxpad.domain.entities import Draft
from rxpad.domain.exceptions import ValidationError


class StartDraftUseCase:
    """Create a fresh session draft: today's date, first doctor, default content."""

    def __init__(
        self,
        doctors: list[str],
        default_content: str = "",
        today: Callable[[], date] = date.today,
    ) -> None:
        if not doctors:
            raise ValidationError("Doctor roster must not be empty")
        self._doctors = list(doctors)
        self._default_content = default_content
        self._today = today

    def execute(self) -> Draft:
        return Draft(
            doctor=self._doctors[0],
            content=self._default_content,
            issue_date=self._today(),
        )
