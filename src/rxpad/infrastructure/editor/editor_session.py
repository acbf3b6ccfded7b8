"""In-process rich-text editor session bound to a draft."""

from rxpad.domain.entities import Draft
from rxpad.domain.value_objects import ToolbarConfig


class EditorSession:
    """Editor adapter whose content lives in ``draft.content``."""

    def __init__(self, draft: Draft, toolbar: ToolbarConfig | None = None) -> None:
        self._draft = draft
        self._toolbar = toolbar or ToolbarConfig()

    @property
    def toolbar(self) -> ToolbarConfig:
        return self._toolbar

    @property
    def draft(self) -> Draft:
        return self._draft

    def get_content(self) -> str:
        return self._draft.content

    def set_content(self, content: str) -> None:
        self._draft.content = content
