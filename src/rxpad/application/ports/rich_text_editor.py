"""Rich-text editor port."""

from typing import Protocol

from rxpad.domain.value_objects import ToolbarConfig


class RichTextEditor(Protocol):
    """Port for the editing widget. Content is opaque serialized HTML."""

    @property
    def toolbar(self) -> ToolbarConfig: ...

    def get_content(self) -> str: ...

    def set_content(self, content: str) -> None: ...
