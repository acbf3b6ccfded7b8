"""Apply template to draft use case."""

import logging

from rxpad.application.ports import RichTextEditor
from rxpad.application.services.document_store import LocalDocumentStore
from rxpad.domain.value_objects import ApplyMode

logger = logging.getLogger(__name__)


class ApplyTemplateUseCase:
    """Replace or extend the editor content with a stored template."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    def execute(self, editor: RichTextEditor, name: str, mode: ApplyMode | str) -> bool:
        """Apply template ``name``. Returns False if no such template exists."""
        content = self._store.apply_template(name, mode, editor.get_content())
        if content is None:
            logger.debug("Template %r not found, draft left as is", name)
            return False
        editor.set_content(content)
        return True
