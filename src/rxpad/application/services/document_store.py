"""Local document store - templates, doctor signatures and clinic logo."""

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from rxpad.application.ports import Confirmation, Downloader, KeyValueStore
from rxpad.domain.entities import Template
from rxpad.domain.exceptions import (
    ConfirmationDeclined,
    PersistenceReadError,
    PersistenceWriteError,
    ValidationError,
)
from rxpad.domain.value_objects import ApplyMode, ImageBlob

logger = logging.getLogger(__name__)

TEMPLATES_KEY = "mpg_templates_v1"
SIGNATURES_KEY = "mpg_signatures_v1"
LOGO_KEY = "mpg_logo_v1"
EXPORT_FILENAME = "mpg_templates.json"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _ask(confirm: Confirmation, action: str) -> None:
    """Raise ConfirmationDeclined unless the caller confirms."""
    if not confirm():
        raise ConfirmationDeclined(action)


class LocalDocumentStore:
    """CRUD over templates, signatures and logo with durable persistence.

    In-memory state is the source of truth for the session. Writes go to the
    key/value store right after each mutation; a failed write is logged and
    otherwise ignored, so the change simply does not survive a reload.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        clock: Callable[[], datetime] = _utcnow,
        templates_key: str = TEMPLATES_KEY,
        signatures_key: str = SIGNATURES_KEY,
        logo_key: str = LOGO_KEY,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._templates_key = templates_key
        self._signatures_key = signatures_key
        self._logo_key = logo_key
        self._templates: list[Template] = []
        self._signatures: dict[str, ImageBlob] = {}
        self._logo: ImageBlob | None = None

    # --- Hydration ---

    def load(self) -> None:
        """Hydrate all three collections. Bad entries fall back to empty."""
        self._templates = self._read(self._templates_key, self._parse_templates, [])
        self._signatures = self._read(self._signatures_key, self._parse_signatures, {})
        self._logo = self._read(self._logo_key, ImageBlob, None)
        logger.info(
            "Loaded %d template(s), %d signature(s), logo=%s",
            len(self._templates),
            len(self._signatures),
            "yes" if self._logo else "no",
        )

    def _read(self, key, parse, default):
        try:
            raw = self._storage.get(key)
            if raw is None:
                return default
            return parse(raw)
        except (PersistenceReadError, ValueError, TypeError) as e:
            logger.warning("Ignoring unreadable storage entry %r: %s", key, e)
            return default

    @staticmethod
    def _parse_templates(raw: str) -> list[Template]:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("Templates entry must be a list")
        templates: list[Template] = []
        seen: set[str] = set()
        for item in data:
            template = Template.from_dict(item)
            if template.name in seen:
                raise ValueError(f"Duplicate template name {template.name!r}")
            seen.add(template.name)
            templates.append(template)
        return templates

    @staticmethod
    def _parse_signatures(raw: str) -> dict[str, ImageBlob]:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Signatures entry must be an object")
        return {str(doctor): ImageBlob(uri) for doctor, uri in data.items()}

    # --- Persistence ---

    def _write(self, key: str, value: str | None) -> None:
        try:
            if value is None:
                self._storage.remove(key)
            else:
                self._storage.set(key, value)
        except (PersistenceWriteError, OSError) as e:
            logger.warning("Could not persist %r, change kept for this session only: %s", key, e)

    def _persist_templates(self) -> None:
        self._write(
            self._templates_key,
            json.dumps([t.to_dict() for t in self._templates], ensure_ascii=False),
        )

    def _persist_signatures(self) -> None:
        self._write(
            self._signatures_key,
            json.dumps({d: b.value for d, b in self._signatures.items()}, ensure_ascii=False),
        )

    def _persist_logo(self) -> None:
        self._write(self._logo_key, self._logo.value if self._logo else None)

    # --- Read access ---

    @property
    def templates(self) -> list[Template]:
        return list(self._templates)

    @property
    def template_names(self) -> list[str]:
        return [t.name for t in self._templates]

    def get_template(self, name: str) -> Template | None:
        return next((t for t in self._templates if t.name == name), None)

    @property
    def signatures(self) -> dict[str, ImageBlob]:
        return dict(self._signatures)

    def get_signature(self, doctor: str) -> ImageBlob | None:
        return self._signatures.get(doctor)

    @property
    def logo(self) -> ImageBlob | None:
        return self._logo

    # --- Templates ---

    def save_template(self, name: str, content: str, confirm: Confirmation) -> Template | None:
        """Create or (confirmed) replace a template.

        Returns the stored template, or None when overwrite was declined.
        """
        if not name or not name.strip():
            raise ValidationError("Template name is required")

        index = next((i for i, t in enumerate(self._templates) if t.name == name), None)
        if index is not None:
            try:
                _ask(confirm, f"overwrite template {name!r}")
            except ConfirmationDeclined as e:
                logger.debug("Declined: %s", e)
                return None

        template = Template(name=name, content=content, updated_at=self._clock())
        if index is None:
            self._templates.append(template)
        else:
            self._templates[index] = template
        logger.info("Saved template %r (%s)", name, "replaced" if index is not None else "created")
        self._persist_templates()
        return template

    def delete_template(self, name: str, confirm: Confirmation) -> bool:
        """Delete a template by exact name. Returns True if one was removed."""
        try:
            _ask(confirm, f"delete template {name!r}")
        except ConfirmationDeclined as e:
            logger.debug("Declined: %s", e)
            return False

        remaining = [t for t in self._templates if t.name != name]
        removed = len(remaining) != len(self._templates)
        self._templates = remaining
        if removed:
            logger.info("Deleted template %r", name)
        self._persist_templates()
        return removed

    def apply_template(self, name: str, mode: ApplyMode | str, current: str) -> str | None:
        """Content the draft should hold after applying ``name``; None if absent."""
        mode = ApplyMode(mode)
        template = self.get_template(name)
        if template is None:
            return None
        if mode is ApplyMode.REPLACE:
            return template.content
        return current + template.content

    def export_templates(self, downloader: Downloader, filename: str = EXPORT_FILENAME) -> str:
        """Hand the template collection to the downloader as pretty JSON."""
        data = json.dumps([t.to_dict() for t in self._templates], ensure_ascii=False, indent=2)
        return downloader.save(data.encode("utf-8"), filename, "application/json")

    # --- Logo and signatures ---

    def set_logo(self, blob: ImageBlob | None) -> None:
        self._logo = blob
        logger.info("Logo %s", "updated" if blob else "cleared")
        self._persist_logo()

    def set_signature(self, doctor: str, blob: ImageBlob) -> None:
        self._signatures[doctor] = blob
        logger.info("Signature updated for %r", doctor)
        self._persist_signatures()

    def clear_signature(self, doctor: str, confirm: Confirmation) -> bool:
        """Remove one doctor's signature. Returns True if one was removed."""
        try:
            _ask(confirm, f"clear signature for {doctor!r}")
        except ConfirmationDeclined as e:
            logger.debug("Declined: %s", e)
            return False

        removed = self._signatures.pop(doctor, None) is not None
        if removed:
            logger.info("Signature cleared for %r", doctor)
            self._persist_signatures()
        return removed

    # --- Reset ---

    def reset_all(self, confirm: Confirmation) -> bool:
        """Clear templates, signatures and logo, in memory and in storage."""
        try:
            _ask(confirm, "reset all stored data")
        except ConfirmationDeclined as e:
            logger.debug("Declined: %s", e)
            return False

        self._templates = []
        self._signatures = {}
        self._logo = None
        for key in (self._templates_key, self._signatures_key, self._logo_key):
            self._write(key, None)
        logger.info("All stored data cleared")
        return True
