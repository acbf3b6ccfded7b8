"""How a template is applied to the current draft."""

from enum import StrEnum


class ApplyMode(StrEnum):
    """Supported template application modes."""

    REPLACE = "replace"
    APPEND = "append"
