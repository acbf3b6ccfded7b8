"""Domain value objects."""

from rxpad.domain.value_objects.apply_mode import ApplyMode
from rxpad.domain.value_objects.image_blob import ImageBlob
from rxpad.domain.value_objects.toolbar_config import ToolbarConfig

__all__ = [
    "ApplyMode",
    "ImageBlob",
    "ToolbarConfig",
]
