"""Rich-text editor toolbar capabilities."""

from dataclasses import dataclass, field

DEFAULT_HEADER_LEVELS = (1, 2, 3)
DEFAULT_FORMATS = (
    "header",
    "bold",
    "italic",
    "underline",
    "strike",
    "list",
    "bullet",
    "align",
    "link",
    "image",
)


@dataclass(frozen=True)
class ToolbarConfig:
    """Set of enabled formatting operations for the editor toolbar.

    ``clean`` (strip formatting) is a toolbar action, not a format, so it is
    tracked separately from ``formats``.
    """

    header_levels: tuple[int, ...] = DEFAULT_HEADER_LEVELS
    formats: tuple[str, ...] = DEFAULT_FORMATS
    clean: bool = True
    groups: tuple[tuple[str, ...], ...] = field(
        default=(
            ("header",),
            ("bold", "italic", "underline", "strike"),
            ("ordered", "bullet"),
            ("align",),
            ("link", "image"),
            ("clean",),
        )
    )

    def to_dict(self) -> dict:
        return {
            "header_levels": list(self.header_levels),
            "formats": list(self.formats),
            "clean": self.clean,
            "toolbar": [list(g) for g in self.groups],
        }
