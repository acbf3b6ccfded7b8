"""Template entity - named snapshot of prescription content."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class Template:
    """Template - reusable rich-text content keyed by exact name."""

    name: str
    content: str
    updated_at: datetime

    def to_dict(self) -> dict[str, str]:
        """Serialized form; key order is name, content, updatedAt."""
        return {
            "name": self.name,
            "content": self.content,
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Template":
        """Parse a stored entry. Raises ValueError on wrong shape."""
        if not isinstance(data, dict):
            raise ValueError("Template entry must be an object")
        name = data.get("name")
        content = data.get("content")
        updated_at = data.get("updatedAt")
        if not isinstance(name, str) or not isinstance(content, str):
            raise ValueError("Template name and content must be strings")
        if not isinstance(updated_at, str):
            raise ValueError("Template updatedAt must be an ISO timestamp")
        # JavaScript toISOString() ends with "Z"
        if updated_at.endswith("Z"):
            updated_at = updated_at[:-1] + "+00:00"
        return cls(name=name, content=content, updated_at=datetime.fromisoformat(updated_at))
