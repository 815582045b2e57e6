from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Literal

NoteKind = Literal["daily", "standalone"]

DAILY: NoteKind = "daily"
STANDALONE: NoteKind = "standalone"

NOTE_SUFFIX = ".md"


@dataclass(frozen=True)
class WikiLink:
    text: str  # reference as written inside [[...]]
    target: str  # canonical filename it resolves to
    exists: bool

    def as_dict(self) -> dict[str, Any]:
        return {"text": self.text, "target": self.target, "exists": self.exists}


@dataclass(frozen=True)
class BacklinkInfo:
    from_note: str  # source filename
    from_title: str
    context: str  # "" when no excerpt could be located

    def as_dict(self) -> dict[str, Any]:
        return {
            "fromNote": self.from_note,
            "fromTitle": self.from_title,
            "context": self.context,
        }


@dataclass(frozen=True)
class NoteFile:
    name: str
    path: str  # "daily/<name>" or "notes/<name>"
    is_daily: bool
    date: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "isDaily": self.is_daily,
            "date": self.date,
        }


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    icon: str
    is_default: bool
    content: str  # written verbatim into new notes

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "isDefault": self.is_default,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Template:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            icon=data["icon"],
            is_default=bool(data.get("isDefault", False)),
            content=data["content"],
        )
