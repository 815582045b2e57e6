import json
import logging
from pathlib import Path

from ..core.errors import (
    DefaultTemplateError,
    NoteIOError,
    TemplateExistsError,
    TemplateNotFoundError,
)
from ..core.model import DAILY, STANDALONE, Template
from ..core.ports import WritableNoteStore
from ..core.utils import template_id

log = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".json"

MEETING_NOTES = """# Meeting Notes

## Attendees
-

## Agenda
1.

## Discussion

## Action Items
- [ ]
"""

DAILY_LOG = """# Daily Log

## Goals
- [ ]

## Accomplishments
-

## Reflections
"""

PROJECT_PLAN = """# Project Plan

## Overview

## Goals
-

## Timeline
| Milestone | Target date |
|-----------|-------------|
|           |             |

## Resources
-
"""

DEFAULT_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="meeting-notes",
        name="Meeting Notes",
        description="Structured template for meeting documentation",
        icon="users",
        is_default=True,
        content=MEETING_NOTES,
    ),
    Template(
        id="daily-log",
        name="Daily Log",
        description="Track your daily goals, accomplishments, and reflections",
        icon="calendar",
        is_default=True,
        content=DAILY_LOG,
    ),
    Template(
        id="project-plan",
        name="Project Plan",
        description="Plan and track project goals, timeline, and resources",
        icon="clipboard",
        is_default=True,
        content=PROJECT_PLAN,
    ),
)


class TemplateStore:
    """
    Built-in templates plus custom ones stored as <root>/templates/<id>.json.

    Built-ins always win on lookup and can never be overwritten, modified
    or deleted.
    """

    def __init__(self, root: Path):
        self.root = root

    def _path(self, id: str) -> Path:
        return self.root / f"{id}{TEMPLATE_SUFFIX}"

    @staticmethod
    def _default(id: str) -> Template | None:
        return next((t for t in DEFAULT_TEMPLATES if t.id == id), None)

    def _load(self, path: Path) -> Template:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to read template", path, e) from e
        except ValueError as e:
            raise NoteIOError("Failed to parse template", path, str(e)) from e
        try:
            return Template.from_dict(data)
        except (KeyError, TypeError) as e:
            raise NoteIOError("Invalid template", path, f"missing field {e}") from e

    def _write(self, template: Template) -> None:
        path = self._path(template.id)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(template.as_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to write template", path, e) from e

    def list_templates(self) -> list[Template]:
        """Built-ins first, then every custom template that loads cleanly."""
        templates = list(DEFAULT_TEMPLATES)
        if not self.root.exists():
            return templates

        for path in sorted(self.root.glob(f"*{TEMPLATE_SUFFIX}")):
            try:
                templates.append(self._load(path))
            except NoteIOError as e:
                log.warning("Skipping template: %s", e)
        return templates

    def get_template(self, id: str) -> Template:
        default = self._default(id)
        if default is not None:
            return default

        path = self._path(id)
        if not path.exists():
            raise TemplateNotFoundError(id)
        return self._load(path)

    def save_template(self, name: str, description: str, icon: str, content: str) -> Template:
        """Store a new custom template; its id is derived from `name`."""
        id = template_id(name)
        if self._path(id).exists():
            raise TemplateExistsError(name)
        if self._default(id) is not None:
            raise DefaultTemplateError("Cannot overwrite a default template")

        template = Template(
            id=id,
            name=name,
            description=description,
            icon=icon,
            is_default=False,
            content=content,
        )
        self._write(template)
        log.info("Saved template %s", id)
        return template

    def update_template(
        self, id: str, name: str, description: str, icon: str, content: str
    ) -> Template:
        if self._default(id) is not None:
            raise DefaultTemplateError("Cannot modify a default template")
        if not self._path(id).exists():
            raise TemplateNotFoundError(id)

        template = Template(
            id=id,
            name=name,
            description=description,
            icon=icon,
            is_default=False,
            content=content,
        )
        self._write(template)
        return template

    def delete_template(self, id: str) -> None:
        """Remove a custom template; missing ids are ignored."""
        if self._default(id) is not None:
            raise DefaultTemplateError("Cannot delete a default template")

        path = self._path(id)
        if not path.exists():
            return
        try:
            path.unlink()
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to delete template", path, e) from e
        log.info("Deleted template %s", id)

    def apply_template(self, id: str) -> str:
        """Template body as it would be written into a note."""
        return self.get_template(id).content

    def create_note_from_template(
        self, notes: WritableNoteStore, filename: str, id: str, is_daily: bool
    ) -> None:
        """Create `filename` with the template body; never overwrites a note."""
        content = self.apply_template(id)
        notes.create_note_file(DAILY if is_daily else STANDALONE, filename, content)
        log.info("Created note %s from template %s", filename, id)
