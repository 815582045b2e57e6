"""Filename helpers for notes."""

from .model import NOTE_SUFFIX


def slugify(text: str) -> str:
    """
    Convert a note name to the slug used for standalone filenames.

    - Lowercase
    - Trim surrounding whitespace
    - Replace each space with `-`
    - Drop every character that is neither alphanumeric nor `-`

    Unlike a URL slug this never collapses repeated dashes, and input with no
    alphanumeric characters yields the empty string.

    Examples:
        >>> slugify("Meeting Notes")
        'meeting-notes'
        >>> slugify("Hello, World!")
        'hello-world'
    """
    text = text.lower().strip().replace(" ", "-")
    return "".join(c for c in text if c.isalnum() or c == "-")


def note_name_to_filename(name: str) -> str:
    """ "Meeting Notes" -> "meeting-notes.md" """
    return f"{slugify(name)}{NOTE_SUFFIX}"


def daily_filename(name: str) -> str:
    return name if name.endswith(NOTE_SUFFIX) else f"{name}{NOTE_SUFFIX}"


def strip_note_suffix(filename: str) -> str:
    return filename[: -len(NOTE_SUFFIX)] if filename.endswith(NOTE_SUFFIX) else filename


def template_id(name: str) -> str:
    """
    Derive a template id from its display name.

    Non-alphanumerics become `-`, then runs of dashes collapse and edge
    dashes are dropped: "Weekly  Review!" -> "weekly-review".
    """
    mapped = "".join(c if c.isalnum() else "-" for c in name.lower())
    return "-".join(part for part in mapped.split("-") if part)
