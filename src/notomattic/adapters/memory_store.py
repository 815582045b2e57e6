from typing import Iterable

from ..core.errors import NoteExistsError, NoteIOError
from ..core.model import DAILY, NOTE_SUFFIX, STANDALONE, NoteKind
from ..core.ports import WritableNoteStore


class MemoryNoteStore(WritableNoteStore):
    """Dict-backed store; keeps insertion order so scans are deterministic."""

    def __init__(self) -> None:
        self.notes: dict[str, dict[str, str]] = {DAILY: {}, STANDALONE: {}}
        self.unreadable: set[tuple[str, str]] = set()

    def add(self, kind: NoteKind, filename: str, contents: str = "") -> None:
        self.notes[kind][filename] = contents

    def list_note_files(self, kind: NoteKind) -> Iterable[str]:
        return [n for n in self.notes[kind] if n.endswith(NOTE_SUFFIX)]

    def read_note_text(self, kind: NoteKind, filename: str) -> str:
        if (kind, filename) in self.unreadable or filename not in self.notes[kind]:
            raise NoteIOError("Failed to read file", f"{kind}/{filename}", "unreadable")
        return self.notes[kind][filename]

    def file_exists(self, kind: NoteKind, filename: str) -> bool:
        return filename in self.notes[kind]

    def create_note_file(self, kind: NoteKind, filename: str, contents: str) -> None:
        if filename in self.notes[kind]:
            raise NoteExistsError(filename)
        self.notes[kind][filename] = contents
