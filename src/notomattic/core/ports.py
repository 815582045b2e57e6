from typing import Iterable, Protocol

from .model import NoteKind


class NoteStore(Protocol):
    """
    Read side of the note corpus as seen by the wiki-link core.
    Two flat directories: daily notes and standalone notes.
    """

    def list_note_files(self, kind: NoteKind) -> Iterable[str]:
        """Yield ``.md`` filenames; order unspecified. Missing dir yields nothing."""
        pass

    def read_note_text(self, kind: NoteKind, filename: str) -> str:
        """Raise NoteIOError when the file cannot be read."""
        pass

    def file_exists(self, kind: NoteKind, filename: str) -> bool:
        pass


class WritableNoteStore(NoteStore, Protocol):
    def create_note_file(self, kind: NoteKind, filename: str, contents: str) -> None:
        """Create a new note; raise NoteExistsError if it is already there."""
        pass
