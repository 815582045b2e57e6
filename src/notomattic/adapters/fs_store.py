import logging
from pathlib import Path
from typing import Iterable

from ..core.errors import NoteExistsError, NoteIOError, NoteNotFoundError
from ..core.model import DAILY, NOTE_SUFFIX, STANDALONE, NoteFile, NoteKind
from ..core.ports import WritableNoteStore

log = logging.getLogger(__name__)


class FsNoteStore(WritableNoteStore):
    """
    Notes on disk:
        <root>/daily/YYYY-MM-DD.md
        <root>/notes/<slug>.md
    """

    def __init__(self, root: Path, daily_dir: str = "daily", standalone_dir: str = "notes"):
        self.root = root
        self.dirnames: dict[str, str] = {DAILY: daily_dir, STANDALONE: standalone_dir}

    def dir(self, kind: NoteKind) -> Path:
        return self.root / self.dirnames[kind]

    def _path(self, kind: NoteKind, filename: str) -> Path:
        return self.dir(kind) / filename

    @staticmethod
    def _kind(is_daily: bool) -> NoteKind:
        return DAILY if is_daily else STANDALONE

    # NoteStore port

    def list_note_files(self, kind: NoteKind) -> Iterable[str]:
        d = self.dir(kind)
        if not d.exists():
            return []
        try:
            paths = list(d.iterdir())
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to read directory", d, e) from e
        return [p.name for p in paths if p.suffix == NOTE_SUFFIX and p.is_file()]

    def read_note_text(self, kind: NoteKind, filename: str) -> str:
        p = self._path(kind, filename)
        try:
            return p.read_text(encoding="utf-8")
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to read file", p, e) from e
        except UnicodeDecodeError as e:
            raise NoteIOError("Failed to read file", p, str(e)) from e

    def file_exists(self, kind: NoteKind, filename: str) -> bool:
        return self._path(kind, filename).exists()

    def create_note_file(self, kind: NoteKind, filename: str, contents: str) -> None:
        d = self.dir(kind)
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to create directory", d, e) from e

        p = d / filename
        try:
            with open(p, "x", encoding="utf-8") as f:
                f.write(contents)
        except FileExistsError as e:
            raise NoteExistsError(filename) from e
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to create note", p, e) from e

    # CRUD used by the CLI and API

    def ensure_directories(self) -> None:
        for d in (self.root, self.dir(DAILY), self.dir(STANDALONE)):
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise NoteIOError.from_os_error("Failed to create directory", d, e) from e

    def list_notes(self) -> list[NoteFile]:
        notes = []
        for kind in (DAILY, STANDALONE):
            is_daily = kind == DAILY
            for name in self.list_note_files(kind):
                notes.append(
                    NoteFile(
                        name=name,
                        path=f"{self.dirnames[kind]}/{name}",
                        is_daily=is_daily,
                        date=name[: -len(NOTE_SUFFIX)] if is_daily else None,
                    )
                )
        return notes

    def read_note(self, filename: str, is_daily: bool) -> str:
        """Note contents, or "" for a note that has not been written yet."""
        kind = self._kind(is_daily)
        if not self.file_exists(kind, filename):
            return ""
        return self.read_note_text(kind, filename)

    def write_note(self, filename: str, contents: str, is_daily: bool) -> None:
        p = self._path(self._kind(is_daily), filename)
        try:
            p.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to write file", p, e) from e

    def delete_note(self, filename: str, is_daily: bool) -> None:
        p = self._path(self._kind(is_daily), filename)
        if not p.exists():
            return
        try:
            p.unlink()
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to delete file", p, e) from e
        log.info("Deleted %s", p)

    def create_note(self, title: str) -> str:
        """Create an empty standalone note named `<title>.md`."""
        filename = f"{title}{NOTE_SUFFIX}"
        self.create_note_file(STANDALONE, filename, "")
        return filename

    def rename_note(self, old: str, new: str, is_daily: bool) -> None:
        kind = self._kind(is_daily)
        src = self._path(kind, old)
        dst = self._path(kind, new)
        if not src.exists():
            raise NoteNotFoundError(f"Note '{old}' not found")
        if dst.exists():
            raise NoteExistsError(new)
        try:
            src.rename(dst)
        except OSError as e:
            raise NoteIOError.from_os_error("Failed to rename file", src, e) from e
        log.info("Renamed %s -> %s", src, dst)

    def clear_all_notes(self) -> None:
        for kind in (DAILY, STANDALONE):
            for name in self.list_note_files(kind):
                p = self._path(kind, name)
                try:
                    p.unlink()
                except OSError as e:
                    raise NoteIOError.from_os_error("Failed to delete file", p, e) from e
