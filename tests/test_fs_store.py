"""Tests for the filesystem note store."""

import tempfile
from pathlib import Path

import pytest

from notomattic.adapters.fs_store import FsNoteStore
from notomattic.core.errors import NoteExistsError, NoteIOError, NoteNotFoundError
from notomattic.core.model import DAILY, STANDALONE, NoteFile


@pytest.fixture
def store():
    """Create a store with both directories in place."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FsNoteStore(Path(tmpdir) / "Notomattic")
        store.ensure_directories()
        yield store


def test_ensure_directories():
    """Test root, daily and standalone directories are created."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "Notomattic"
        store = FsNoteStore(root)
        store.ensure_directories()
        store.ensure_directories()

        assert (root / "daily").is_dir()
        assert (root / "notes").is_dir()


def test_custom_directory_names():
    """Test configurable subdirectory names."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        store = FsNoteStore(root, daily_dir="journal", standalone_dir="pages")
        store.ensure_directories()
        store.write_note("x.md", "x", is_daily=False)

        assert (root / "pages" / "x.md").read_text(encoding="utf-8") == "x"
        assert store.list_notes()[0].path == "pages/x.md"


def test_list_note_files_filters(store):
    """Test only regular .md files are listed."""
    (store.dir(STANDALONE) / "a.md").write_text("", encoding="utf-8")
    (store.dir(STANDALONE) / "b.txt").write_text("", encoding="utf-8")
    (store.dir(STANDALONE) / "dir.md").mkdir()

    assert list(store.list_note_files(STANDALONE)) == ["a.md"]


def test_list_note_files_missing_dir():
    """Test a missing directory lists nothing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FsNoteStore(Path(tmpdir) / "nowhere")
        assert list(store.list_note_files(DAILY)) == []


def test_list_notes(store):
    """Test listing records, daily first."""
    store.write_note("2024-01-01.md", "", is_daily=True)
    store.write_note("idea.md", "", is_daily=False)

    assert store.list_notes() == [
        NoteFile(name="2024-01-01.md", path="daily/2024-01-01.md", is_daily=True, date="2024-01-01"),
        NoteFile(name="idea.md", path="notes/idea.md", is_daily=False, date=None),
    ]


def test_read_write_note(store):
    """Test round trip of note contents."""
    store.write_note("idea.md", "# Idea\nüñí", is_daily=False)

    assert store.read_note("idea.md", is_daily=False) == "# Idea\nüñí"
    assert store.read_note_text(STANDALONE, "idea.md") == "# Idea\nüñí"
    assert store.file_exists(STANDALONE, "idea.md")
    assert not store.file_exists(DAILY, "idea.md")


def test_read_note_missing(store):
    """Test unwritten notes read as empty."""
    assert store.read_note("2030-01-01.md", is_daily=True) == ""


def test_read_note_text_failure_names_path(store):
    """Test read errors are wrapped with the failing path."""
    (store.dir(STANDALONE) / "dir.md").mkdir()

    with pytest.raises(NoteIOError) as exc_info:
        store.read_note_text(STANDALONE, "dir.md")

    assert exc_info.value.path == store.dir(STANDALONE) / "dir.md"
    assert "dir.md" in str(exc_info.value)


def test_write_note_missing_dir():
    """Test writing into a missing directory surfaces an I/O error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FsNoteStore(Path(tmpdir) / "nowhere")
        with pytest.raises(NoteIOError):
            store.write_note("a.md", "a", is_daily=False)


def test_delete_note(store):
    """Test deleting a note, and deleting a missing note."""
    store.write_note("a.md", "a", is_daily=False)
    store.delete_note("a.md", is_daily=False)
    store.delete_note("a.md", is_daily=False)

    assert not store.file_exists(STANDALONE, "a.md")


def test_create_note(store):
    """Test creating an empty standalone note from a title."""
    assert store.create_note("My Title") == "My Title.md"
    assert store.read_note("My Title.md", is_daily=False) == ""

    with pytest.raises(NoteExistsError):
        store.create_note("My Title")


def test_create_note_file_makes_directory():
    """Test exclusive create makes the directory on demand."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FsNoteStore(Path(tmpdir))
        store.create_note_file(STANDALONE, "new.md", "# New\n\n")

        assert (Path(tmpdir) / "notes" / "new.md").read_text(encoding="utf-8") == "# New\n\n"


def test_create_note_file_does_not_overwrite(store):
    """Test an existing note is left untouched."""
    store.write_note("keep.md", "original", is_daily=False)

    with pytest.raises(NoteExistsError):
        store.create_note_file(STANDALONE, "keep.md", "replacement")

    assert store.read_note("keep.md", is_daily=False) == "original"


def test_rename_note(store):
    """Test renaming and its failure modes."""
    store.write_note("old.md", "x", is_daily=False)
    store.write_note("taken.md", "y", is_daily=False)

    with pytest.raises(NoteNotFoundError):
        store.rename_note("missing.md", "new.md", is_daily=False)
    with pytest.raises(NoteExistsError):
        store.rename_note("old.md", "taken.md", is_daily=False)

    store.rename_note("old.md", "new.md", is_daily=False)
    assert store.read_note("new.md", is_daily=False) == "x"
    assert not store.file_exists(STANDALONE, "old.md")


def test_clear_all_notes(store):
    """Test only .md files are removed from both directories."""
    store.write_note("2024-01-01.md", "", is_daily=True)
    store.write_note("a.md", "", is_daily=False)
    (store.dir(STANDALONE) / "keep.txt").write_text("", encoding="utf-8")

    store.clear_all_notes()

    assert store.list_notes() == []
    assert (store.dir(STANDALONE) / "keep.txt").exists()


def test_read_note_text_invalid_utf8(store):
    """Test undecodable notes raise an I/O error naming the file."""
    (store.dir(STANDALONE) / "bad.md").write_bytes(b"\xff\xfe [[Target]]")

    with pytest.raises(NoteIOError) as exc_info:
        store.read_note_text(STANDALONE, "bad.md")

    assert exc_info.value.path == store.dir(STANDALONE) / "bad.md"
    assert "bad.md" in str(exc_info.value)
