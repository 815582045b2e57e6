"""Tests for configuration loading."""

import os
import tempfile
from pathlib import Path

import pytest

from notomattic.config import default_root, load_config


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Keep the user's environment and cwd out of config lookups."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.delenv("NOTOMATTIC_ROOT", raising=False)
        monkeypatch.setenv("HOME", tmpdir)
        monkeypatch.chdir(tmpdir)
        yield Path(tmpdir)


def test_load_config_defaults(isolated):
    """Test loading config with defaults when no file exists."""
    config = load_config()

    assert config.notes.root == isolated / "Documents" / "Notomattic"
    assert config.notes.daily_dir == "daily"
    assert config.notes.standalone_dir == "notes"
    assert config.notes.templates_dir == "templates"
    assert config.server.host == "127.0.0.1"
    assert config.server.port == 8765
    assert config.log.level == "INFO"


def test_default_root_env(monkeypatch):
    """Test NOTOMATTIC_ROOT overrides the default location."""
    monkeypatch.setenv("NOTOMATTIC_ROOT", "/srv/notes")
    assert default_root() == Path("/srv/notes")


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "notomattic.toml"
        config_path.write_text("""
[notes]
root = "my-notes"
daily_dir = "journal"
standalone_dir = "pages"
templates_dir = "blueprints"

[server]
host = "0.0.0.0"
port = 9000

[log]
level = "debug"
""")

        config = load_config(config_path=config_path)

        assert config.notes.root == Path("my-notes")
        assert config.notes.daily_dir == "journal"
        assert config.notes.standalone_dir == "pages"
        assert config.notes.templates_dir == "blueprints"
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert config.log.level == "DEBUG"


def test_root_argument_overrides_file():
    """Test an explicit root wins over [notes].root."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "notomattic.toml"
        config_path.write_text('[notes]\nroot = "from-file"\n')

        config = load_config(config_path=config_path, root=Path("explicit"))

        assert config.notes.root == Path("explicit")


def test_load_config_search_cwd():
    """Test config search in current working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            config_path = Path(tmpdir) / "notomattic.toml"
            config_path.write_text("""
[server]
port = 9100
""")

            config = load_config()
            assert config.server.port == 9100
        finally:
            os.chdir(orig_cwd)


def test_load_config_search_root():
    """Test config search in the notes root."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "notes-root"
        root.mkdir()
        (root / "notomattic.toml").write_text("""
[notes]
daily_dir = "days"
""")

        config = load_config(root=root)
        assert config.notes.root == root
        assert config.notes.daily_dir == "days"
