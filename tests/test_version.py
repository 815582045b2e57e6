"""Tests for version information."""

import pytest

from notomattic.cli import main


def test_version_flag(capsys):
    """Test that --version flag works and shows version."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "notomattic" in out
    assert "python" in out
    assert "platform" in out


def test_version_module():
    """Test that version is accessible from module."""
    from notomattic import __version__

    assert __version__
    assert isinstance(__version__, str)
    parts = __version__.split('.')
    assert len(parts) >= 2
