"""Notomattic: plain-text daily and standalone notes with wiki links."""

__version__ = "0.1.0"
