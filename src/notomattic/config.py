"""Configuration loader for notomattic.toml."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_FILENAME = "notomattic.toml"
ROOT_ENV = "NOTOMATTIC_ROOT"


def default_root() -> Path:
    """~/Documents/Notomattic unless NOTOMATTIC_ROOT is set."""
    env = os.environ.get(ROOT_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / "Documents" / "Notomattic"


@dataclass
class NotesConfig:
    """Where notes live."""
    root: Path
    daily_dir: str = "daily"
    standalone_dir: str = "notes"
    templates_dir: str = "templates"


@dataclass
class ServerConfig:
    """Local JSON API settings."""
    host: str = "127.0.0.1"
    port: int = 8765


@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class NotomatticConfig:
    """Complete notomattic configuration."""
    notes: NotesConfig
    server: ServerConfig = field(default_factory=ServerConfig)
    log: LogConfig = field(default_factory=LogConfig)


def load_config(config_path: Path | None = None, root: Path | None = None) -> NotomatticConfig:
    """
    Load configuration from notomattic.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/notomattic.toml
    3. <notes root>/notomattic.toml

    Args:
        config_path: Explicit path to config file
        root: Notes root; overrides [notes].root from the file

    Returns:
        NotomatticConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)
    search_paths.append((root or default_root()) / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    notes_data = toml_data.get("notes", {})
    if root is None:
        root = Path(notes_data["root"]).expanduser() if "root" in notes_data else default_root()

    notes_config = NotesConfig(
        root=root,
        daily_dir=notes_data.get("daily_dir", "daily"),
        standalone_dir=notes_data.get("standalone_dir", "notes"),
        templates_dir=notes_data.get("templates_dir", "templates"),
    )

    server_data = toml_data.get("server", {})
    server_config = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=server_data.get("port", 8765),
    )

    log_data = toml_data.get("log", {})
    log_config = LogConfig(level=str(log_data.get("level", "INFO")).upper())

    return NotomatticConfig(
        notes=notes_config,
        server=server_config,
        log=log_config,
    )
