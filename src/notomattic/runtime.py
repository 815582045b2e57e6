"""Runtime wiring helper for the CLI and API."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_store import FsNoteStore
from .adapters.template_store import TemplateStore
from .config import NotomatticConfig, load_config
from .core.notebook import Notebook


@dataclass
class Runtime:
    """Container for all wired components."""
    store: FsNoteStore
    notebook: Notebook
    templates: TemplateStore
    config: NotomatticConfig


def build_runtime(root: Path | None = None, config_path: Path | None = None) -> Runtime:
    """Build and wire all components for a notes root."""
    config = load_config(config_path=config_path, root=root)

    store = FsNoteStore(
        config.notes.root,
        daily_dir=config.notes.daily_dir,
        standalone_dir=config.notes.standalone_dir,
    )
    notebook = Notebook(store)
    templates = TemplateStore(config.notes.root / config.notes.templates_dir)

    return Runtime(store=store, notebook=notebook, templates=templates, config=config)
