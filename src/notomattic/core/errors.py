"""Errors raised by note operations."""

from pathlib import Path


class NoteError(Exception):
    """Base class for note store failures."""

    pass


class NoteNotFoundError(NoteError):
    """Raised when an operation needs a note that does not exist."""

    pass


class NoteExistsError(NoteError):
    """Raised when creating or renaming onto a filename that is taken."""

    def __init__(self, filename: str):
        super().__init__(f"Note '{filename}' already exists")
        self.filename = filename


class NoteIOError(NoteError):
    """Raised when a directory or file operation fails.

    Carries the offending path and the text of the underlying OS error.
    """

    def __init__(self, action: str, path: Path | str, reason: str):
        super().__init__(f"{action} {path}: {reason}")
        self.action = action
        self.path = Path(path)
        self.reason = reason

    @classmethod
    def from_os_error(cls, action: str, path: Path | str, err: OSError) -> "NoteIOError":
        return cls(action, path, err.strerror or str(err))


class TemplateNotFoundError(NoteNotFoundError):
    def __init__(self, template_id: str):
        super().__init__(f"Template '{template_id}' not found")
        self.template_id = template_id


class TemplateExistsError(NoteExistsError):
    def __init__(self, name: str):
        NoteError.__init__(self, f"A template with the name '{name}' already exists")
        self.filename = name


class DefaultTemplateError(NoteError):
    """Raised on attempts to overwrite, modify or delete a built-in template."""

    pass
