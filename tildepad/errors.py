"""Exceptions raised by the editor core and its file collaborator."""

from typing import Optional


class EditorError(Exception):
    """Base class for user-facing editor errors."""


class NoFileNameError(EditorError):
    """Raised when saving a buffer that has no associated path."""

    def __init__(self):
        super().__init__("No file name")


class FileIOError(EditorError):
    """Raised when reading or writing a file fails.

    The underlying ``OSError`` is kept as ``__cause__``.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "I/O error"
        super().__init__(f"{path}: {self.reason}")


class DecodeError(EditorError):
    """Raised when file contents are not valid UTF-8 text."""

    def __init__(self, path: str, position: int):
        self.path = path
        self.position = position
        super().__init__(f"{path}: not valid UTF-8 text (byte {position})")
