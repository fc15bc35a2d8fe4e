"""Tildepad - A small terminal text editor."""

from .rows import Row, RowStore, render_row
from .cursor import CursorPosition, CursorViewport, Direction
from .status import StatusMessage
from .renderer import FrameRenderer
from .session import EditSession, SessionState

__all__ = [
    'Row',
    'RowStore',
    'render_row',
    'CursorPosition',
    'CursorViewport',
    'Direction',
    'StatusMessage',
    'FrameRenderer',
    'EditSession',
    'SessionState',
]
