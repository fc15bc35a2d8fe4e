"""Edit session: dispatches key events and drives one render per event.

The session owns the row store, the cursor/viewport and the status
message. It never touches the terminal or the filesystem directly; frames
go to a ``sink`` callable and files go through a ``FileStore``.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Optional

from .constants import EditorConstants
from .cursor import CursorViewport, Direction
from .errors import FileIOError, NoFileNameError
from .fileio import FileStore
from .keyboard import KeyCode, KeyEvent, Modifier
from .renderer import FrameRenderer
from .rows import RowStore
from .settings import EditorSettings
from .status import StatusMessage

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    QUITTING = "quitting"


_ARROWS = {
    KeyCode.UP: Direction.UP,
    KeyCode.DOWN: Direction.DOWN,
    KeyCode.LEFT: Direction.LEFT,
    KeyCode.RIGHT: Direction.RIGHT,
    KeyCode.HOME: Direction.HOME,
    KeyCode.END: Direction.END,
}


class EditSession:
    """Single-buffer editing state machine.

    Args:
        rows: Buffer contents; an empty store when omitted.
        filename: Path the buffer is saved to, or None for an unnamed buffer.
        files: File collaborator used by save.
        renderer: Builds frames from the session state.
        sink: Receives each rendered frame; called once per processed key.
        screen_size: ``(columns, rows)`` of the terminal, including the two
            bottom rows reserved for the status and message bars.
        settings: Tunables (quit confirmations, message timeout).
        clock: Time source for status message expiry.
    """

    def __init__(self, rows: Optional[RowStore] = None, filename: Optional[str] = None,
                 files: Optional[FileStore] = None,
                 renderer: Optional[FrameRenderer] = None,
                 sink: Optional[Callable[[str], None]] = None,
                 screen_size: tuple[int, int] = (80, 24),
                 settings: Optional[EditorSettings] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.settings = settings or EditorSettings()
        self.rows = rows if rows is not None else RowStore(tab_stop=self.settings.tab_stop)
        self.filename = filename
        self.files = files or FileStore()
        self.renderer = renderer
        self.sink = sink
        columns, height = screen_size
        self.viewport = CursorViewport(columns, height - EditorConstants.STATUS_BAR_ROWS)
        self.status = StatusMessage(timeout=self.settings.message_timeout, clock=clock)
        self.status.set(EditorConstants.HELP_MESSAGE)
        self.dirty = 0
        self.quit_remaining = self.settings.quit_times
        self.state = SessionState.RUNNING

    @classmethod
    def open(cls, path: str, files: Optional[FileStore] = None,
             settings: Optional[EditorSettings] = None, **kwargs) -> "EditSession":
        """Create a session for ``path``.

        A missing file gives an empty buffer bound to ``path``. Other read
        failures (``FileIOError``, ``DecodeError``) propagate.
        """
        files = files or FileStore()
        settings = settings or EditorSettings()
        try:
            text = files.read_text(path)
        except FileNotFoundError:
            logger.info(f"{path} does not exist, starting a new file")
            text = ""
        rows = RowStore.from_text(text, tab_stop=settings.tab_stop)
        logger.debug(f"Loaded {rows.row_count()} rows from {path}")
        return cls(rows=rows, filename=path, files=files, settings=settings, **kwargs)

    @property
    def cursor(self):
        return self.viewport.cursor

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def resize(self, columns: int, height: int) -> None:
        self.viewport.resize(columns, height - EditorConstants.STATUS_BAR_ROWS)

    # --- Event loop entry points ---
    def step(self, event: Optional[KeyEvent]) -> SessionState:
        """Process one polled event and render the resulting frame.

        ``None`` means the poll timed out: nothing is processed and no
        frame is produced.
        """
        if event is None:
            return self.state
        self.process_key(event)
        self.refresh()
        return self.state

    def refresh(self) -> str:
        """Render the current state and hand the frame to the sink."""
        if self.renderer is None:
            raise RuntimeError("EditSession has no renderer")
        frame = self.renderer.render(self.rows, self.viewport, self.status,
                                     self.dirty, self.filename)
        if self.sink is not None:
            self.sink(frame)
        return frame

    def process_key(self, event: KeyEvent) -> SessionState:
        code, mods = event.code, event.modifiers

        if event.is_ctrl('q'):
            self._quit()
            return self.state

        # Any activity other than quit cancels a pending quit
        self.quit_remaining = self.settings.quit_times

        if event.is_ctrl('s'):
            self.save()
        elif code in _ARROWS and mods is not Modifier.CONTROL:
            self.viewport.move(_ARROWS[code], self.rows)
        elif code is KeyCode.PAGE_UP and mods is not Modifier.CONTROL:
            self.viewport.page(Direction.UP, self.viewport.screen_rows, self.rows)
        elif code is KeyCode.PAGE_DOWN and mods is not Modifier.CONTROL:
            self.viewport.page(Direction.DOWN, self.viewport.screen_rows, self.rows)
        elif code is KeyCode.BACKSPACE:
            self.delete_backward()
        elif code is KeyCode.DELETE:
            self.delete_forward()
        elif code is KeyCode.ENTER and mods is Modifier.NONE:
            self.insert_newline()
        elif code is KeyCode.TAB and mods is Modifier.NONE:
            self.insert_char('\t')
        elif code is KeyCode.CHAR and mods in (Modifier.NONE, Modifier.SHIFT) and event.char:
            self.insert_char(event.char)
        # Everything else is a no-op
        return self.state

    # --- Commands ---
    def _quit(self) -> None:
        if self.dirty:
            self.quit_remaining -= 1
            if self.quit_remaining > 0:
                self.status.set(EditorConstants.UNSAVED_QUIT_MESSAGE.format(self.quit_remaining))
                return
            logger.info(f"Quitting with {self.dirty} unsaved changes")
        self.state = SessionState.QUITTING

    def insert_char(self, char: str) -> None:
        cursor = self.cursor
        if cursor.row == self.rows.row_count():
            self.rows.insert_row(cursor.row)
        self.rows.insert_char(cursor.row, cursor.column, char)
        cursor.column += 1
        self.dirty += 1

    def insert_newline(self) -> None:
        cursor = self.cursor
        self.rows.split_or_append_row(cursor.row, cursor.column)
        cursor.row += 1
        cursor.column = 0
        self.dirty += 1

    def delete_backward(self) -> None:
        cursor = self.cursor
        if cursor.row == self.rows.row_count():
            return
        if cursor.row == 0 and cursor.column == 0:
            return
        if cursor.column > 0:
            self.rows.delete_char(cursor.row, cursor.column - 1)
            cursor.column -= 1
        else:
            join_point = self.rows.row_length(cursor.row - 1)
            self.rows.join_row(cursor.row)
            cursor.row -= 1
            cursor.column = join_point
        self.dirty += 1

    def delete_forward(self) -> None:
        before = (self.cursor.row, self.cursor.column)
        self.viewport.move(Direction.RIGHT, self.rows)
        if (self.cursor.row, self.cursor.column) != before:
            self.delete_backward()

    def save(self) -> bool:
        """Write the buffer to its file.

        Failures are reported in the status bar; the buffer and the dirty
        counter are left untouched.

        Returns:
            True if the buffer was written.
        """
        try:
            written = self._write()
        except NoFileNameError:
            self.status.set(EditorConstants.NO_FILE_NAME_MESSAGE)
            return False
        except FileIOError as e:
            self.status.set(EditorConstants.SAVE_ERROR_MESSAGE.format(e.reason))
            return False
        self.dirty = 0
        self.status.set(EditorConstants.SAVED_MESSAGE.format(written))
        return True

    def _write(self) -> int:
        if not self.filename:
            raise NoFileNameError()
        written = self.files.write_text(self.filename, self.rows.to_text())
        logger.info(f"Saved {written} bytes to {self.filename}")
        return written
