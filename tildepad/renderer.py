"""Frame rendering: editor state to one batch of terminal output."""

import os
from typing import Optional

from .constants import EditorConstants
from .cursor import CursorViewport
from .rows import RowStore
from .status import StatusMessage


class FrameRenderer:
    """Builds a complete screen frame as a single string.

    ``term`` supplies the control sequences; in the editor it is a
    ``blessed.Terminal``, but anything with the same capability
    attributes works (``hide_cursor``, ``home``, ``clear_eol``,
    ``reverse``, ``normal``, ``normal_cursor`` and ``move_yx()``).
    """

    def __init__(self, term, version: str = ""):
        self.term = term
        self.version = version

    def render(self, rows: RowStore, viewport: CursorViewport, status: StatusMessage,
               dirty: int, filename: Optional[str]) -> str:
        viewport.recompute_scroll(rows)
        out: list[str] = [self.term.hide_cursor, self.term.home]
        self._draw_rows(out, rows, viewport)
        self._draw_status_bar(out, rows, viewport, dirty, filename)
        self._draw_message_bar(out, viewport, status)
        x, y = viewport.screen_position(rows)
        out.append(self.term.move_yx(y, x))
        out.append(self.term.normal_cursor)
        return ''.join(out)

    def _welcome_line(self, width: int) -> str:
        welcome = EditorConstants.WELCOME_MESSAGE.format(self.version)[:width]
        padding = (width - len(welcome)) // 2
        if padding == 0:
            return welcome
        return EditorConstants.FILLER_ROW + ' ' * (padding - 1) + welcome

    def _draw_rows(self, out: list[str], rows: RowStore, viewport: CursorViewport) -> None:
        width = viewport.screen_columns
        row_count = rows.row_count()
        for y in range(viewport.screen_rows):
            file_row = y + viewport.row_offset
            if file_row >= row_count:
                if row_count == 0 and y == viewport.screen_rows // 2:
                    out.append(self._welcome_line(width))
                else:
                    out.append(EditorConstants.FILLER_ROW)
            else:
                start = viewport.column_offset
                out.append(rows.rendered(file_row)[start:start + width])
            out.append(self.term.clear_eol)
            out.append('\r\n')

    def _draw_status_bar(self, out: list[str], rows: RowStore, viewport: CursorViewport,
                         dirty: int, filename: Optional[str]) -> None:
        width = viewport.screen_columns
        name = os.path.basename(filename) if filename else EditorConstants.NO_NAME
        modified = " (modified)" if dirty else ""
        left = f"{name[:20]} - {rows.row_count()} lines{modified}"[:width]
        right = f"{viewport.cursor.row + 1}/{rows.row_count()}"
        if len(left) + len(right) <= width:
            bar = left + ' ' * (width - len(left) - len(right)) + right
        else:
            bar = left.ljust(width)
        out.append(self.term.reverse + bar + self.term.normal)
        out.append('\r\n')

    def _draw_message_bar(self, out: list[str], viewport: CursorViewport,
                          status: StatusMessage) -> None:
        out.append(self.term.clear_eol)
        message = status.current()
        if message:
            out.append(message[:viewport.screen_columns])
