"""Cursor position and the scrolled viewport onto the row store."""

from dataclasses import dataclass
from enum import Enum

from .rows import RowStore, render_row


class Direction(Enum):
    """Single-step cursor movements."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


class CursorViewport:
    """Logical cursor plus the window of screen cells that shows it.

    ``cursor.column`` indexes raw characters; ``render_x`` is the same
    position after tab expansion; the screen column subtracts
    ``column_offset`` from ``render_x``.
    """

    def __init__(self, screen_columns: int, screen_rows: int):
        self.cursor = CursorPosition()
        self.resize(screen_columns, screen_rows)
        self.row_offset = 0
        self.column_offset = 0

    def resize(self, screen_columns: int, screen_rows: int) -> None:
        self.screen_columns = max(1, screen_columns)
        self.screen_rows = max(1, screen_rows)

    def move(self, direction: Direction, rows: RowStore) -> None:
        cursor = self.cursor
        row_count = rows.row_count()
        if direction is Direction.UP:
            if cursor.row > 0:
                cursor.row -= 1
        elif direction is Direction.DOWN:
            if cursor.row < row_count:
                cursor.row += 1
        elif direction is Direction.LEFT:
            if cursor.column > 0:
                cursor.column -= 1
            elif cursor.row > 0:
                cursor.row -= 1
                cursor.column = rows.row_length(cursor.row)
        elif direction is Direction.RIGHT:
            if cursor.row < row_count:
                if cursor.column < rows.row_length(cursor.row):
                    cursor.column += 1
                elif cursor.row + 1 < row_count:
                    cursor.row += 1
                    cursor.column = 0
        elif direction is Direction.HOME:
            cursor.column = 0
        elif direction is Direction.END:
            if cursor.row < row_count:
                cursor.column = rows.row_length(cursor.row)

        # Snap to the end of a shorter target row
        cursor.column = min(cursor.column, rows.row_length(cursor.row))

    def page(self, direction: Direction, page_size: int, rows: RowStore) -> None:
        """Jump to the viewport edge, then step ``page_size`` rows.

        ``direction`` is ``Direction.UP`` for PageUp and ``Direction.DOWN``
        for PageDown.
        """
        if direction is Direction.UP:
            self.cursor.row = self.row_offset
        elif direction is Direction.DOWN:
            self.cursor.row = min(self.row_offset + self.screen_rows - 1, rows.row_count())
        else:
            raise ValueError(f"cannot page {direction.value}")
        for _ in range(page_size):
            self.move(direction, rows)

    def render_x(self, rows: RowStore) -> int:
        if self.cursor.row >= rows.row_count():
            return 0
        prefix = rows.raw(self.cursor.row)[:self.cursor.column]
        return len(render_row(prefix, rows.tab_stop))

    def recompute_scroll(self, rows: RowStore) -> None:
        """Scroll so the cursor is inside the visible window."""
        row = self.cursor.row
        self.row_offset = min(self.row_offset, row)
        if row >= self.row_offset + self.screen_rows:
            self.row_offset = row - self.screen_rows + 1

        render_x = self.render_x(rows)
        self.column_offset = min(self.column_offset, render_x)
        if render_x >= self.column_offset + self.screen_columns:
            self.column_offset = render_x - self.screen_columns + 1

    def screen_position(self, rows: RowStore) -> tuple[int, int]:
        """Return ``(x, y)`` of the cursor relative to the viewport."""
        return (self.render_x(rows) - self.column_offset, self.cursor.row - self.row_offset)
