"""Row storage with a tab-expanded render cache per row."""

from dataclasses import dataclass
from typing import Iterable

from .constants import EditorConstants


def render_row(raw: str, tab_stop: int = EditorConstants.TAB_STOP) -> str:
    """Expand tabs in ``raw`` to spaces up to the next tab stop.

    A tab always emits at least one space and then continues until the
    running column is a multiple of ``tab_stop``. Every other character
    passes through and advances the column by one.
    """
    out: list[str] = []
    column = 0
    for ch in raw:
        if ch == '\t':
            out.append(' ')
            column += 1
            while column % tab_stop != 0:
                out.append(' ')
                column += 1
        else:
            out.append(ch)
            column += 1
    return ''.join(out)


@dataclass
class Row:
    raw: str = ""
    rendered: str = ""


class RowStore:
    """Ordered rows of text, each with a cached rendered form.

    Every mutation rebuilds the rendered form of the rows it touched from
    scratch; the cache is never patched incrementally.
    """

    def __init__(self, rows: Iterable[str] = (), tab_stop: int = EditorConstants.TAB_STOP,
                 trailing_newline: bool = False):
        self.tab_stop = tab_stop
        self.trailing_newline = trailing_newline
        self._rows: list[Row] = [self._make_row(text) for text in rows]

    @classmethod
    def load(cls, lines: Iterable[str], tab_stop: int = EditorConstants.TAB_STOP) -> "RowStore":
        return cls(lines, tab_stop=tab_stop)

    @classmethod
    def from_text(cls, text: str, tab_stop: int = EditorConstants.TAB_STOP) -> "RowStore":
        """Build a store from file contents.

        Lines are separated by ``\\n``; a trailing ``\\r`` on each line is
        dropped. A final newline terminates the last line rather than
        starting an empty one, and is remembered for ``to_text``. Empty text
        gives an empty store.
        """
        trailing_newline = text.endswith('\n')
        if trailing_newline:
            text = text[:-1]
        elif not text:
            return cls(tab_stop=tab_stop)
        lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
        return cls(lines, tab_stop=tab_stop, trailing_newline=trailing_newline)

    def _make_row(self, raw: str) -> Row:
        return Row(raw=raw, rendered=render_row(raw, self.tab_stop))

    def _update_row(self, row: Row, raw: str) -> None:
        row.raw = raw
        row.rendered = render_row(raw, self.tab_stop)

    def _row(self, at: int) -> Row:
        if not 0 <= at < len(self._rows):
            raise IndexError(f"row {at} out of range (0..{len(self._rows) - 1})")
        return self._rows[at]

    # --- Read accessors ---
    def row_count(self) -> int:
        return len(self._rows)

    def raw(self, at: int) -> str:
        return self._row(at).raw

    def rendered(self, at: int) -> str:
        return self._row(at).rendered

    def row_length(self, at: int) -> int:
        """Length of row ``at`` in characters, or 0 past the last row."""
        if at == len(self._rows):
            return 0
        return len(self._row(at).raw)

    # --- Character edits ---
    def insert_char(self, row_index: int, column: int, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        row = self._row(row_index)
        if not 0 <= column <= len(row.raw):
            raise IndexError(f"column {column} out of range for row {row_index}")
        self._update_row(row, row.raw[:column] + char + row.raw[column:])

    def delete_char(self, row_index: int, column: int) -> None:
        row = self._row(row_index)
        if not 0 <= column < len(row.raw):
            raise IndexError(f"column {column} out of range for row {row_index}")
        self._update_row(row, row.raw[:column] + row.raw[column + 1:])

    # --- Row edits ---
    def insert_row(self, at: int, text: str = "") -> None:
        if not 0 <= at <= len(self._rows):
            raise IndexError(f"cannot insert row at {at}")
        self._rows.insert(at, self._make_row(text))

    def split_or_append_row(self, row_index: int, column: int = 0) -> None:
        """Break row ``row_index`` at ``column``.

        The text after ``column`` becomes a new row just below. At
        ``row_index == row_count`` an empty row is appended instead.
        """
        if row_index == len(self._rows):
            self.insert_row(row_index)
            return
        row = self._row(row_index)
        if not 0 <= column <= len(row.raw):
            raise IndexError(f"column {column} out of range for row {row_index}")
        head, tail = row.raw[:column], row.raw[column:]
        self._update_row(row, head)
        self._rows.insert(row_index + 1, self._make_row(tail))

    def join_row(self, at: int) -> None:
        """Remove row ``at`` and append its text to row ``at - 1``."""
        if at == 0:
            raise IndexError("cannot join row 0 with a previous row")
        row = self._row(at)
        previous = self._rows[at - 1]
        del self._rows[at]
        self._update_row(previous, previous.raw + row.raw)

    # --- Serialization ---
    def to_text(self) -> str:
        text = '\n'.join(row.raw for row in self._rows)
        return text + '\n' if self.trailing_newline else text

    def lines(self) -> list[str]:
        return [row.raw for row in self._rows]
