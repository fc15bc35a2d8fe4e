"""Tests for frame rendering."""

from tildepad.cursor import CursorPosition, CursorViewport
from tildepad.renderer import FrameRenderer
from tildepad.rows import RowStore
from tildepad.status import StatusMessage

HEADER = '<hide><home>'


def render(fake_term, clock, lines, columns=40, rows=5, cursor=(0, 0),
           message=None, dirty=0, filename=None):
    store = RowStore.load(lines)
    viewport = CursorViewport(columns, rows)
    viewport.cursor = CursorPosition(*cursor)
    status = StatusMessage(clock=clock)
    if message:
        status.set(message)
    frame = FrameRenderer(fake_term, version="1.0").render(store, viewport, status, dirty, filename)
    return frame, viewport


def screen_lines(frame):
    assert frame.startswith(HEADER)
    return frame[len(HEADER):].split('\r\n')


def test_frame_starts_hidden_and_ends_with_cursor_shown(fake_term, clock):
    frame, _ = render(fake_term, clock, ["abc"], cursor=(0, 2))
    assert frame.startswith(HEADER)
    assert frame.endswith('<move 0,2><show>')


def test_welcome_banner_on_empty_buffer(fake_term, clock):
    frame, _ = render(fake_term, clock, [])
    lines = screen_lines(frame)
    assert lines[0] == '~<eol>'
    assert lines[1] == '~<eol>'
    assert lines[2] == '~    Tildepad editor -- version 1.0<eol>'
    assert lines[3] == '~<eol>'
    assert lines[4] == '~<eol>'


def test_welcome_banner_truncated_to_width(fake_term, clock):
    frame, _ = render(fake_term, clock, [], columns=8)
    assert screen_lines(frame)[2] == 'Tildepad<eol>'


def test_no_banner_when_buffer_has_rows(fake_term, clock):
    frame, _ = render(fake_term, clock, ["a"], rows=3)
    lines = screen_lines(frame)
    assert lines[:3] == ['a<eol>', '~<eol>', '~<eol>']
    assert 'Tildepad editor' not in frame


def test_rows_show_rendered_text(fake_term, clock):
    frame, _ = render(fake_term, clock, ["\tx"])
    assert screen_lines(frame)[0] == '        x<eol>'


def test_horizontal_scroll_slices_rendered_row(fake_term, clock):
    frame, viewport = render(fake_term, clock, ["0123456789abcdef", "short"],
                             columns=10, rows=3, cursor=(0, 15))
    lines = screen_lines(frame)
    assert viewport.column_offset == 6
    assert lines[0] == '6789abcdef<eol>'
    # Shorter rows clip to what is left after the offset
    assert lines[1] == '<eol>'
    assert frame.endswith('<move 0,9><show>')


def test_vertical_scroll_shows_rows_from_offset(fake_term, clock):
    lines_in = [f"row {i}" for i in range(10)]
    frame, viewport = render(fake_term, clock, lines_in, rows=3, cursor=(7, 0))
    lines = screen_lines(frame)
    assert viewport.row_offset == 5
    assert lines[:3] == ['row 5<eol>', 'row 6<eol>', 'row 7<eol>']
    assert frame.endswith('<move 2,0><show>')


def test_status_bar_shows_name_modified_and_position(fake_term, clock):
    frame, _ = render(fake_term, clock, ["one", "two"], filename="/tmp/notes.txt", dirty=2)
    bar = screen_lines(frame)[5]
    assert bar == '<rev>notes.txt - 2 lines (modified)       1/2<norm>'


def test_status_bar_for_unnamed_clean_buffer(fake_term, clock):
    frame, _ = render(fake_term, clock, [])
    bar = screen_lines(frame)[5]
    assert bar.startswith('<rev>[No Name] - 0 lines ')
    assert bar.endswith('1/0<norm>')
    assert '(modified)' not in bar


def test_status_bar_drops_position_when_too_narrow(fake_term, clock):
    frame, _ = render(fake_term, clock, ["a"], columns=12, filename="document.txt")
    bar = screen_lines(frame)[5]
    assert bar == '<rev>document.txt<norm>'


def test_message_bar_shows_live_message(fake_term, clock):
    frame, _ = render(fake_term, clock, ["a"], message="hello")
    assert screen_lines(frame)[6] == '<eol>hello<move 0,0><show>'


def test_message_bar_clips_to_width(fake_term, clock):
    frame, _ = render(fake_term, clock, ["a"], columns=10, message="abcdefghijklmnop")
    assert screen_lines(frame)[6].startswith('<eol>abcdefghij<move')


def test_message_bar_blank_after_expiry(fake_term, clock):
    store = RowStore.load(["a"])
    viewport = CursorViewport(40, 5)
    status = StatusMessage(timeout=5, clock=clock)
    status.set("old news")
    clock.advance(6)
    frame = FrameRenderer(fake_term).render(store, viewport, status, 0, None)
    assert screen_lines(frame)[6] == '<eol><move 0,0><show>'


def test_frame_has_one_line_per_screen_row_plus_bars(fake_term, clock):
    frame, _ = render(fake_term, clock, ["a", "b"], rows=7)
    assert len(screen_lines(frame)) == 7 + 2
