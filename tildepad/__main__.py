"""Tildepad CLI entry point.

Allows running via `python -m tildepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys

from .version import get_version_string

logger = logging.getLogger("tildepad")


def configure_logging() -> None:
    """Send log records to a file; the terminal belongs to the editor."""
    from .settings import log_dir

    level = logging.DEBUG if os.environ.get("TILDEPAD_DEBUG") else logging.WARNING
    directory = log_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(directory / "tildepad.log", encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print decoded key events until a plain 'q' is pressed."""
    from .keyboard import KeyboardHandler, KeyCode, Modifier
    from .settings import load_settings
    from .terminal import TerminalInterface

    settings = load_settings()
    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with q.")

    with TerminalInterface() as term:
        kb = KeyboardHandler(term)
        while True:
            ev = kb.get_key_event(timeout=settings.poll_timeout)
            if ev is None:
                continue
            if ev.code is KeyCode.CHAR and ev.char == 'q' and ev.modifiers is Modifier.NONE:
                break
            parts = [f"code={ev.code.value}", f"modifiers={ev.modifiers.value}"]
            if ev.char is not None:
                parts.append(f"char={ev.char!r}")
            parts.append(f"raw='{_escape_bytes(ev.raw)}'")
            print(' '.join(parts), end='\r\n', flush=True)


def main() -> None:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return

    configure_logging()
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .errors import EditorError

    editor = Editor()
    if args:
        try:
            editor.load_file(args[0])
        except EditorError as e:
            logger.error(f"Error loading file: {e}")
            print(f"Error loading file: {e}", file=sys.stderr)
            sys.exit(1)
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
