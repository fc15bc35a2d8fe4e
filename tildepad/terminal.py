"""Terminal interface using Blessed for display and Curtsies for input."""

import signal
from typing import Optional

import blessed
from curtsies import Input


class TerminalInterface:
    """Owns the terminal for the lifetime of an editing session.

    Use as a context manager: entering switches to the fullscreen buffer
    and raw input mode; leaving clears the screen and restores the
    previous mode on every exit path, including exceptions and SIGTERM.
    """

    TERMINATING_SIGNALS = (signal.SIGTERM, signal.SIGHUP)

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._saved_handlers: dict = {}

    def __enter__(self) -> "TerminalInterface":
        try:
            self.setup()
        except BaseException:
            # __exit__ is not called when __enter__ raises
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.cleanup()

    def _handle_terminate(self, signum, frame):
        """Turn termination signals into SystemExit so cleanup runs."""
        del frame  # Unused
        raise SystemExit(128 + signum)

    def setup(self):
        """Enter fullscreen mode and raw input mode."""
        for sig in self.TERMINATING_SIGNALS:
            self._saved_handlers[sig] = signal.signal(sig, self._handle_terminate)
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        # Raw mode so Ctrl-S/Ctrl-Q reach us instead of the tty driver
        input_ = Input(keynames='curtsies', sigint_event=False, disable_terminal_start_stop=True)
        input_.__enter__()
        self._input = input_

    def cleanup(self):
        """Clear the screen, exit fullscreen and restore the terminal."""
        try:
            if self._input is not None:
                self._input.__exit__(None, None, None)
        finally:
            self._input = None
            if self.is_fullscreen:
                print(self.term.clear + self.term.exit_fullscreen + self.term.normal_cursor,
                      end='', flush=True)
                self.is_fullscreen = False
            for sig, handler in self._saved_handlers.items():
                signal.signal(sig, handler)
            self._saved_handlers.clear()

    def write(self, frame: str) -> None:
        """Write a complete frame in one go."""
        print(frame, end='', flush=True)

    def get_key(self, timeout: Optional[float] = None) -> Optional[str]:
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if the timeout expired.
        """
        if self._input is None:
            raise RuntimeError("terminal input is not active; use TerminalInterface as a context manager")
        evt = self._input.send(timeout)
        if evt is None:
            return None
        return str(evt)

    @property
    def size(self) -> tuple[int, int]:
        """Terminal size as ``(columns, rows)``."""
        return (self.term.width, self.term.height)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
