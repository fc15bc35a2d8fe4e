"""Transient status bar message with lazy expiry."""

import time
from typing import Callable, Optional

from .constants import EditorConstants


class StatusMessage:
    """A single message that disappears after ``timeout`` seconds.

    Expiry is lazy: an old message is cleared the next time it is read.
    """

    def __init__(self, timeout: float = EditorConstants.MESSAGE_TIMEOUT,
                 clock: Callable[[], float] = time.monotonic):
        self.timeout = timeout
        self._clock = clock
        self.text: Optional[str] = None
        self.set_at: Optional[float] = None

    def set(self, text: str) -> None:
        self.text = text
        self.set_at = self._clock()

    def clear(self) -> None:
        self.text = None
        self.set_at = None

    def current(self) -> Optional[str]:
        """Return the live message, or None once it has expired."""
        if self.text is None or self.set_at is None:
            return None
        if self._clock() - self.set_at >= self.timeout:
            self.clear()
            return None
        return self.text
