"""Main editor controller: ties the terminal to an edit session."""

import logging
from typing import Optional

from .fileio import FileStore
from .keyboard import KeyboardHandler
from .renderer import FrameRenderer
from .session import EditSession
from .settings import EditorSettings, load_settings
from .terminal import TerminalInterface
from .version import get_version_string

logger = logging.getLogger(__name__)


class Editor:
    """Text editor application controller."""

    def __init__(self, settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.settings = settings or load_settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.files = FileStore()
        self.renderer = FrameRenderer(self.terminal.term, get_version_string())
        self.session = self._new_session(EditSession, filename=None)

    def _new_session(self, factory, **kwargs) -> EditSession:
        return factory(files=self.files, renderer=self.renderer, sink=self.terminal.write,
                       screen_size=self.terminal.size, settings=self.settings, **kwargs)

    def load_file(self, filename: str):
        """Load a file into the editor.

        Raises:
            FileIOError, DecodeError: The file exists but cannot be read.
        """
        self.session = self._new_session(EditSession.open, path=filename)

    def run(self):
        """Run the main editor loop until the session quits."""
        with self.terminal:
            self._sync_size()
            self.session.refresh()
            while self.session.running:
                event = self.keyboard.get_key_event(timeout=self.settings.poll_timeout)
                if event is None:
                    continue
                self._sync_size()
                self.session.step(event)
        logger.debug("Editor loop finished")

    def _sync_size(self):
        """Pick up terminal resizes before rendering."""
        columns, rows = self.terminal.size
        self.session.resize(columns, rows)
