"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyCode(Enum):
    """Abstract key symbols understood by the editor."""
    CHAR = "char"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    BACKSPACE = "backspace"
    DELETE = "delete"
    TAB = "tab"
    ENTER = "enter"
    OTHER = "other"


class Modifier(Enum):
    NONE = "none"
    CONTROL = "ctrl"
    SHIFT = "shift"


@dataclass(frozen=True)
class KeyEvent:
    """Represents a decoded keyboard event."""
    code: KeyCode
    modifiers: Modifier = Modifier.NONE
    char: Optional[str] = None  # Set when code is KeyCode.CHAR
    raw: str = ""  # The token as reported by curtsies

    def is_ctrl(self, char: str) -> bool:
        return (self.code is KeyCode.CHAR and self.modifiers is Modifier.CONTROL
                and self.char == char)


_SPECIALS = {
    'up': KeyCode.UP,
    'down': KeyCode.DOWN,
    'left': KeyCode.LEFT,
    'right': KeyCode.RIGHT,
    'home': KeyCode.HOME,
    'end': KeyCode.END,
    'page_up': KeyCode.PAGE_UP,
    'page_down': KeyCode.PAGE_DOWN,
    'backspace': KeyCode.BACKSPACE,
    'delete': KeyCode.DELETE,
    'tab': KeyCode.TAB,
    'enter': KeyCode.ENTER,
    'return': KeyCode.ENTER,
}

# Control chords that terminals deliver as editing keys
_CTRL_ALIASES = {
    'h': KeyCode.BACKSPACE,
    'i': KeyCode.TAB,
    'j': KeyCode.ENTER,
    'm': KeyCode.ENTER,
}


class KeyboardHandler:
    """Turns curtsies key names into ``KeyEvent`` objects."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get the next key event, or None if ``timeout`` expired."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: Key token such as ``'a'``, ``'<UP>'`` or ``'<Ctrl-q>'``

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Shift-TAB>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1].replace('+', '-')
            parts = name.split('-')
            base = parts[-1]
            mods = {part.lower() for part in parts[:-1]}
            lower = base.lower()
            if lower in ('pageup', 'page_up', 'pgup'):
                lower = 'page_up'
            elif lower in ('pagedown', 'page_down', 'pgdn'):
                lower = 'page_down'

            if mods & {'alt', 'meta', 'esc'}:
                return KeyEvent(KeyCode.OTHER, raw=key_str)
            if 'ctrl' in mods and len(base) == 1:
                ch = base.lower()
                if ch in _CTRL_ALIASES:
                    return KeyEvent(_CTRL_ALIASES[ch], raw=key_str)
                return KeyEvent(KeyCode.CHAR, Modifier.CONTROL, char=ch, raw=key_str)
            if lower in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(KeyCode.CHAR, char=' ', raw=key_str)
            if lower in _SPECIALS:
                if 'ctrl' in mods:
                    modifier = Modifier.CONTROL
                elif 'shift' in mods:
                    modifier = Modifier.SHIFT
                else:
                    modifier = Modifier.NONE
                return KeyEvent(_SPECIALS[lower], modifier, raw=key_str)
            return KeyEvent(KeyCode.OTHER, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 0x7f:
                return KeyEvent(KeyCode.BACKSPACE, raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                if ch in _CTRL_ALIASES:
                    return KeyEvent(_CTRL_ALIASES[ch], raw=key_str)
                return KeyEvent(KeyCode.CHAR, Modifier.CONTROL, char=ch, raw=key_str)
            if o < 32:
                return KeyEvent(KeyCode.OTHER, raw=key_str)
            modifier = Modifier.SHIFT if key_str.isupper() else Modifier.NONE
            return KeyEvent(KeyCode.CHAR, modifier, char=key_str, raw=key_str)

        # Unrecognised multi-character sequences
        return KeyEvent(KeyCode.OTHER, raw=key_str)
