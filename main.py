#!/usr/bin/env python3
"""Tildepad - A small terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, Home, End: Move the cursor
    Page Up / Page Down: Move one screen
    Ctrl-S: Save file
    Ctrl-Q: Quit (press 3 times to discard unsaved changes)
    Type to insert text, Enter to split the line
    Backspace / Delete: Delete character
"""

from tildepad.__main__ import main


if __name__ == "__main__":
    main()
