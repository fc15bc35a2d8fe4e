"""Constants and configuration for the tildepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Rendering
    TAB_STOP = 8  # Tabs expand to the next multiple of this column
    FILLER_ROW = "~"  # Drawn on screen rows past the end of the buffer
    NO_NAME = "[No Name]"  # Status bar placeholder for unnamed buffers
    STATUS_BAR_ROWS = 2  # Status bar + message bar at the bottom

    # Quit confirmation
    QUIT_TIMES = 3  # Presses required to quit with unsaved changes

    # Status messages
    MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible
    HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit"
    WELCOME_MESSAGE = "Tildepad editor -- version {}"
    UNSAVED_QUIT_MESSAGE = (
        "WARNING!!! File has unsaved changes. Press Ctrl-Q {} more times to quit."
    )
    NO_FILE_NAME_MESSAGE = "Can't save! No file name."
    SAVE_ERROR_MESSAGE = "Can't save! I/O error: {}"
    SAVED_MESSAGE = "{} bytes written to disk"

    # Keyboard timing
    POLL_TIMEOUT = 0.5  # Seconds to wait for a key before looping again

    # File operations
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
