"""User configuration for the editor.

Settings live in a JSON file in the user's config directory and survive
application restarts. Every key is optional; anything missing or invalid
falls back to the built-in default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "tildepad"
SETTINGS_FILENAME = "settings.json"


@dataclass(frozen=True)
class EditorSettings:
    tab_stop: int = EditorConstants.TAB_STOP
    quit_times: int = EditorConstants.QUIT_TIMES
    message_timeout: float = EditorConstants.MESSAGE_TIMEOUT
    poll_timeout: float = EditorConstants.POLL_TIMEOUT


def config_dir() -> Path:
    """Platform-appropriate directory holding ``settings.json``."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def log_dir() -> Path:
    """Platform-appropriate directory for the editor's log file."""
    return Path(platformdirs.user_log_dir(APP_NAME))


def validate_setting(key: str, value: Any) -> bool:
    """Validate a single setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if the value is usable for ``key``.
    """
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        return False
    if key in ('tab_stop', 'quit_times'):
        return isinstance(value, int) and 1 <= value <= 64
    if key in ('message_timeout', 'poll_timeout'):
        return isinstance(value, (int, float)) and value > 0
    return False


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings from ``path`` (default: the user config file).

    Returns:
        EditorSettings with every valid key from the file applied on top of
        the defaults.
    """
    if path is None:
        path = config_dir() / SETTINGS_FILENAME
    data = _read_settings_file(path)

    known = {f.name for f in fields(EditorSettings)}
    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Unknown setting {key!r} in {path}, ignoring")
            continue
        if not validate_setting(key, value):
            logger.warning(f"Invalid value {value!r} for setting {key!r}, using default")
            continue
        overrides[key] = value
    settings = replace(EditorSettings(), **overrides)
    logger.debug(f"Loaded settings {settings}")
    return settings
