"""Unit tests for settings loading."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

from tildepad.settings import EditorSettings, config_dir, load_settings, validate_setting


def write_settings(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding='utf-8')
    return path


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(tmp_path / "settings.json")
    assert settings == EditorSettings()
    assert settings.tab_stop == 8
    assert settings.quit_times == 3
    assert settings.message_timeout == 5.0
    assert settings.poll_timeout == 0.5


def test_values_from_file(tmp_path):
    path = write_settings(tmp_path, {"tab_stop": 4, "quit_times": 2, "message_timeout": 2.5})
    settings = load_settings(path)
    assert settings.tab_stop == 4
    assert settings.quit_times == 2
    assert settings.message_timeout == 2.5
    assert settings.poll_timeout == 0.5


def test_invalid_json_falls_back_to_defaults(tmp_path, caplog):
    path = write_settings(tmp_path, "{not json")
    with caplog.at_level(logging.WARNING, logger="tildepad.settings"):
        settings = load_settings(path)
    assert settings == EditorSettings()
    assert "Could not load settings" in caplog.text


def test_non_dict_file_is_ignored(tmp_path, caplog):
    path = write_settings(tmp_path, [1, 2, 3])
    with caplog.at_level(logging.WARNING, logger="tildepad.settings"):
        settings = load_settings(path)
    assert settings == EditorSettings()
    assert "invalid format" in caplog.text


def test_invalid_values_are_ignored(tmp_path, caplog):
    path = write_settings(tmp_path, {"tab_stop": 0, "quit_times": True, "poll_timeout": 1})
    with caplog.at_level(logging.WARNING, logger="tildepad.settings"):
        settings = load_settings(path)
    assert settings.tab_stop == 8
    assert settings.quit_times == 3
    assert settings.poll_timeout == 1
    assert "Invalid value 0 for setting 'tab_stop'" in caplog.text


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = write_settings(tmp_path, {"color_scheme": "dark"})
    with caplog.at_level(logging.WARNING, logger="tildepad.settings"):
        settings = load_settings(path)
    assert settings == EditorSettings()
    assert "Unknown setting 'color_scheme'" in caplog.text


def test_validate_setting():
    assert validate_setting("tab_stop", 2)
    assert not validate_setting("tab_stop", "8")
    assert not validate_setting("tab_stop", 100)
    assert validate_setting("message_timeout", 0.1)
    assert not validate_setting("message_timeout", 0)
    assert not validate_setting("poll_timeout", False)
    assert not validate_setting("nonsense", 1)


def test_default_path_uses_platform_config_dir(tmp_path):
    write_settings(tmp_path, {"tab_stop": 2})
    with patch('tildepad.settings.platformdirs.user_config_dir', return_value=str(tmp_path)):
        assert config_dir() == Path(tmp_path)
        assert load_settings().tab_stop == 2
