"""Tests for terminal setup and guaranteed teardown."""

import signal
from unittest.mock import MagicMock, patch

import pytest

from tildepad.terminal import TerminalInterface


@pytest.fixture
def mock_input():
    with patch('tildepad.terminal.Input') as input_cls:
        yield input_cls.return_value


def test_context_manager_enters_and_restores(fake_term, mock_input, capsys):
    terminal = TerminalInterface(fake_term)
    with terminal:
        assert terminal.is_fullscreen
        mock_input.__enter__.assert_called_once()
    mock_input.__exit__.assert_called_once()
    assert not terminal.is_fullscreen
    out = capsys.readouterr().out
    assert out.startswith('<fullscreen><clear>')
    assert out.endswith('<clear><exit-fullscreen><show>')


def test_cleanup_runs_when_body_raises(fake_term, mock_input, capsys):
    terminal = TerminalInterface(fake_term)
    with pytest.raises(IndexError):
        with terminal:
            raise IndexError("broken invariant")
    mock_input.__exit__.assert_called_once()
    assert capsys.readouterr().out.endswith('<clear><exit-fullscreen><show>')


def test_signal_handlers_installed_and_restored(fake_term, mock_input):
    original = signal.getsignal(signal.SIGTERM)
    terminal = TerminalInterface(fake_term)
    with terminal:
        assert signal.getsignal(signal.SIGTERM) == terminal._handle_terminate
    assert signal.getsignal(signal.SIGTERM) == original


def test_terminate_signal_becomes_system_exit(fake_term):
    terminal = TerminalInterface(fake_term)
    with pytest.raises(SystemExit) as excinfo:
        terminal._handle_terminate(signal.SIGTERM, None)
    assert excinfo.value.code == 128 + signal.SIGTERM


def test_get_key_returns_token_or_none(fake_term, mock_input):
    terminal = TerminalInterface(fake_term)
    with terminal:
        mock_input.send.return_value = None
        assert terminal.get_key(0.5) is None
        mock_input.send.assert_called_with(0.5)
        event = MagicMock()
        event.__str__.return_value = '<UP>'
        mock_input.send.return_value = event
        assert terminal.get_key(0.5) == '<UP>'


def test_get_key_outside_context_raises(fake_term):
    with pytest.raises(RuntimeError):
        TerminalInterface(fake_term).get_key(0)


def test_write_flushes_whole_frame(fake_term, capsys):
    TerminalInterface(fake_term).write('<hide><home>abc<show>')
    assert capsys.readouterr().out == '<hide><home>abc<show>'


def test_size_reads_geometry(fake_term):
    assert TerminalInterface(fake_term).size == (40, 10)


def test_failed_setup_restores_terminal(fake_term, capsys):
    original = signal.getsignal(signal.SIGTERM)
    terminal = TerminalInterface(fake_term)
    with patch('tildepad.terminal.Input', side_effect=OSError("not a tty")):
        with pytest.raises(OSError):
            with terminal:
                pass
    assert capsys.readouterr().out == '<fullscreen><clear><clear><exit-fullscreen><show>'
    assert not terminal.is_fullscreen
    assert terminal._saved_handlers == {}
    assert signal.getsignal(signal.SIGTERM) == original


def test_failed_raw_mode_entry_restores_terminal(fake_term, capsys):
    with patch('tildepad.terminal.Input') as input_cls:
        input_cls.return_value.__enter__.side_effect = OSError("termios failed")
        terminal = TerminalInterface(fake_term)
        with pytest.raises(OSError):
            terminal.__enter__()
    input_cls.return_value.__exit__.assert_not_called()
    assert capsys.readouterr().out.endswith('<clear><exit-fullscreen><show>')
    assert not terminal.is_fullscreen
