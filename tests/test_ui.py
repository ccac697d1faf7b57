import io
import os
import pty
import termios

import pytest

from pacdef import ui


@pytest.mark.parametrize(
    "reply, expected",
    [
        ("\n", True),
        ("", True),
        ("y\n", True),
        ("Yes\n", True),
        ("n\n", False),
        ("NO\n", False),
    ],
)
def test_get_user_confirmation(monkeypatch, reply, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(reply))
    assert ui.get_user_confirmation() is expected


def test_get_user_confirmation_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    ui.get_user_confirmation()
    assert capsys.readouterr().out == "Continue? [Y/n] "


def _with_stdin_fd(fd, action):
    saved = os.dup(0)
    try:
        os.dup2(fd, 0)
        return action()
    finally:
        os.dup2(saved, 0)
        os.close(saved)


def test_read_single_char_from_pty(capsys):
    master, slave = pty.openpty()
    try:
        before = termios.tcgetattr(slave)
        os.write(master, b"g")
        result = _with_stdin_fd(slave, ui.read_single_char_from_terminal)
        after = termios.tcgetattr(slave)
    finally:
        os.close(master)
        os.close(slave)
    assert result == "g"
    assert after == before
    assert capsys.readouterr().out == "g\n"


def test_read_single_char_requires_terminal():
    read_end, write_end = os.pipe()
    try:
        with pytest.raises(termios.error):
            _with_stdin_fd(read_end, ui.read_single_char_from_terminal)
    finally:
        os.close(read_end)
        os.close(write_end)