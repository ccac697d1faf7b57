"""Interaction with the user on the terminal."""

from __future__ import annotations

import os
import sys
import termios


def get_user_confirmation() -> bool:
    """Ask whether to continue; an empty reply or one containing 'y' means yes."""
    print("Continue? [Y/n] ", end="", flush=True)
    reply = sys.stdin.readline()
    return not reply.strip() or "y" in reply.lower()


def read_single_char_from_terminal() -> str:
    """Read one byte from stdin in non-canonical mode and return it as a character.

    The terminal mode is restored afterwards. The character is echoed.
    """
    fd = 0
    original = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)

    try:
        data = os.read(fd, 1)
        if not data:
            raise EOFError("reading one byte from stdin")
        char = chr(data[0])
        # stdin is not echoed in this terminal mode
        print(char)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)

    return char