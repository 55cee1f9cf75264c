"""Keyboard input for the terminal UI."""

from __future__ import annotations

import readchar
from readchar import key

KEY_UP = key.UP
KEY_DOWN = key.DOWN
KEY_LEFT = key.LEFT
KEY_RIGHT = key.RIGHT
KEY_ENTER = key.ENTER


def get_key() -> str:
    """Block until the player presses a key and return it."""

    return readchar.readkey()
