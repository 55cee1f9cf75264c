"""Padding for terminal text that may carry ANSI colour codes."""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    """Columns ``text`` occupies once colour codes are removed.

    Every glyph the game draws is one column wide.
    """

    return len(strip_ansi(text))


def pad_to_width(text: str, width: int) -> str:
    return text + " " * max(width - visible_length(text), 0)
