"""Win detection over a single board snapshot."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(squares: Sequence[Optional[str]]) -> Optional[Line]:
    """Return the first triple holding three identical marks, if any."""

    for line in WINNING_LINES:
        a, b, c = line
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return line
    return None


def calculate_winner(squares: Sequence[Optional[str]]) -> Optional[str]:
    """Return the winning mark for ``squares`` or ``None`` when undecided."""

    line = winning_line(squares)
    if line is None:
        return None
    return squares[line[0]]
