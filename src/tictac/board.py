"""Board snapshots and the cell-click gate for tic-tac-toe."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .config import BOARD_SIDE, CELL_COUNT, MARK_O, MARK_X
from .winner import calculate_winner

logger = logging.getLogger(__name__)

Snapshot = Tuple[Optional[str], ...]
MoveCommitter = Callable[[Snapshot], None]

_VALID_CELLS = (None, MARK_X, MARK_O)


def empty_snapshot() -> Snapshot:
    """Return the board every game starts from."""

    return (None,) * CELL_COUNT


def as_snapshot(cells: Iterable[Optional[str]]) -> Snapshot:
    """Freeze ``cells`` into a snapshot, validating size and contents.

    Raises :class:`ValueError` when the board does not hold exactly nine cells
    or when a cell holds anything other than ``None``, ``"X"`` or ``"O"``.
    """

    snapshot = tuple(cells)
    if len(snapshot) != CELL_COUNT:
        raise ValueError(f"A board holds {CELL_COUNT} cells, got {len(snapshot)}")
    for index, cell in enumerate(snapshot):
        if cell not in _VALID_CELLS:
            raise ValueError(f"Cell {index} holds an unknown mark: {cell!r}")
    return snapshot


def with_mark(squares: Snapshot, index: int, mark: str) -> Snapshot:
    """Return a copy of ``squares`` with ``mark`` written at ``index``."""

    check_index(index)
    next_squares = list(squares)
    next_squares[index] = mark
    return tuple(next_squares)


def check_index(index: int) -> None:
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"Cell {index} is outside the board")


def mark_for(x_is_next: bool) -> str:
    return MARK_X if x_is_next else MARK_O


@dataclass(frozen=True)
class Board:
    """Nine cells drawn from one snapshot, plus the rules for clicking them.

    The board never stores a move itself: a valid click builds the next
    snapshot and hands it to ``on_play``, which decides what to keep.
    """

    x_is_next: bool
    squares: Snapshot
    on_play: MoveCommitter

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    @property
    def next_mark(self) -> str:
        return mark_for(self.x_is_next)

    @property
    def winner(self) -> Optional[str]:
        return calculate_winner(self.squares)

    def status(self) -> str:
        winner = self.winner
        if winner:
            return f"Winner: {winner}"
        return f"Next player: {self.next_mark}"

    def can_play(self, index: int) -> bool:
        """Return ``True`` when clicking ``index`` would produce a move."""

        check_index(index)
        return self.squares[index] is None and self.winner is None

    def rows(self) -> List[Snapshot]:
        return [
            self.squares[start : start + BOARD_SIDE]
            for start in range(0, CELL_COUNT, BOARD_SIDE)
        ]

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------
    def handle_click(self, index: int) -> bool:
        """Play the next mark at ``index``.

        Returns ``False`` without calling ``on_play`` when the cell is taken
        or the game already has a winner. Raises :class:`ValueError` for an
        index outside the board.
        """

        if not self.can_play(index):
            logger.debug("Rejected click on cell %d", index)
            return False

        next_squares = with_mark(self.squares, index, self.next_mark)
        logger.debug("%s plays cell %d", self.next_mark, index)
        self.on_play(next_squares)
        return True
