"""Game session: move history, time travel and turn order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from .board import Board, Snapshot, as_snapshot, empty_snapshot
from .config import GAME_START_LABEL, MARK_O, MARK_X, MOVE_LABEL_TEMPLATE
from .winner import calculate_winner

logger = logging.getLogger(__name__)


class Player(Enum):
    X = "x"
    O = "o"

    @property
    def mark(self) -> str:
        return MARK_X if self is Player.X else MARK_O


def move_label(move: int) -> str:
    if move == 0:
        return GAME_START_LABEL
    return MOVE_LABEL_TEMPLATE.format(move=move)


@dataclass
class Game:
    """State manager for one tic-tac-toe session.

    Only the history and the index of the displayed snapshot are stored.
    Turn order and the winner are recomputed from them on every read.
    """

    history: List[Snapshot] = field(default_factory=lambda: [empty_snapshot()])
    current_move: int = 0

    @classmethod
    def new(cls) -> "Game":
        return cls()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def x_is_next(self) -> bool:
        return self.current_move % 2 == 0

    @property
    def next_player(self) -> Player:
        return Player.X if self.x_is_next else Player.O

    @property
    def next_mark(self) -> str:
        return self.next_player.mark

    @property
    def current_squares(self) -> Snapshot:
        return self.history[self.current_move]

    @property
    def winner(self) -> Optional[str]:
        return calculate_winner(self.current_squares)

    def board(self) -> Board:
        return Board(
            x_is_next=self.x_is_next,
            squares=self.current_squares,
            on_play=self.play,
        )

    def move_labels(self) -> List[str]:
        return [move_label(move) for move in range(len(self.history))]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def play(self, next_squares: Iterable[Optional[str]]) -> None:
        """Commit ``next_squares`` as the move after the displayed one.

        Any snapshots recorded after ``current_move`` are discarded first, so
        playing from an earlier point starts a new branch.
        """

        snapshot = as_snapshot(next_squares)
        keep = self.current_move + 1
        dropped = len(self.history) - keep
        if dropped:
            logger.debug("Discarding %d later move(s) from move #%d", dropped, self.current_move)
        self.history = self.history[:keep] + [snapshot]
        self.current_move = len(self.history) - 1
        logger.debug("Committed move #%d", self.current_move)

        winner = calculate_winner(snapshot)
        if winner:
            logger.info("%s wins at move #%d", winner, self.current_move)

    def jump_to(self, move: int) -> None:
        """Display the snapshot at ``move`` without altering the history."""

        if not 0 <= move < len(self.history):
            raise ValueError(
                f"Move #{move} is not in the history (0-{len(self.history) - 1})"
            )
        self.current_move = move
        logger.debug("Jumped to move #%d", move)

    def click(self, index: int) -> bool:
        """Click cell ``index`` on the displayed board."""

        return self.board().handle_click(index)
