"""Controller responsible for interpreting user commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from .config import BOARD_SIDE, START_CURSOR
from .game import Game

logger = logging.getLogger(__name__)


class Command:
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    PLACE = "place"
    HISTORY_UP = "history-up"
    HISTORY_DOWN = "history-down"
    JUMP = "jump"
    CELL_PREFIX = "cell:"
    JUMP_PREFIX = "jump:"


@dataclass
class Controller:
    """Translate symbolic commands into game actions.

    ``cursor`` and ``selected_move`` are view state only: they pick which cell
    or history entry the next key press acts on.
    """

    game: Game
    cursor: int = START_CURSOR
    selected_move: int = 0

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], None]] = {
            Command.MOVE_UP: lambda: self.move_cursor(-1, 0),
            Command.MOVE_DOWN: lambda: self.move_cursor(1, 0),
            Command.MOVE_LEFT: lambda: self.move_cursor(0, -1),
            Command.MOVE_RIGHT: lambda: self.move_cursor(0, 1),
            Command.PLACE: self.place_at_cursor,
            Command.HISTORY_UP: lambda: self.move_selection(-1),
            Command.HISTORY_DOWN: lambda: self.move_selection(1),
            Command.JUMP: lambda: self.jump_to(self.selected_move),
        }

    def handle_input(self, command: str) -> None:
        logger.debug("Handling command %r", command)
        if command.startswith(Command.CELL_PREFIX):
            self.click(_parse_argument(command, Command.CELL_PREFIX))
            return
        if command.startswith(Command.JUMP_PREFIX):
            self.jump_to(_parse_argument(command, Command.JUMP_PREFIX))
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"Unknown command: {command}")
        handler()

    # ------------------------------------------------------------------
    # Board interaction
    # ------------------------------------------------------------------
    def click(self, index: int) -> bool:
        played = self.game.click(index)
        if played:
            self.cursor = index
            self.selected_move = self.game.current_move
        return played

    def place_at_cursor(self) -> bool:
        return self.click(self.cursor)

    def move_cursor(self, delta_row: int, delta_col: int) -> int:
        row, col = divmod(self.cursor, BOARD_SIDE)
        new_row = (row + delta_row) % BOARD_SIDE
        new_col = (col + delta_col) % BOARD_SIDE
        self.cursor = new_row * BOARD_SIDE + new_col
        return self.cursor

    # ------------------------------------------------------------------
    # History interaction
    # ------------------------------------------------------------------
    def move_selection(self, delta: int) -> int:
        last = len(self.game.history) - 1
        self.selected_move = min(max(self.selected_move + delta, 0), last)
        return self.selected_move

    def jump_to(self, move: int) -> None:
        self.game.jump_to(move)
        self.selected_move = move


def _parse_argument(command: str, prefix: str) -> int:
    raw = command[len(prefix) :]
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Malformed command: {command}") from None
