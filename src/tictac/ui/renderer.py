"""Rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..board import Board
from ..config import BOARD_SIDE, EMPTY_CELL_GLYPH, MARK_O, MARK_X
from ..controller import Controller
from ..winner import winning_line
from .status_box import StatusBox
from .text_utils import pad_to_width, visible_length

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_GREEN = "\033[32m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"
FG_RED = "\033[31m"

STATUS_BOX = StatusBox()

CELL_SEP = "│"
ROW_SEP = "┼".join(["───"] * BOARD_SIDE)
SELECTION_MARKER = "▶"
PANEL_GAP = "   "


def render(controller: Controller, info_message: Optional[str] = None) -> str:
    """Draw the board, history panel, status box and controls as one string."""

    game = controller.game
    board = game.board()

    board_lines = list(_render_board(board, controller.cursor))
    board_width = max(visible_length(line) for line in board_lines)
    panel_lines = _render_history_panel(
        game.move_labels(), game.current_move, controller.selected_move
    )
    height = max(len(board_lines), len(panel_lines))
    board_lines.extend([""] * (height - len(board_lines)))
    panel_lines.extend([""] * (height - len(panel_lines)))

    lines: List[str] = []
    for board_line, panel_line in zip(board_lines, panel_lines):
        combined = f"{pad_to_width(board_line, board_width)}{PANEL_GAP}{panel_line}"
        lines.append(combined.rstrip())

    lines.extend(_render_status_box(board, board_width))
    if info_message:
        lines.append(_color(info_message, FG_RED))
    lines.append(_render_controls_line())
    return "\n".join(lines)


def _render_board(board: Board, cursor: int) -> Iterable[str]:
    highlighted = set(winning_line(board.squares) or ())
    lines: List[str] = []
    for row_idx, row in enumerate(board.rows()):
        cells: List[str] = []
        for col_idx, token in enumerate(row):
            index = row_idx * BOARD_SIDE + col_idx
            cells.append(_render_cell(token, index == cursor, index in highlighted))
        lines.append(CELL_SEP.join(cells))
        if row_idx < BOARD_SIDE - 1:
            lines.append(ROW_SEP)
    return lines


def _render_cell(token: Optional[str], is_cursor: bool, is_winning: bool) -> str:
    glyph = f" {token or EMPTY_CELL_GLYPH} "
    style: List[str] = []
    if is_winning:
        style.extend((BOLD, FG_GREEN))
    elif token == MARK_X:
        style.append(FG_CYAN)
    elif token == MARK_O:
        style.append(FG_YELLOW)
    else:
        style.append(DIM)
    if is_cursor:
        style.append(REVERSE)
    return _color(glyph, *style)


def _render_history_panel(labels: List[str], current_move: int, selected_move: int) -> List[str]:
    lines = [_color("History", BOLD, FG_MAGENTA)]
    for move, label in enumerate(labels):
        prefix = SELECTION_MARKER if move == selected_move else " "
        text = f"{prefix} {move + 1}. {label}"
        if move == current_move:
            lines.append(_color(text, BOLD, FG_BLUE))
        else:
            lines.append(text)
    return lines


def _render_status_box(board: Board, width: int) -> Iterable[str]:
    box_lines = STATUS_BOX.render([board.status()], width)
    colour = FG_GREEN if board.winner else FG_YELLOW
    return [_color(line, BOLD, colour) for line in box_lines]


def _render_controls_line() -> str:
    return _color(
        "Keys: 1-9 cell | WASD/arrows move | Space place | J/K history | Enter jump | 0 start | Q quit",
        FG_CYAN,
    )


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"
