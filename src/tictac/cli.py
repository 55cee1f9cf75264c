"""Command-line entry point for the tic-tac-toe terminal game."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import CELL_COUNT
from .controller import Command, Controller
from .game import Game
from .ui import input as input_mod
from .ui.renderer import render

QUIT = "quit"

KEY_COMMANDS = {
    "w": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    input_mod.KEY_UP: Command.MOVE_UP,
    input_mod.KEY_DOWN: Command.MOVE_DOWN,
    input_mod.KEY_LEFT: Command.MOVE_LEFT,
    input_mod.KEY_RIGHT: Command.MOVE_RIGHT,
    " ": Command.PLACE,
    "k": Command.HISTORY_UP,
    "j": Command.HISTORY_DOWN,
    input_mod.KEY_ENTER: Command.JUMP,
    "\n": Command.JUMP,
    "0": f"{Command.JUMP_PREFIX}0",
    "q": QUIT,
}

# "1" is the top-left cell, "9" the bottom-right.
CELL_KEYS = {str(index + 1): f"{Command.CELL_PREFIX}{index}" for index in range(CELL_COUNT)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictac",
        description="Play tic-tac-toe in the terminal and travel back through the moves.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write log records to PATH instead of stderr",
    )
    return parser


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        filename=log_file,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Launch the interactive game."""

    ns = build_parser().parse_args(argv)
    configure_logging(ns.verbose, ns.log_file)

    controller = Controller(Game.new())
    try:
        return _run_loop(controller)
    except KeyboardInterrupt:
        # readchar raises on Ctrl-C instead of returning a key.
        return 0


def _run_loop(controller: Controller) -> int:
    info_message: Optional[str] = None
    while True:
        print("\033[H\033[J", end="")  # Clear terminal
        print(render(controller, info_message))
        command = map_key_to_command(input_mod.get_key())
        if command == QUIT:
            return 0
        if command is None:
            continue
        try:
            controller.handle_input(command)
        except ValueError as exc:
            info_message = str(exc)
        else:
            info_message = None


def map_key_to_command(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    if key in CELL_KEYS:
        return CELL_KEYS[key]
    if key in KEY_COMMANDS:
        return KEY_COMMANDS[key]
    return KEY_COMMANDS.get(key.lower())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
