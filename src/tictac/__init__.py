"""Top-level package for the time-travel tic-tac-toe terminal game."""

__all__ = [
    "config",
    "winner",
    "board",
    "game",
    "controller",
]
