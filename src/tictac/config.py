"""Configuration constants used across the tic-tac-toe project."""

BOARD_SIDE: int = 3
CELL_COUNT: int = BOARD_SIDE * BOARD_SIDE
MARK_X: str = "X"
MARK_O: str = "O"
EMPTY_CELL_GLYPH: str = "·"

# Cell the cursor starts on (the centre square).
START_CURSOR: int = CELL_COUNT // 2

GAME_START_LABEL: str = "Go to game start"
MOVE_LABEL_TEMPLATE: str = "Go to move #{move}"
