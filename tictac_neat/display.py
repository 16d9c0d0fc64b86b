"""Text rendering of boards."""

from __future__ import annotations

from .game import Cell, CellLocation, GameBoard, Player

_CHARS = {Player.CROSS: "X", Player.CIRCLE: "O", None: "_"}


def cell_to_char(cell: Cell) -> str:
    """'X' for cross, 'O' for circle, '_' for an empty cell."""
    return _CHARS[cell]


def board_to_string(board: GameBoard) -> str:
    """Render the board as three space-separated rows."""
    cells = [cell_to_char(board.get_cell(loc)) for loc in CellLocation]
    return "\n".join(" ".join(cells[row : row + 3]) for row in range(0, 9, 3))