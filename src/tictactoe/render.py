"""
Text rendering of the board. Colour is cosmetic: X red, O blue, labels dim.
"""
from __future__ import annotations

from .game_basics import SIZE, Board, Mark

RESET = "\033[0m"
COLORS = {
    Mark.X: "\033[1;31m",
    Mark.O: "\033[1;34m",
}
DIM = "\033[2m"

SEPARATOR = "---|---|---"


def paint_mark(mark: Mark, color: bool = False) -> str:
    if not color:
        return mark.symbol
    return f"{COLORS[mark]}{mark.symbol}{RESET}"


def _cell(board: Board, position: int, color: bool) -> str:
    mark = board.mark_at(position)
    if mark is not None:
        return paint_mark(mark, color)
    return f"{DIM}{position}{RESET}" if color else str(position)


def render_board(board: Board, color: bool = False) -> str:
    lines = []
    for r in range(SIZE):
        cells = [_cell(board, r * SIZE + c + 1, color) for c in range(SIZE)]
        lines.append("|".join(f" {v} " for v in cells))
        if r < SIZE - 1:
            lines.append(SEPARATOR)
    return "\n" + "\n".join(lines) + "\n"
