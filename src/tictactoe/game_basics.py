"""
Game basics: board representation, move rules, winner/tie checks.
Teaching notes:
- The grid is a 3x3 array of cells: 0=empty, 1=X, 2=O. X starts by default.
- Positions are the labels 1-9, read left to right, top to bottom.
- The player who just moved is the only one who can have completed a line,
  so the win check looks at the current player's mark alone.
- A round is over exactly when a line is held or all nine cells are marked.
"""
from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import List, Optional

import numpy as np

SIZE = 3
CELLS = SIZE * SIZE
EMPTY = 0

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6]
]

_WIN_LINES = np.array(WIN_PATTERNS)


class Mark(IntEnum):
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return self.name

    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


class InvalidMove(ValueError):
    """Position outside 1-9 or already marked."""

    def __init__(self, position: object, reason: str):
        super().__init__(f"invalid move {position!r}: {reason}")
        self.position = position
        self.reason = reason


class GameOver(RuntimeError):
    pass


def _to_index(position: int) -> tuple[int, int]:
    return divmod(position - 1, SIZE)


class Board:
    """One round of tic-tac-toe: the grid, whose turn it is, and the moves so far."""

    def __init__(self, first_player: Mark = Mark.X):
        self.first_player = Mark(first_player)
        self.reset()

    def reset(self) -> None:
        self.cells = np.zeros((SIZE, SIZE), dtype=np.int8)
        self.current_player = self.first_player
        self.history: List[int] = []
        self.winner: Optional[Mark] = None

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def state(self) -> GameState:
        if self.winner is not None:
            return GameState.WON
        if self.check_tie():
            return GameState.TIED
        return GameState.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS

    def is_valid_move(self, position: object) -> bool:
        if isinstance(position, bool) or not isinstance(position, (int, np.integer)):
            return False
        if position < 1 or position > CELLS:
            return False
        return bool(self.cells[_to_index(int(position))] == EMPTY)

    def apply_move(self, position: int) -> None:
        if self.is_over:
            raise GameOver(f"round already {self.state.value}")
        if not self.is_valid_move(position):
            in_range = (
                not isinstance(position, bool)
                and isinstance(position, (int, np.integer))
                and 1 <= position <= CELLS
            )
            raise InvalidMove(position, "cell already taken" if in_range else "must be 1-9")
        position = int(position)
        self.cells[_to_index(position)] = int(self.current_player)
        self.history.append(position)
        logging.debug("move %d: %s -> %d", self.move_count, self.current_player.symbol, position)
        if self.check_win():
            self.winner = self.current_player

    def check_win(self) -> bool:
        """True if the current player holds a full row, column or diagonal."""
        flat = self.cells.ravel()
        return bool(np.all(flat[_WIN_LINES] == int(self.current_player), axis=1).any())

    def check_tie(self) -> bool:
        return self.move_count == CELLS and self.winner is None and not self.check_win()

    def switch_player(self) -> None:
        self.current_player = self.current_player.other()

    def mark_at(self, position: int) -> Optional[Mark]:
        v = int(self.cells[_to_index(position)])
        return None if v == EMPTY else Mark(v)

    def label(self, position: int) -> str:
        mark = self.mark_at(position)
        return str(position) if mark is None else mark.symbol

    def rows(self) -> List[List[str]]:
        return [[self.label(r * SIZE + c + 1) for c in range(SIZE)] for r in range(SIZE)]

    def __repr__(self) -> str:
        grid = "".join(self.label(p) for p in range(1, CELLS + 1))
        return f"Board({grid!r}, to_move={self.current_player.symbol}, moves={self.move_count})"
