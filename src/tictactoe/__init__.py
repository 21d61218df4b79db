"""tictactoe package.

Board state, rendering, round statistics, and the two-player console loop.

Convenience imports are exposed for common workflows.
"""

from .game_basics import Board, GameOver, GameState, InvalidMove, Mark
from .tracking import RoundResult, SessionStats

__all__ = [
    "Board",
    "Mark",
    "GameState",
    "InvalidMove",
    "GameOver",
    "RoundResult",
    "SessionStats",
]
