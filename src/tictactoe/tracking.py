"""
Round results and session statistics.

A RoundResult is captured when a round reaches a terminal state; SessionStats
folds results together for the summary printed when the player stops.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .game_basics import Board, GameState, Mark


@dataclass(frozen=True)
class RoundResult:
    winner: Optional[Mark]
    moves: Tuple[int, ...]

    @property
    def total_moves(self) -> int:
        return len(self.moves)

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @classmethod
    def from_board(cls, board: Board) -> "RoundResult":
        if not board.is_over:
            raise ValueError("round is still in progress")
        winner = board.winner if board.state is GameState.WON else None
        return cls(winner=winner, moves=tuple(board.history))


@dataclass
class SessionStats:
    results: List[RoundResult] = field(default_factory=list)

    def record(self, result: RoundResult) -> None:
        self.results.append(result)

    @property
    def rounds(self) -> int:
        return len(self.results)

    @property
    def ties(self) -> int:
        return sum(1 for r in self.results if r.is_tie)

    def wins(self) -> Dict[Mark, int]:
        counts = {m: 0 for m in Mark}
        for r in self.results:
            if r.winner is not None:
                counts[r.winner] += 1
        return counts

    def summary_lines(self) -> List[str]:
        w = self.wins()
        return [
            f"Rounds played: {self.rounds}",
            f"X wins: {w[Mark.X]}  O wins: {w[Mark.O]}  Ties: {self.ties}",
        ]
