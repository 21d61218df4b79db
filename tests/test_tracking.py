import pytest

from tictactoe.game_basics import Board, Mark
from tictactoe.tracking import RoundResult, SessionStats


def test_result_from_won_board():
    b = Board()
    for mv in [1, 5, 2, 6]:
        b.apply_move(mv)
        b.switch_player()
    b.apply_move(3)
    r = RoundResult.from_board(b)
    assert r.winner is Mark.X
    assert r.total_moves == 5
    assert r.moves == (1, 5, 2, 6, 3)
    assert not r.is_tie


def test_result_requires_finished_round():
    b = Board()
    b.apply_move(1)
    with pytest.raises(ValueError):
        RoundResult.from_board(b)


def test_session_stats_counts():
    s = SessionStats()
    s.record(RoundResult(winner=Mark.X, moves=(1, 5, 2, 6, 3)))
    s.record(RoundResult(winner=None, moves=tuple(range(1, 10))))
    s.record(RoundResult(winner=Mark.O, moves=(4, 1, 5, 2, 9, 3)))
    s.record(RoundResult(winner=Mark.X, moves=(7, 1, 8, 2, 9)))
    assert s.rounds == 4
    assert s.ties == 1
    assert s.wins() == {Mark.X: 2, Mark.O: 1}
    assert s.summary_lines() == ["Rounds played: 4", "X wins: 2  O wins: 1  Ties: 1"]
