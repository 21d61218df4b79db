import io
import os
import subprocess
import sys
from pathlib import Path

from tictactoe.cli import GameOptions, main, play_round, run_session
from tictactoe.game_basics import Board, GameState, Mark
from tictactoe.render import render_board
from termio import TokenReader

ROOT = Path(__file__).resolve().parents[1]


def _session(script: str, **opts):
    out = io.StringIO()
    stats = run_session(io.StringIO(script), out, GameOptions(**opts))
    return stats, out.getvalue()


def test_x_wins_top_row():
    stats, text = _session("1\n5\n2\n6\n3\nn\n")
    assert "Player X wins!" in text
    assert "Total moves: 5" in text
    assert "Move history: 1 5 2 6 3" in text
    assert stats.rounds == 1
    assert stats.results[0].winner is Mark.X


def test_tie_round():
    stats, text = _session("1\n2\n3\n5\n4\n6\n8\n7\n9\nN\n")
    assert "It's a tie!" in text
    assert stats.ties == 1
    assert "X wins: 0  O wins: 0  Ties: 1" in text


def test_invalid_moves_do_not_advance_turn():
    board = Board()
    out = io.StringIO()
    reader = TokenReader(io.StringIO("0\n10\nfoo bar\n1\n1\n4\n2\n5\n3\n"))
    result = play_round(board, reader, out, GameOptions())
    text = out.getvalue()
    assert text.count("Invalid move. Try again.") == 3
    assert text.count("Invalid input.") == 1
    assert result.winner is Mark.X
    assert result.moves == (1, 4, 2, 5, 3)
    assert board.state is GameState.WON


def test_replay_starts_fresh_round():
    stats, text = _session("1\n5\n2\n6\n3\nmaybe\ny\n4\n1\n5\n2\n9\n3\nn\n")
    assert "Please answer y or n." in text
    assert stats.rounds == 2
    assert [r.winner for r in stats.results] == [Mark.X, Mark.O]
    assert "X wins: 1  O wins: 1  Ties: 0" in text
    assert text.count("Welcome to Tic-Tac-Toe!") == 1


def test_eof_mid_round():
    stats, text = _session("1\n5\n")
    assert stats.rounds == 0
    assert "Thanks for playing!" in text


def test_no_stats_option():
    _, text = _session("1\n5\n2\n6\n3\nn\n", show_stats=False)
    assert "Total moves" not in text
    assert "Rounds played" not in text


def test_render_plain_and_color():
    b = Board()
    b.apply_move(5)
    plain = render_board(b)
    assert plain == "\n 1 | 2 | 3 \n---|---|---\n 4 | X | 6 \n---|---|---\n 7 | 8 | 9 \n"
    colored = render_board(b, color=True)
    assert "\033[" in colored and "X" in colored


def test_main_defaults_to_plain_output_for_non_tty():
    out = io.StringIO()
    assert main([], stdin=io.StringIO("1\n5\n2\n6\n3\nn\n"), stdout=out) == 0
    assert "\033[" not in out.getvalue()


def test_cli_subprocess_transcript():
    r = subprocess.run(
        [sys.executable, "-m", "tictactoe.cli", "--no-color"],
        input="1\n5\n2\n6\n3\nn\n",
        capture_output=True,
        text=True,
        cwd=ROOT / "src",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )
    assert r.returncode == 0
    assert "Player X wins!" in r.stdout


def test_moves_on_one_line_are_played_in_order():
    stats, text = _session("1 5 2 6 3\nn\n")
    assert "Invalid" not in text
    assert stats.results[0].moves == (1, 5, 2, 6, 3)
    assert stats.results[0].winner is Mark.X


def test_malformed_move_drops_rest_of_line_only():
    # "x 9" is discarded whole; 9 is never played
    stats, text = _session("1\nx 9\n5\n2\n6\n3\nn\n")
    assert text.count("Invalid input.") == 1
    assert stats.results[0].moves == (1, 5, 2, 6, 3)
