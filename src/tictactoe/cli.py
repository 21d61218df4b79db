from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from termio import MalformedInput, TokenReader

from .game_basics import Board, Mark
from .render import paint_mark, render_board
from .tracking import RoundResult, SessionStats

WELCOME = (
    "Welcome to Tic-Tac-Toe!\n"
    "Two players take turns marking the grid, X first.\n"
    "Enter the number of a free cell (1-9); three in a row, column or diagonal wins."
)


@dataclass
class GameOptions:
    color: bool = False
    show_stats: bool = True
    first_player: Mark = Mark.X


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Two-player console tic-tac-toe")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Highlight marks with ANSI colours (default: on when stdout is a terminal)",
    )
    p.add_argument(
        "--no-stats",
        dest="show_stats",
        action="store_false",
        help="Do not print move statistics after rounds or the session summary",
    )
    return p


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def play_round(board: Board, reader: TokenReader, out: TextIO, options: GameOptions) -> RoundResult:
    """Play ``board`` from its current position to a win or a tie."""
    out.write(render_board(board, options.color))
    while True:
        player = paint_mark(board.current_player, options.color)
        _prompt(out, f"Player {player}, enter your move (1-9): ")
        try:
            move = reader.read_int()
        except MalformedInput:
            print("Invalid input. Please enter a number between 1 and 9.", file=out)
            continue
        if not board.is_valid_move(move):
            logging.debug("rejected move %s for %s", move, board.current_player.symbol)
            print("Invalid move. Try again.", file=out)
            continue

        board.apply_move(move)
        out.write(render_board(board, options.color))
        if board.check_win():
            print(f"Player {player} wins!", file=out)
            break
        if board.check_tie():
            print("It's a tie!", file=out)
            break
        board.switch_player()

    result = RoundResult.from_board(board)
    logging.debug("round over winner=%s moves=%s", result.winner, list(result.moves))
    if options.show_stats:
        print(f"Total moves: {result.total_moves}", file=out)
        print("Move history: " + " ".join(str(m) for m in result.moves), file=out)
    return result


def ask_replay(reader: TokenReader, out: TextIO) -> bool:
    while True:
        _prompt(out, "Play again? (y/n): ")
        answer = reader.read_char().lower()
        reader.discard_line()
        if answer == "y":
            return True
        if answer == "n":
            return False
        print("Please answer y or n.", file=out)


def run_session(stdin: TextIO, stdout: TextIO, options: Optional[GameOptions] = None) -> SessionStats:
    """Play rounds until the players decline a replay or input runs out."""
    options = options or GameOptions()
    reader = TokenReader(stdin)
    stats = SessionStats()
    print(WELCOME, file=stdout)
    try:
        while True:
            board = Board(options.first_player)
            stats.record(play_round(board, reader, stdout, options))
            if not ask_replay(reader, stdout):
                break
    except EOFError:
        logging.debug("input closed; ending session")
        print("", file=stdout)
    if options.show_stats and stats.rounds:
        for line in stats.summary_lines():
            print(line, file=stdout)
    print("Thanks for playing!", file=stdout)
    return stats


def main(argv: list[str] | None = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("console-demos"))
        except Exception:
            print("unknown")
        return 0

    out = stdout or sys.stdout
    color = ns.color
    if color is None:
        isatty = getattr(out, "isatty", None)
        color = bool(isatty and isatty())
    run_session(stdin or sys.stdin, out, GameOptions(color=color, show_stats=ns.show_stats))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
