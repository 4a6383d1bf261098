from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, List, Optional

from .core import Game, MoveResult, ascii_board, ChessError, InvalidPieceSelectionError

LOGGER = logging.getLogger(__name__)

PROMPT = "{turn}'s turn. Enter move (e.g. b2 b3 or 1,1 2,1): "
QUIT_WORDS = ("quit", "exit")


def _print_board(game: Game, write: Callable[[str], None]) -> None:
    write(ascii_board(game.board))
    write("")


def run_session(
    game: Game,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Prompt for moves until a king is captured, the player quits or input runs out."""
    _print_board(game, write)

    while True:
        turn = game.side_to_move.value
        try:
            line = read(PROMPT.format(turn=turn))
        except EOFError:
            return 0
        if line.strip().lower() in QUIT_WORDS:
            return 0

        try:
            result = game.play_text(line)
        except InvalidPieceSelectionError as e:
            write(str(e))
            continue
        except ChessError as e:
            write(f"Error: {e}")
            continue

        _print_board(game, write)
        if result is MoveResult.WIN:
            write(f"{turn} wins by capturing the King!")
            return 0


def cmd_play(args: argparse.Namespace) -> int:
    return run_session(Game())


def cmd_show(args: argparse.Namespace) -> int:
    g = Game()
    for text in args.moves:
        try:
            g.play_text(text)
        except ChessError as e:
            print(f"{text}: {e}")
            return 1
    print(ascii_board(g.board))
    print()
    if g.winner is not None:
        print(f"{g.winner.value} wins by capturing the King!")
    return 0


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise SystemExit(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="console-chess")
    ap.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("CONSOLE_CHESS_LOG_LEVEL", "WARNING"),
        help="logging level for stderr diagnostics",
    )
    sub = ap.add_subparsers(dest="cmd")

    pl = sub.add_parser("play", help="Two players at one console")
    pl.set_defaults(fn=cmd_play)

    ss = sub.add_parser("show", help="Replay moves from the start position and print the board")
    ss.add_argument("moves", nargs="*", help='moves such as "e2 e4" or "6,4 4,4"')
    ss.set_defaults(fn=cmd_show)

    args = ap.parse_args(argv)
    _configure_logging(args.log_level)
    fn = getattr(args, "fn", cmd_play)
    LOGGER.debug("running %s", args.cmd or "play")
    return int(fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
