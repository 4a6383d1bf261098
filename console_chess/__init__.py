"""Console chess.

- core: rules engine (board, pieces, per-kind movement rules, turn bookkeeping)
- notation: move text parsing ("b2 b3" or "6,1 5,1")
- cli: interactive two-player loop
"""

from . import core
from .core import Board, Game, Piece, Color, PieceKind, MoveResult, ChessError
from .notation import parse_move

__all__ = [
    "core",
    "Board","Game","Piece","Color","PieceKind","MoveResult","ChessError",
    "parse_move",
]
