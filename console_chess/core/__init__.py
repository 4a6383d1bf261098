from .types import Color, PieceKind, Square, in_bounds, square_name
from .errors import (
    ChessError, NoPieceAtSourceError, IllegalMoveError,
    InvalidInputFormatError, InvalidPieceSelectionError,
)
from .piece import Piece
from .rules import MoveRule, StepRule, SlideRule, PawnRule, RULES
from .board import Board, MoveResult
from .setup import setup_standard, ascii_board
from .game import Game

__all__ = [
    "Color","PieceKind","Square","in_bounds","square_name",
    "ChessError","NoPieceAtSourceError","IllegalMoveError",
    "InvalidInputFormatError","InvalidPieceSelectionError",
    "Piece",
    "MoveRule","StepRule","SlideRule","PawnRule","RULES",
    "Board","MoveResult",
    "setup_standard","ascii_board",
    "Game",
]
