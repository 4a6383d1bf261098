from __future__ import annotations

from typing import TYPE_CHECKING

from .piece import Piece
from .types import Color, PieceKind, FILES

if TYPE_CHECKING:
    from .board import Board

BACK_RANK = (
    PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
    PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
)

def setup_standard(board: "Board") -> None:
    for col, kind in enumerate(BACK_RANK):
        # Black
        board.place((0, col), Piece(kind, Color.BLACK))
        board.place((1, col), Piece(PieceKind.PAWN, Color.BLACK))
        # White
        board.place((6, col), Piece(PieceKind.PAWN, Color.WHITE))
        board.place((7, col), Piece(kind, Color.WHITE))

def ascii_board(board: "Board") -> str:
    header = "  " + "  ".join(FILES)
    rows = [header]
    for r, cells in enumerate(board.snapshot()):
        label = str(8 - r)
        row = label + " " + "".join((tag or ". ") + " " for tag in cells)
        rows.append(row + label)
    rows.append(header)
    return "\n".join(rows)
