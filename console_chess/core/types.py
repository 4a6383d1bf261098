from __future__ import annotations

from enum import Enum
from typing import Tuple

# (row, col); row 0 is rank 8, row 7 is rank 1
Square = Tuple[int, int]

class Color(Enum):
    WHITE = "W"
    BLACK = "B"

    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        # row delta of a pawn step
        return -1 if self is Color.WHITE else 1

class PieceKind(Enum):
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

FILES = "abcdefgh"

# deltas as (drow, dcol)
ORTH = ((1,0),(-1,0),(0,1),(0,-1))
DIAG = ((1,1),(1,-1),(-1,1),(-1,-1))
KNIGHT_DELTAS = ((1,2),(2,1),(2,-1),(1,-2),(-1,-2),(-2,-1),(-2,1),(-1,2))
KING8 = ORTH + DIAG

def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8

def square_name(s: Square) -> str:
    row, col = s
    return f"{FILES[col]}{8 - row}"

def sign(n: int) -> int:
    return (n > 0) - (n < 0)
