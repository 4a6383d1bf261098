from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .errors import IllegalMoveError, NoPieceAtSourceError
from .piece import Piece
from .rules import RULES
from .setup import setup_standard
from .types import PieceKind, Square, in_bounds, square_name

LOGGER = logging.getLogger(__name__)

Snapshot = Tuple[Tuple[Optional[str], ...], ...]

class MoveResult(str, Enum):
    OK = "ok"
    WIN = "win"

class Board:
    """8x8 grid of optional pieces. Owns every piece on it; moves relocate references."""

    def __init__(self, standard: bool = True) -> None:
        self._grid: List[List[Optional[Piece]]] = [[None] * 8 for _ in range(8)]
        if standard:
            setup_standard(self)

    @classmethod
    def empty(cls) -> "Board":
        return cls(standard=False)

    def piece_at(self, s: Square) -> Optional[Piece]:
        row, col = s
        if not in_bounds(row, col):
            return None
        return self._grid[row][col]

    def place(self, s: Square, p: Piece) -> None:
        row, col = s
        if not in_bounds(row, col):
            raise ValueError(f"Square {s} is off the board")
        self._grid[row][col] = p

    def clear(self, s: Square) -> None:
        row, col = s
        if not in_bounds(row, col):
            raise ValueError(f"Square {s} is off the board")
        self._grid[row][col] = None

    def pieces(self) -> Iterator[Tuple[Square, Piece]]:
        for row in range(8):
            for col in range(8):
                p = self._grid[row][col]
                if p is not None:
                    yield (row, col), p

    def snapshot(self) -> Snapshot:
        return tuple(
            tuple(p.tag if p is not None else None for p in row)
            for row in self._grid
        )

    def is_valid_move(self, piece: Piece, start: Square, end: Square, first_move: bool = False) -> bool:
        if not in_bounds(*end):
            return False
        target = self.piece_at(end)
        if target is not None and target.color is piece.color:
            return False
        return RULES[piece.kind].allows(self, piece, start, end, first_move)

    def move_piece(self, start: Square, end: Square, first_move: bool = False) -> MoveResult:
        moved = self.piece_at(start)
        if moved is None:
            raise NoPieceAtSourceError()
        if not self.is_valid_move(moved, start, end, first_move):
            raise IllegalMoveError()

        # king capture ends the game on the spot; the board is left as it was
        captured = self.piece_at(end)
        if captured is not None and captured.kind is PieceKind.KING:
            LOGGER.debug("%s %s takes king on %s", moved, square_name(start), square_name(end))
            return MoveResult.WIN

        self._grid[end[0]][end[1]] = moved
        self._grid[start[0]][start[1]] = None
        LOGGER.debug("%s %s-%s%s", moved, square_name(start), square_name(end),
                     f" x{captured}" if captured is not None else "")

        # promotion is not colour checked: either back rank promotes
        if moved.kind is PieceKind.PAWN and end[0] in (0, 7):
            self._grid[end[0]][end[1]] = Piece(PieceKind.QUEEN, moved.color)
            LOGGER.debug("%s promoted on %s", moved, square_name(end))

        return MoveResult.OK
