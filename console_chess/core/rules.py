from __future__ import annotations

from typing import Dict, Iterable, Tuple, TYPE_CHECKING

from .types import PieceKind, Square, ORTH, DIAG, KNIGHT_DELTAS, KING8, sign

if TYPE_CHECKING:
    from .board import Board
    from .piece import Piece

class MoveRule:
    """How a piece kind may travel. Bounds and self-capture are checked by the board first."""

    def allows(self, board: "Board", piece: "Piece", start: Square, end: Square, first_move: bool) -> bool:
        return False

class StepRule(MoveRule):
    """Single jump by one of a fixed set of deltas; nothing in between matters."""

    def __init__(self, deltas: Iterable[Tuple[int,int]]):
        self.deltas = frozenset(deltas)

    def allows(self, board, piece, start, end, first_move):
        return (end[0] - start[0], end[1] - start[1]) in self.deltas

class SlideRule(MoveRule):
    """Ride along a line in one of the given directions until the destination."""

    def __init__(self, directions: Iterable[Tuple[int,int]]):
        self.directions = frozenset(directions)

    def allows(self, board, piece, start, end, first_move):
        dr, dc = end[0] - start[0], end[1] - start[1]
        if dr != 0 and dc != 0 and abs(dr) != abs(dc):
            return False
        step = (sign(dr), sign(dc))
        if step not in self.directions:
            return False
        return path_clear(board, start, end, step)

class PawnRule(MoveRule):
    def allows(self, board, piece, start, end, first_move):
        direction = piece.color.forward
        dr, dc = end[0] - start[0], end[1] - start[1]
        target = board.piece_at(end)

        # forward 1
        if dc == 0 and dr == direction and target is None:
            return True
        # forward 2, only while the mover's first-move flag is up
        if first_move and dc == 0 and dr == 2 * direction and target is None:
            return board.piece_at((start[0] + direction, start[1])) is None
        # captures
        return abs(dc) == 1 and dr == direction and target is not None

def path_clear(board: "Board", start: Square, end: Square, step: Tuple[int,int]) -> bool:
    """True when every square strictly between start and end is empty, whatever the blocker's colour."""
    r, c = start[0] + step[0], start[1] + step[1]
    while (r, c) != end:
        if board.piece_at((r, c)) is not None:
            return False
        r += step[0]
        c += step[1]
    return True

RULES: Dict[PieceKind, MoveRule] = {
    PieceKind.PAWN: PawnRule(),
    PieceKind.KNIGHT: StepRule(KNIGHT_DELTAS),
    PieceKind.BISHOP: SlideRule(DIAG),
    PieceKind.ROOK: SlideRule(ORTH),
    PieceKind.QUEEN: SlideRule(KING8),
    PieceKind.KING: StepRule(KING8),
}
