from __future__ import annotations

import logging
from typing import Dict, Optional

from .board import Board, MoveResult
from .errors import ChessError, InvalidPieceSelectionError
from .types import Color, Square, square_name

LOGGER = logging.getLogger(__name__)

class Game:
    """Turn order and first-move bookkeeping around a Board.

    The first-move flag is kept per colour, not per pawn: whichever piece a
    side moves first, that side loses its double-step for the rest of the game.
    """

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board()
        self.side_to_move: Color = Color.WHITE
        self.first_move: Dict[Color, bool] = {Color.WHITE: True, Color.BLACK: True}
        self.winner: Optional[Color] = None

    @property
    def over(self) -> bool:
        return self.winner is not None

    def play(self, start: Square, end: Square) -> MoveResult:
        if self.over:
            raise ChessError("Game is over.")

        side = self.side_to_move
        piece = self.board.piece_at(start)
        if piece is None or piece.color is not side:
            LOGGER.debug("rejected selection %s for %s", start, side.name)
            raise InvalidPieceSelectionError()

        result = self.board.move_piece(start, end, self.first_move[side])
        self.first_move[side] = False

        if result is MoveResult.WIN:
            self.winner = side
            LOGGER.info("%s wins by king capture on %s", side.name, square_name(end))
        else:
            self.side_to_move = side.opponent()
        return result

    def play_text(self, line: str) -> MoveResult:
        from ..notation import parse_move
        start, end = parse_move(line)
        return self.play(start, end)
