from __future__ import annotations


class ChessError(ValueError):
    """Base class for every rejected action; the message is user-facing."""


class NoPieceAtSourceError(ChessError):
    def __init__(self, msg: str = "No piece at start position.") -> None:
        super().__init__(msg)


class IllegalMoveError(ChessError):
    def __init__(self, msg: str = "Illegal move.") -> None:
        super().__init__(msg)


class InvalidInputFormatError(ChessError):
    def __init__(self, msg: str = "Invalid input format.") -> None:
        super().__init__(msg)


class InvalidPieceSelectionError(ChessError):
    def __init__(self, msg: str = "Invalid piece selection.") -> None:
        super().__init__(msg)
