from __future__ import annotations

from typing import Tuple

from .core.errors import InvalidInputFormatError
from .core.types import FILES, Square


def _parse_pair(token: str) -> Square:
    parts = token.split(",")
    if len(parts) != 2:
        raise InvalidInputFormatError()
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidInputFormatError() from e


def _parse_algebraic(token: str) -> Square:
    if len(token) != 2 or token[0].lower() not in FILES or token[1] not in "0123456789":
        raise InvalidInputFormatError()
    return 8 - int(token[1]), FILES.index(token[0].lower())


def parse_move(text: str) -> Tuple[Square, Square]:
    """Parse 'b2 b3' or '6,1 5,1' into ((row, col), (row, col)).

    Coordinates are not range checked here; an off-board destination is the
    board's business and comes back as an illegal move.
    """
    parts = text.strip().split(" ")
    if len(parts) != 2:
        raise InvalidInputFormatError()

    if "," in parts[0]:
        return _parse_pair(parts[0]), _parse_pair(parts[1])
    return _parse_algebraic(parts[0]), _parse_algebraic(parts[1])


