from __future__ import annotations

from dataclasses import dataclass

from .types import Color, PieceKind

@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @property
    def tag(self) -> str:
        """Two-letter display tag, colour then kind: 'WP', 'BQ'."""
        return f"{self.color.value}{self.kind.value}"

    def __str__(self) -> str:
        return self.tag
