"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessnotation.core.enums import CastlingSide, PieceType
from chessnotation.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    A castling move is a king move with *castling_side* set; its target is
    the king's destination as configured by the position, which may equal
    the source in Chess960.
    """

    source: Square
    target: Square
    promotion: PieceType | None = None
    castling_side: CastlingSide | None = None

    @property
    def is_castling(self) -> bool:
        return self.castling_side is not None

    def __str__(self) -> str:
        text = f"{square_name(self.source)}{square_name(self.target)}"
        if self.castling_side is not None:
            text += f" ({self.castling_side.name.lower()})"
        elif self.promotion is not None:
            text += f"={self.promotion.name.lower()}"
        return text
