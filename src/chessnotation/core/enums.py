"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds, side-agnostic."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(IntEnum):
    """Which rook the king castles with."""

    QUEEN_SIDE = 0
    KING_SIDE = 1


class MoveNotation(Enum):
    """Human-readable move formats understood by the codec."""

    STANDARD_ALGEBRAIC = "san"
    LONG_ALGEBRAIC = "lan"
