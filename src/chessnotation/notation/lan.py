"""Long algebraic notation (``e2e4``, ``e7e8q``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessnotation.core.enums import CastlingSide, PieceType
from chessnotation.core.move import Move
from chessnotation.notation.symbols import (
    piece_symbol,
    piece_type_from_symbol,
    square_from_string,
    square_string,
)

if TYPE_CHECKING:
    from chessnotation.notation.oracle import NotationBoard

_LOGGER = logging.getLogger(__name__)

# Index displacement of a castling king in the standard geometry.
_CASTLING_OFFSETS: dict[int, CastlingSide] = {
    -3: CastlingSide.QUEEN_SIDE,
    -2: CastlingSide.QUEEN_SIDE,
    2: CastlingSide.KING_SIDE,
    3: CastlingSide.KING_SIDE,
}


def move_to_lan(move: Move) -> str:
    """Source square + target square + lowercase promotion letter."""
    lan = square_string(move.source) + square_string(move.target)
    if move.promotion is not None:
        lan += piece_symbol(move.promotion).lower()
    return lan


def move_from_lan(position: NotationBoard, lan: str) -> Move | None:
    """Build a :class:`Move` from LAN text, or ``None`` if it is malformed.

    Decoding is structural: the squares and promotion letter are checked,
    castling is inferred from king geometry, and legality is left to the
    caller.
    """
    if not 4 <= len(lan) <= 5:
        _LOGGER.debug("Rejected LAN %r: wrong length", lan)
        return None

    source = square_from_string(lan[0:2])
    target = square_from_string(lan[2:4])
    if source is None or target is None:
        _LOGGER.debug("Rejected LAN %r: invalid square", lan)
        return None

    promotion: PieceType | None = None
    if len(lan) == 5:
        promotion = piece_type_from_symbol(lan[4].upper())
        if promotion is None:
            _LOGGER.debug("Rejected LAN %r: invalid promotion piece", lan)
            return None

    castling_side: CastlingSide | None = None
    mover = position.piece_at(source)
    if (
        mover is not None
        and mover.piece_type == PieceType.KING
        and mover.color == position.side_to_move
    ):
        castling_side = _CASTLING_OFFSETS.get(target - source)

    return Move(source, target, promotion, castling_side)
