"""Chess move notation: SAN / LAN encoding and decoding against a live position."""

from chessnotation.core import (
    CastlingSide,
    Color,
    Move,
    MoveNotation,
    PieceType,
    Position,
)
from chessnotation.notation import (
    STARTING_FEN,
    NotationOptions,
    move_from_string,
    move_to_string,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "CastlingSide",
    "Color",
    "Move",
    "MoveNotation",
    "NotationOptions",
    "PieceType",
    "Position",
    "STARTING_FEN",
    "move_from_string",
    "move_to_string",
    "position_from_fen",
    "position_to_fen",
]
