"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessnotation.core import MoveGenerator
    from chessnotation.notation import STARTING_FEN, position_from_fen

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
"""

from chessnotation.core.board import Board
from chessnotation.core.enums import CastlingSide, Color, MoveNotation, PieceType
from chessnotation.core.move import Move
from chessnotation.core.move_generator import MoveGenerator
from chessnotation.core.piece import Piece
from chessnotation.core.position import Position
from chessnotation.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "MoveNotation",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
]
