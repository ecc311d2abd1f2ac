"""Notation package: FEN setup plus SAN / LAN move conversion."""

from chessnotation.notation.codec import move_from_string, move_to_string
from chessnotation.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessnotation.notation.lan import move_from_lan, move_to_lan
from chessnotation.notation.models import DEFAULT_OPTIONS, NotationOptions
from chessnotation.notation.oracle import NotationBoard
from chessnotation.notation.san import move_from_san, move_to_san, parse_san
from chessnotation.notation.symbols import (
    piece_symbol,
    piece_type_from_symbol,
    square_from_string,
    square_string,
)

__all__ = [
    "STARTING_FEN",
    "DEFAULT_OPTIONS",
    "NotationBoard",
    "NotationOptions",
    "position_from_fen",
    "position_to_fen",
    "move_to_string",
    "move_from_string",
    "move_to_san",
    "move_from_san",
    "parse_san",
    "move_to_lan",
    "move_from_lan",
    "piece_symbol",
    "piece_type_from_symbol",
    "square_string",
    "square_from_string",
]
