"""Symbol table: piece letters and square strings used by SAN/LAN."""

from __future__ import annotations

from chessnotation.core.enums import PieceType
from chessnotation.core.types import Square, is_valid_coord, make_square, square_name

_PIECE_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SYMBOL_PIECES: dict[str, PieceType] = {v: k for k, v in _PIECE_SYMBOLS.items()}

FILE_LETTERS = "abcdefgh"


def piece_symbol(piece_type: PieceType) -> str:
    """Uppercase SAN letter for *piece_type*, e.g. KNIGHT → 'N'."""
    return _PIECE_SYMBOLS[piece_type]


def piece_type_from_symbol(symbol: str) -> PieceType | None:
    """Piece kind for an uppercase SAN letter, or ``None``."""
    return _SYMBOL_PIECES.get(symbol)


def file_index(letter: str) -> int | None:
    """File index for a lowercase file letter, or ``None``."""
    idx = FILE_LETTERS.find(letter) if len(letter) == 1 else -1
    return idx if idx >= 0 else None


def rank_index(digit: str) -> int | None:
    """Rank index for a rank digit, or ``None``."""
    if len(digit) != 1 or not "1" <= digit <= "8":
        return None
    return ord(digit) - ord("1")


def square_string(sq: Square) -> str:
    return square_name(sq)


def square_from_string(text: str) -> Square | None:
    """Square for a two-character name such as ``'e4'``, or ``None``."""
    if len(text) != 2:
        return None
    file = file_index(text[0])
    rank = rank_index(text[1])
    if file is None or rank is None or not is_valid_coord(file, rank):
        return None
    return make_square(file, rank)
