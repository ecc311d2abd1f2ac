"""FEN parsing and serialization, including Shredder/X-FEN castling fields."""

from __future__ import annotations

from chessnotation.core.board import Board
from chessnotation.core.enums import CastlingSide, Color, PieceType
from chessnotation.core.piece import Piece
from chessnotation.core.position import NO_CASTLING, CastlingRooks, Position, back_rank
from chessnotation.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDE_LETTERS: dict[str, CastlingSide] = {
    "k": CastlingSide.KING_SIDE,
    "q": CastlingSide.QUEEN_SIDE,
}


def _rook_files(board: Board, color: Color) -> list[int]:
    rank = back_rank(color)
    rook = Piece(color, PieceType.ROOK)
    return [f for f in range(8) if board[make_square(f, rank)] == rook]


def _parse_castling(board: Board, castling_part: str) -> CastlingRooks:
    if castling_part == "-":
        return NO_CASTLING

    def invalid() -> ValueError:
        return ValueError(f"Invalid FEN castling field: {castling_part!r}")

    rooks: list[list[Square | None]] = [[None, None], [None, None]]
    for ch in castling_part:
        color = Color.WHITE if ch.isupper() else Color.BLACK
        letter = ch.lower()
        rank = back_rank(color)
        if not board.has_king(color) or rank_of(board.king_square(color)) != rank:
            raise invalid()
        king_file = file_of(board.king_square(color))
        files = _rook_files(board, color)

        if letter in _SIDE_LETTERS:
            side = _SIDE_LETTERS[letter]
            if side == CastlingSide.KING_SIDE:
                candidates = [f for f in files if f > king_file]
                rook_file = max(candidates) if candidates else None
            else:
                candidates = [f for f in files if f < king_file]
                rook_file = min(candidates) if candidates else None
        elif "a" <= letter <= "h":
            rook_file = ord(letter) - ord("a")
            if rook_file not in files or rook_file == king_file:
                raise invalid()
            if rook_file > king_file:
                side = CastlingSide.KING_SIDE
            else:
                side = CastlingSide.QUEEN_SIDE
        else:
            raise invalid()

        if rook_file is None or rooks[int(color)][side] is not None:
            raise invalid()
        rooks[int(color)][side] = make_square(rook_file, rank)

    return (
        (rooks[0][0], rooks[0][1]),
        (rooks[1][0], rooks[1][1]),
    )


def position_from_fen(fen: str, *, chess960: bool = False) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The castling field may use ``KQkq`` or Shredder-FEN rook files
    (``HAha``). Pass ``chess960=True`` for random-start games.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling_rooks = _parse_castling(board, castling_part)

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    halfmove = int(parts[4]) if len(parts) > 4 else 0
    if halfmove < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    fullmove = int(parts[5]) if len(parts) > 5 else 1
    if fullmove < 1:
        raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return Position(
        board, side, castling_rooks, ep, halfmove, fullmove, is_random=chess960
    )


def _castling_to_fen(pos: Position) -> str:
    text = ""
    for color in (Color.WHITE, Color.BLACK):
        files = _rook_files(pos.board, color)
        for side in (CastlingSide.KING_SIDE, CastlingSide.QUEEN_SIDE):
            rook_sq = pos.castling_rooks[int(color)][side]
            if rook_sq is None:
                continue
            rook_file = file_of(rook_sq)
            outermost = max(files) if side == CastlingSide.KING_SIDE else min(files)
            if rook_file == outermost:
                letter = "k" if side == CastlingSide.KING_SIDE else "q"
            else:
                letter = chr(ord("a") + rook_file)
            text += letter.upper() if color == Color.WHITE else letter
    return text or "-"


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {_castling_to_fen(pos)} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
