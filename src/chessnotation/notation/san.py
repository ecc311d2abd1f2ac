"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessnotation.core.enums import CastlingSide, PieceType
from chessnotation.core.move import Move
from chessnotation.core.types import Square, file_of, make_square, rank_of
from chessnotation.notation.models import DEFAULT_OPTIONS, NotationOptions
from chessnotation.notation.symbols import (
    FILE_LETTERS,
    file_index,
    piece_symbol,
    piece_type_from_symbol,
    rank_index,
    square_from_string,
    square_string,
)

if TYPE_CHECKING:
    from chessnotation.notation.oracle import NotationBoard

_LOGGER = logging.getLogger(__name__)

_ANNOTATION_CHARS = "+#!?"
_CASTLING: dict[str, CastlingSide] = {
    "O-O": CastlingSide.KING_SIDE,
    "O-O-O": CastlingSide.QUEEN_SIDE,
}
_ZERO_CASTLING: dict[str, CastlingSide] = {
    "0-0": CastlingSide.KING_SIDE,
    "0-0-0": CastlingSide.QUEEN_SIDE,
}
_CASTLING_TEXT: dict[CastlingSide, str] = {v: k for k, v in _CASTLING.items()}


def _is_capture(position: NotationBoard, piece_type: PieceType, target: Square) -> bool:
    """Whether moving *piece_type* onto *target* captures, en passant included."""
    victim = position.piece_at(target)
    if victim is not None:
        return victim.color != position.side_to_move
    return piece_type == PieceType.PAWN and target == position.en_passant


# ── Encoding ─────────────────────────────────────────────────────────────────


def _check_suffix(position: NotationBoard, move: Move) -> str:
    position.make_move(move)
    try:
        if not position.is_in_check(position.side_to_move):
            return ""
        return "+" if position.legal_moves() else "#"
    finally:
        position.undo_move()


def _disambiguation(position: NotationBoard, move: Move, piece_type: PieceType) -> str:
    need_file = False
    need_rank = False
    for other in position.legal_moves():
        if other.source == move.source or other.target != move.target:
            continue
        mover = position.piece_at(other.source)
        if mover is None or mover.piece_type != piece_type:
            continue
        if file_of(other.source) != file_of(move.source):
            need_file = True
        elif rank_of(other.source) != rank_of(move.source):
            need_rank = True

    qualifier = ""
    if need_file:
        qualifier += FILE_LETTERS[file_of(move.source)]
    if need_rank:
        qualifier += str(rank_of(move.source) + 1)
    return qualifier


def move_to_san(
    position: NotationBoard,
    move: Move,
    options: NotationOptions | None = None,
) -> str:
    """Convert a legal *move* to SAN given the *position* before the move."""
    options = options or DEFAULT_OPTIONS
    piece = position.piece_at(move.source)
    if piece is None:
        raise ValueError(f"No piece on {square_string(move.source)} for {move}")

    suffix = _check_suffix(position, move)

    if piece.piece_type == PieceType.KING and move.castling_side is not None:
        return _CASTLING_TEXT[move.castling_side] + suffix

    is_capture = _is_capture(position, piece.piece_type, move.target)
    san = ""
    if piece.piece_type == PieceType.PAWN:
        if is_capture:
            san += FILE_LETTERS[file_of(move.source)]
    else:
        san += piece_symbol(piece.piece_type)
        if piece.piece_type != PieceType.KING:
            san += _disambiguation(position, move, piece.piece_type)

    if is_capture:
        san += "x"

    san += square_string(move.target)

    if move.promotion is not None:
        san += options.promotion_separator + piece_symbol(move.promotion)

    return san + suffix


# ── Parsing ──────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class _SanFields:
    """Everything a SAN token says about a move, before legality lookup."""

    piece_type: PieceType
    target: Square
    from_file: int | None = None
    from_rank: int | None = None
    is_capture: bool = False
    promotion: PieceType | None = None


class _SanParser:
    """Recursive-descent parser for one SAN token without its suffixes.

    Grammar::

        san        := piece_letter? body promotion?
        body       := destination | qualifier capture? destination
        qualifier  := file? rank?
        promotion  := ('=' | '(')? piece_letter ')'?

    A lone ``file rank`` qualifier with nothing after it is the destination
    itself (``Nf3``, ``Kd2``).
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _fail(self, reason: str) -> ValueError:
        return ValueError(f"Invalid SAN {self._text!r}: {reason}")

    def parse(self) -> _SanFields:
        piece_type, target = self._piece_letter()
        if target is not None:
            return _SanFields(piece_type, target, promotion=self._promotion())

        from_file, from_rank = self._qualifier()
        if self._at_end():
            if from_file is None or from_rank is None:
                raise self._fail("missing destination square")
            return _SanFields(piece_type, make_square(from_file, from_rank))

        is_capture = self._capture()
        target = self._destination()
        return _SanFields(
            piece_type,
            target,
            from_file=from_file,
            from_rank=from_rank,
            is_capture=is_capture,
            promotion=self._promotion(),
        )

    def _piece_letter(self) -> tuple[PieceType, Square | None]:
        first = self._peek()
        if first in ("x", "P"):
            raise self._fail("cannot start with a capture mark or pawn letter")

        piece_type = piece_type_from_symbol(first)
        if piece_type is not None:
            self._pos += 1
            return piece_type, None

        # Pawn shorthand: the first two characters may already be the target.
        target = square_from_string(self._text[:2])
        if target is not None:
            self._pos = 2
        return PieceType.PAWN, target

    def _qualifier(self) -> tuple[int | None, int | None]:
        from_file = file_index(self._peek())
        if from_file is not None:
            self._pos += 1
            if self._at_end():
                raise self._fail("missing destination square")

        from_rank: int | None = None
        if self._peek().isdigit():
            from_rank = rank_index(self._peek())
            if from_rank is None:
                raise self._fail("rank out of range")
            self._pos += 1
        return from_file, from_rank

    def _capture(self) -> bool:
        if self._peek() != "x":
            return False
        self._pos += 1
        if self._at_end():
            raise self._fail("missing destination after capture mark")
        return True

    def _destination(self) -> Square:
        if self._pos + 2 > len(self._text):
            raise self._fail("missing destination square")
        target = square_from_string(self._text[self._pos : self._pos + 2])
        if target is None:
            raise self._fail("invalid destination square")
        self._pos += 2
        return target

    def _promotion(self) -> PieceType | None:
        if self._at_end():
            return None

        opener = self._peek()
        if opener in ("=", "("):
            self._pos += 1
            if self._at_end():
                raise self._fail("missing promotion piece")

        promotion = piece_type_from_symbol(self._peek())
        if promotion is None:
            raise self._fail("invalid promotion piece")
        self._pos += 1

        if opener == "(" and self._peek() == ")":
            self._pos += 1
        if not self._at_end():
            raise self._fail("unexpected trailing characters")
        return promotion


def _matches(position: NotationBoard, move: Move, fields: _SanFields) -> bool:
    if move.castling_side is not None:
        return False
    if move.target != fields.target or move.promotion != fields.promotion:
        return False
    if fields.from_file is not None and file_of(move.source) != fields.from_file:
        return False
    if fields.from_rank is not None and rank_of(move.source) != fields.from_rank:
        return False
    mover = position.piece_at(move.source)
    return mover is not None and mover.piece_type == fields.piece_type


def _parse_castling(
    position: NotationBoard,
    san: str,
    side: CastlingSide,
) -> Move:
    color = position.side_to_move
    move = Move(
        position.king_square(color),
        position.castle_target(color, side),
        castling_side=side,
    )
    if move not in position.legal_moves():
        raise ValueError(f"Illegal move: {san}")
    return move


def parse_san(
    position: NotationBoard,
    san: str,
    options: NotationOptions | None = None,
) -> Move:
    """Parse a SAN string into a legal :class:`Move` for *position*.

    Raises :class:`ValueError` when the text is malformed, disagrees with the
    board about capturing, matches no legal move, or matches several.
    """
    options = options or DEFAULT_OPTIONS
    clean = san.rstrip(_ANNOTATION_CHARS)
    if len(clean) < 2:
        raise ValueError(f"Invalid SAN {san!r}: too short")

    castles = dict(_CASTLING)
    if options.accept_zero_castling:
        castles.update(_ZERO_CASTLING)
    if clean in castles:
        return _parse_castling(position, san, castles[clean])
    if any(clean.startswith(text) for text in castles):
        raise ValueError(f"Invalid SAN {san!r}: malformed castling")

    fields = _SanParser(clean).parse()

    if fields.is_capture != _is_capture(position, fields.piece_type, fields.target):
        raise ValueError(f"Invalid SAN {san!r}: capture mark disagrees with the board")

    candidates = [m for m in position.legal_moves() if _matches(position, m, fields)]
    if not candidates:
        raise ValueError(f"Illegal move: {san}")
    if len(candidates) > 1:
        listed = ", ".join(str(m) for m in candidates)
        raise ValueError(f"Ambiguous move: {san} matches {listed}")
    return candidates[0]


def move_from_san(
    position: NotationBoard,
    san: str,
    options: NotationOptions | None = None,
) -> Move | None:
    """Like :func:`parse_san` but returns ``None`` instead of raising."""
    try:
        return parse_san(position, san, options)
    except ValueError as exc:
        _LOGGER.debug("Rejected SAN %r: %s", san, exc)
        return None
