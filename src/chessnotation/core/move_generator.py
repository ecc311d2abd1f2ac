"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessnotation.core.enums import CastlingSide, Color, PieceType
from chessnotation.core.move import Move
from chessnotation.core.types import (
    SQUARE_COUNT,
    Square,
    file_of,
    is_valid_coord,
    make_square,
    rank_of,
)

if TYPE_CHECKING:
    from chessnotation.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Rank step, double-push start rank and promotion rank per colour.
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 1, 7),
    Color.BLACK: (-1, 6, 0),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(SQUARE_COUNT):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        targets.append(
            tuple(
                make_square(file_idx + df, rank_idx + dr)
                for df, dr in offsets
                if is_valid_coord(file_idx + df, rank_idx + dr)
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(SQUARE_COUNT):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            ray: list[Square] = []
            while is_valid_coord(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
# Squares a pawn of the given colour must stand on to attack a square.
_PAWN_ATTACKERS = {
    Color.WHITE: _build_targets(((-1, -1), (1, -1))),
    Color.BLACK: _build_targets(((-1, 1), (1, 1))),
}
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    The generator mutates the position via ``make_move`` / ``undo_move``
    internally but always restores it before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        legal: list[Move] = []
        moving_color = self._pos.side_to_move

        for move in self.generate_pseudo_legal_moves():
            self._pos.make_move(move)
            try:
                if not self.is_in_check(moving_color):
                    legal.append(move)
            finally:
                self._pos.undo_move()
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._pos.side_to_move

        for sq, piece in list(self._board.occupied(color)):
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(sq, color, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_steps(sq, color, _KNIGHT_TARGETS[sq], moves)
            elif ptype == PieceType.KING:
                self._gen_steps(sq, color, _KING_TARGETS[sq], moves)
                self._gen_castling(sq, color, moves)
            else:
                self._gen_sliding(sq, color, _SLIDER_RAYS[ptype][sq], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        board = self._board

        for attacker_types, origins in (
            ((PieceType.PAWN,), _PAWN_ATTACKERS[by_color][sq]),
            ((PieceType.KNIGHT,), _KNIGHT_TARGETS[sq]),
            ((PieceType.KING,), _KING_TARGETS[sq]),
        ):
            for from_sq in origins:
                piece = board[from_sq]
                if (
                    piece is not None
                    and piece.color == by_color
                    and piece.piece_type in attacker_types
                ):
                    return True

        for rays, attacker_types in (
            (_BISHOP_RAYS[sq], (PieceType.BISHOP, PieceType.QUEEN)),
            (_ROOK_RAYS[sq], (PieceType.ROOK, PieceType.QUEEN)),
        ):
            for ray in rays:
                for to_sq in ray:
                    piece = board[to_sq]
                    if piece is None:
                        continue
                    if piece.color == by_color and piece.piece_type in attacker_types:
                        return True
                    break

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step, start_rank, promo_rank = _PAWN_GEOMETRY[color]
        file_idx = file_of(sq)
        next_rank = rank_of(sq) + step
        if not 0 <= next_rank < 8:
            return

        def add(to_sq: Square) -> None:
            if next_rank == promo_rank:
                for pt in PROMOTION_TYPES:
                    moves.append(Move(sq, to_sq, promotion=pt))
            else:
                moves.append(Move(sq, to_sq))

        one_step = make_square(file_idx, next_rank)
        if board.is_empty(one_step):
            add(one_step)
            if rank_of(sq) == start_rank:
                two_step = make_square(file_idx, next_rank + step)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            if not 0 <= file_idx + df < 8:
                continue
            cap_sq = make_square(file_idx + df, next_rank)
            target = board[cap_sq]
            if target is not None and target.color != color:
                add(cap_sq)
            elif target is None and cap_sq == self._pos.en_passant:
                moves.append(Move(sq, cap_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        """Castling for both standard and Chess960 geometry.

        Every square between the king, the rook and their destinations must be
        empty apart from those two pieces, and the king may not start in, pass
        through or land on an attacked square.
        """
        rooks = self._pos.castling_rooks[int(color)]
        if all(rook_sq is None for rook_sq in rooks):
            return
        if self.is_in_check(color):
            return

        board = self._board
        opponent = color.opposite
        back_rank = rank_of(king_sq)

        for side in CastlingSide:
            rook_sq = rooks[side]
            if rook_sq is None or rank_of(rook_sq) != back_rank:
                continue
            rook = board[rook_sq]
            if rook is None or rook.color != color or rook.piece_type != PieceType.ROOK:
                continue

            king_to = self._pos.castle_target(color, side)
            rook_to = self._pos.castle_rook_target(color, side)
            span = (king_sq, king_to, rook_sq, rook_to)
            if any(
                not board.is_empty(between)
                for between in range(min(span), max(span) + 1)
                if between not in (king_sq, rook_sq)
            ):
                continue

            # Lift the king so it cannot shield the squares it walks over.
            step = 1 if king_to >= king_sq else -1
            king = board[king_sq]
            board[king_sq] = None
            try:
                path_attacked = any(
                    self.is_square_attacked(path_sq, opponent)
                    for path_sq in range(king_sq + step, king_to + step, step)
                )
            finally:
                board[king_sq] = king
            if path_attacked:
                continue

            moves.append(Move(king_sq, king_to, castling_side=side))
