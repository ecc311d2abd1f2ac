"""Position — complete game state (board + metadata) with make/undo."""

from __future__ import annotations

from dataclasses import dataclass

from chessnotation.core.board import Board
from chessnotation.core.enums import CastlingSide, Color, PieceType
from chessnotation.core.move import Move
from chessnotation.core.move_generator import MoveGenerator
from chessnotation.core.piece import Piece
from chessnotation.core.types import Square, file_of, make_square, rank_of

# [color][CastlingSide] -> rook origin square, None once the right is gone.
_SideRooks = tuple[Square | None, Square | None]
CastlingRooks = tuple[_SideRooks, _SideRooks]

NO_CASTLING: CastlingRooks = ((None, None), (None, None))

# King and rook destination files per castling side (Chess960 keeps these).
_KING_TARGET_FILE: dict[CastlingSide, int] = {
    CastlingSide.QUEEN_SIDE: 2,
    CastlingSide.KING_SIDE: 6,
}
_ROOK_TARGET_FILE: dict[CastlingSide, int] = {
    CastlingSide.QUEEN_SIDE: 3,
    CastlingSide.KING_SIDE: 5,
}


def back_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    move: Move
    moved_piece: Piece
    castling_rooks: CastlingRooks
    en_passant: Square | None
    halfmove_clock: int
    captured_piece: Piece | None = None
    capture_square: Square | None = None
    rook_origin: Square | None = None


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Castling availability is stored as the origin square of each castling
    rook, indexed ``[color][CastlingSide]``, which covers both the standard
    start position and Chess960 (``is_random``) setups.

    Supports :meth:`make_move` / :meth:`undo_move` via an internal history
    stack, and satisfies the board protocol consumed by the notation codec.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling_rooks",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "is_random",
        "_history",
    )

    def __init__(
        self,
        board: Board,
        side_to_move: Color = Color.WHITE,
        castling_rooks: CastlingRooks = NO_CASTLING,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        is_random: bool = False,
    ) -> None:
        self.board = board
        self.side_to_move = side_to_move
        self.castling_rooks = castling_rooks
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.is_random = is_random
        self._history: list[_PositionState] = []

    # ── Board queries ────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def king_square(self, color: Color) -> Square:
        return self.board.king_square(color)

    def castle_target(self, color: Color, side: CastlingSide) -> Square:
        """Square the king lands on when *color* castles on *side*."""
        return make_square(_KING_TARGET_FILE[side], back_rank(color))

    def castle_rook_target(self, color: Color, side: CastlingSide) -> Square:
        """Square the rook lands on when *color* castles on *side*."""
        return make_square(_ROOK_TARGET_FILE[side], back_rank(color))

    def legal_moves(self) -> list[Move]:
        return MoveGenerator(self).generate_legal_moves()

    def is_in_check(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) is in check."""
        if color is None:
            color = self.side_to_move
        return MoveGenerator(self).is_in_check(color)

    @property
    def ply_count(self) -> int:
        """Number of moves currently on the undo stack."""
        return len(self._history)

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack."""
        board = self.board
        piece = board[move.source]
        if piece is None:
            raise ValueError(f"No piece on {move.source}")

        state = _PositionState(
            move=move,
            moved_piece=piece,
            castling_rooks=self.castling_rooks,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
        )

        if move.castling_side is not None:
            rook_sq = self.castling_rooks[int(piece.color)][move.castling_side]
            if rook_sq is None:
                raise ValueError(f"Castling not available: {move}")
            rook = board[rook_sq]
            # Lift both pieces first: in Chess960 the destinations may overlap
            # the origins.
            board[move.source] = None
            board[rook_sq] = None
            board[move.target] = piece
            board[self.castle_rook_target(piece.color, move.castling_side)] = rook
            state.rook_origin = rook_sq
        else:
            capture_sq = move.target
            captured = board[capture_sq]
            if (
                piece.piece_type == PieceType.PAWN
                and captured is None
                and move.target == self.en_passant
                and file_of(move.source) != file_of(move.target)
            ):
                capture_sq = make_square(file_of(move.target), rank_of(move.source))
                captured = board[capture_sq]

            board[move.source] = None
            if captured is not None:
                board[capture_sq] = None
            placed = piece
            if move.promotion is not None:
                placed = Piece(piece.color, move.promotion)
            board[move.target] = placed
            state.captured_piece = captured
            state.capture_square = capture_sq

        self._history.append(state)

        # En passant target for the opponent
        next_en_passant: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(rank_of(move.target) - rank_of(move.source)) == 2
        ):
            next_en_passant = make_square(
                file_of(move.source),
                (rank_of(move.source) + rank_of(move.target)) // 2,
            )
        self.en_passant = next_en_passant

        self._update_castling(move, piece)

        # Clocks
        if piece.piece_type == PieceType.PAWN or state.captured_piece is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite

    def undo_move(self) -> None:
        """Undo the last :meth:`make_move`."""
        if not self._history:
            raise ValueError("No move to undo")
        state = self._history.pop()
        move = state.move
        board = self.board

        self.side_to_move = self.side_to_move.opposite
        if self.side_to_move == Color.BLACK:
            self.fullmove_number -= 1

        if move.castling_side is not None:
            assert state.rook_origin is not None
            color = state.moved_piece.color
            rook_to = self.castle_rook_target(color, move.castling_side)
            rook = board[rook_to]
            board[move.target] = None
            board[rook_to] = None
            board[state.rook_origin] = rook
            board[move.source] = state.moved_piece
        else:
            board[move.target] = None
            board[move.source] = state.moved_piece
            if state.captured_piece is not None:
                assert state.capture_square is not None
                board[state.capture_square] = state.captured_piece

        self.castling_rooks = state.castling_rooks
        self.en_passant = state.en_passant
        self.halfmove_clock = state.halfmove_clock

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(self, move: Move, piece: Piece) -> None:
        rooks = [list(row) for row in self.castling_rooks]
        if piece.piece_type == PieceType.KING:
            rooks[int(piece.color)] = [None, None]

        for row in rooks:
            for side, rook_sq in enumerate(row):
                if rook_sq is not None and rook_sq in (move.source, move.target):
                    row[side] = None

        self.castling_rooks = (
            (rooks[0][0], rooks[0][1]),
            (rooks[1][0], rooks[1][1]),
        )

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling_rooks=self.castling_rooks,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            is_random=self.is_random,
        )

    def __repr__(self) -> str:
        header = f"Position(side_to_move={self.side_to_move}, is_random={self.is_random})"
        return f"{header}\n{self.board!r}"
