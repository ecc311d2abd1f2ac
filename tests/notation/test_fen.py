"""Tests for FEN parsing and serialisation."""

import pytest

from chessnotation.core.enums import CastlingSide, Color, PieceType
from chessnotation.core.piece import Piece
from chessnotation.core.types import A1, A8, B1, E1, E3, E8, H1, H8
from chessnotation.notation import STARTING_FEN, position_from_fen, position_to_fen


class TestFenParsing:
    def test_starting_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE

    def test_starting_castling(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.castling_rooks == ((A1, H1), (A8, H8))

    def test_starting_en_passant(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.en_passant is None

    def test_starting_clocks(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_starting_kings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_not_random_by_default(self) -> None:
        assert not position_from_fen(STARTING_FEN).is_random

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        pos = position_from_fen(fen)
        assert pos.en_passant == E3

    def test_no_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling_rooks == ((None, None), (None, None))

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        pos = position_from_fen(fen)
        assert pos.castling_rooks == ((None, H1), (A8, None))

    def test_shredder_castling_letters(self) -> None:
        pos = position_from_fen("1r4kr/8/8/8/8/8/8/1R4KR w HBhb - 0 1", chess960=True)
        assert pos.is_random
        white = pos.castling_rooks[int(Color.WHITE)]
        assert white[CastlingSide.QUEEN_SIDE] == B1
        assert white[CastlingSide.KING_SIDE] == H1

    def test_clocks_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_invalid_fen_raises(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("invalid")

    def test_invalid_side_to_move_raises(self) -> None:
        with pytest.raises(ValueError, match="side-to-move"):
            position_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_invalid_board_rank_count_raises(self) -> None:
        with pytest.raises(ValueError, match="8 ranks"):
            position_from_fen("8/8/8/8/8/8/8 w - - 0 1")

    def test_invalid_board_rank_width_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid FEN"):
            position_from_fen("9/8/8/8/8/8/8/8 w - - 0 1")

    def test_invalid_piece_raises(self) -> None:
        with pytest.raises(ValueError, match="piece character"):
            position_from_fen("4k3/8/8/8/8/8/8/4X3 w - - 0 1")

    def test_invalid_castling_field_raises(self) -> None:
        with pytest.raises(ValueError, match="castling"):
            position_from_fen("8/8/8/8/8/8/8/8 w Kx - 0 1")

    def test_castling_without_rook_raises(self) -> None:
        with pytest.raises(ValueError, match="castling"):
            position_from_fen("4k3/8/8/8/8/8/8/4K3 w K - 0 1")

    def test_duplicate_castling_side_raises(self) -> None:
        with pytest.raises(ValueError, match="castling"):
            position_from_fen("4k3/8/8/8/8/8/8/4K2R w KH - 0 1")

    def test_invalid_en_passant_for_side_raises(self) -> None:
        with pytest.raises(ValueError, match="en-passant"):
            position_from_fen("8/8/8/8/8/8/8/8 w - e3 0 1")


class TestFenSerialisation:
    def test_roundtrip_starting(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert position_to_fen(pos) == STARTING_FEN

    def test_roundtrip_after_e4(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_roundtrip_custom(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_roundtrip_endgame(self) -> None:
        fen = "8/8/4k3/8/8/4K3/8/8 w - - 0 1"
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_outermost_rooks_written_as_kq(self) -> None:
        pos = position_from_fen("1r4kr/8/8/8/8/8/8/1R4KR w HBhb - 0 1", chess960=True)
        assert position_to_fen(pos) == "1r4kr/8/8/8/8/8/8/1R4KR w KQkq - 0 1"

    def test_inner_rook_written_as_file(self) -> None:
        fen = "4k3/8/8/8/8/8/8/R1R1K3 w C - 0 1"
        pos = position_from_fen(fen, chess960=True)
        assert position_to_fen(pos) == fen
