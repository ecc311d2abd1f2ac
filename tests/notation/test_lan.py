"""Tests for long algebraic notation."""

import pytest

from chessnotation.core.enums import CastlingSide, PieceType
from chessnotation.core.move import Move
from chessnotation.core.position import Position
from chessnotation.core.types import A1, A2, C1, C8, E1, E2, E4, E8, G1, G7, G8
from chessnotation.notation import move_from_lan, move_to_lan, position_from_fen

CASTLING = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


class TestMoveToLan:
    def test_plain_move(self) -> None:
        assert move_to_lan(Move(E2, E4)) == "e2e4"

    def test_promotion_is_lowercase(self) -> None:
        assert move_to_lan(Move(G7, G8, promotion=PieceType.QUEEN)) == "g7g8q"
        assert move_to_lan(Move(G7, G8, promotion=PieceType.KNIGHT)) == "g7g8n"

    def test_castling_is_king_move(self) -> None:
        assert move_to_lan(Move(E1, G1, castling_side=CastlingSide.KING_SIDE)) == "e1g1"


class TestMoveFromLan:
    def test_plain_move(self, start_position: Position) -> None:
        assert move_from_lan(start_position, "e2e4") == Move(E2, E4)

    @pytest.mark.parametrize("lan", ["g7g8q", "g7g8Q"])
    def test_promotion_case_insensitive(self, lan: str) -> None:
        pos = position_from_fen("7k/6P1/8/8/8/8/8/4K3 w - - 0 1")
        assert move_from_lan(pos, lan) == Move(G7, G8, promotion=PieceType.QUEEN)

    def test_castling_inferred_from_king_geometry(self) -> None:
        pos = position_from_fen(CASTLING)
        assert move_from_lan(pos, "e1g1") == Move(E1, G1, castling_side=CastlingSide.KING_SIDE)
        assert move_from_lan(pos, "e1c1") == Move(E1, C1, castling_side=CastlingSide.QUEEN_SIDE)

    def test_castling_for_side_to_move_only(self) -> None:
        pos = position_from_fen(CASTLING)
        assert move_from_lan(pos, "e8c8") == Move(E8, C8)

    def test_rook_move_is_not_castling(self) -> None:
        pos = position_from_fen(CASTLING)
        assert move_from_lan(pos, "a1c1").castling_side is None

    def test_structural_only(self, start_position: Position) -> None:
        # Not legal, but well-formed.
        assert move_from_lan(start_position, "a1a2") == Move(A1, A2)

    @pytest.mark.parametrize(
        "lan", ["", "e2e", "e2e9", "i2e4", "e2e4x", "e2e4qq", "Nf3", "e2-e4"]
    )
    def test_malformed_is_rejected(self, start_position: Position, lan: str) -> None:
        assert move_from_lan(start_position, lan) is None


class TestLanRoundTrip:
    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "n1n5/PPPk4/8/8/8/8/4Kppp/5N1N w - - 0 1",
            CASTLING,
        ],
    )
    def test_every_legal_move(self, fen: str) -> None:
        pos = position_from_fen(fen)
        for move in pos.legal_moves():
            lan = move_to_lan(move)
            assert move_from_lan(pos, lan) == move, f"Roundtrip failed for {lan}"
