"""Tests for the piece/square symbol table."""

import pytest

from chessnotation.core.enums import PieceType
from chessnotation.core.types import A1, E4, H8
from chessnotation.notation import (
    piece_symbol,
    piece_type_from_symbol,
    square_from_string,
    square_string,
)


class TestPieceSymbols:
    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_roundtrip(self, piece_type: PieceType) -> None:
        assert piece_type_from_symbol(piece_symbol(piece_type)) == piece_type

    @pytest.mark.parametrize("symbol", ["n", "x", "", "NN"])
    def test_unknown_symbol(self, symbol: str) -> None:
        assert piece_type_from_symbol(symbol) is None


class TestSquareStrings:
    def test_corners(self) -> None:
        assert square_string(A1) == "a1"
        assert square_string(H8) == "h8"
        assert square_from_string("e4") == E4

    @pytest.mark.parametrize("text", ["", "e", "e44", "i1", "a0", "a9", "E4"])
    def test_invalid(self, text: str) -> None:
        assert square_from_string(text) is None
