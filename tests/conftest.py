"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessnotation.core.position import Position
from chessnotation.notation import STARTING_FEN, position_from_fen

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
# Chess960 setup: white king g1 with rooks on b1 and h1, mirrored for black.
CHESS960_FEN = "1r4kr/8/8/8/8/8/8/1R4KR w HBhb - 0 1"


@pytest.fixture
def start_position() -> Position:
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def kiwipete() -> Position:
    return position_from_fen(KIWIPETE)


@pytest.fixture
def chess960_position() -> Position:
    return position_from_fen(CHESS960_FEN, chess960=True)
