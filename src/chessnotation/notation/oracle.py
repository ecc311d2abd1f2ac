"""Board protocol consumed by the notation codec.

The codec depends on this protocol, not on a concrete position class, so any
rule engine exposing these members can be encoded against.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessnotation.core.enums import CastlingSide, Color
    from chessnotation.core.move import Move
    from chessnotation.core.piece import Piece
    from chessnotation.core.types import Square


class NotationBoard(Protocol):
    """Read access plus paired make/undo for check detection.

    ``make_move`` followed by ``undo_move`` must leave the board exactly as it
    was. Implementations are not expected to be thread-safe.
    """

    side_to_move: Color
    en_passant: Square | None
    is_random: bool

    def piece_at(self, sq: Square) -> Piece | None: ...

    def king_square(self, color: Color) -> Square: ...

    def castle_target(self, color: Color, side: CastlingSide) -> Square: ...

    def legal_moves(self) -> list[Move]: ...

    def make_move(self, move: Move) -> None: ...

    def undo_move(self) -> None: ...

    def is_in_check(self, color: Color | None = None) -> bool: ...
