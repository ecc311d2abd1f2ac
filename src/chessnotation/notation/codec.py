"""Notation dispatch: pick SAN or LAN on output, detect it on input."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessnotation.core.enums import MoveNotation
from chessnotation.notation.lan import move_from_lan, move_to_lan
from chessnotation.notation.san import move_from_san, move_to_san

if TYPE_CHECKING:
    from chessnotation.core.move import Move
    from chessnotation.notation.models import NotationOptions
    from chessnotation.notation.oracle import NotationBoard


def move_to_string(
    position: NotationBoard,
    move: Move,
    notation: MoveNotation,
    options: NotationOptions | None = None,
) -> str:
    """Render *move* in *notation* for the *position* before the move.

    LAN cannot tell castling apart from a plain king move when the king's
    start square is random (Chess960), so castling falls back to SAN there.
    """
    if notation == MoveNotation.STANDARD_ALGEBRAIC or (
        move.castling_side is not None and position.is_random
    ):
        return move_to_san(position, move, options)
    return move_to_lan(move)


def move_from_string(
    position: NotationBoard,
    text: str,
    options: NotationOptions | None = None,
) -> Move | None:
    """Decode SAN or LAN *text*; ``None`` if neither yields a move.

    SAN is tried first so piece moves are never misread as coordinates.
    """
    move = move_from_san(position, text, options)
    if move is None:
        move = move_from_lan(position, text)
    return move
