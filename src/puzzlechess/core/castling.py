"""Castling: validate every precondition, then relocate king and rook."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puzzlechess.core.board import CASTLE_PLANS
from puzzlechess.core.enums import CastlingRights, Color, PieceType
from puzzlechess.core.errors import (
    CastleError,
    CastleThroughCheck,
    CastleWhileInCheck,
    CastlingForbidden,
    PathBlocked,
    RookMissing,
)
from puzzlechess.core.piece import Piece
from puzzlechess.core.rules import Rules

if TYPE_CHECKING:
    from puzzlechess.core.board import Board

_LOGGER = logging.getLogger(__name__)


def _side_name(kingside: bool) -> str:
    return "kingside" if kingside else "queenside"


def castle_error(board: Board, color: Color, kingside: bool) -> CastleError | None:
    """Return the reason *color* cannot castle on the given side, or ``None``.

    Checks run in a fixed order and the board is never modified.
    """
    plan = CASTLE_PLANS[(color, kingside)]
    side = _side_name(kingside)

    if not board.castling & plan.right:
        return CastlingForbidden(f"{color} may no longer castle {side}")

    rook = board[plan.rook_from]
    if rook != Piece(color, PieceType.ROOK):
        return RookMissing(f"No {color} rook on {plan.rook_from} to castle {side}")

    for sq in plan.between:
        if not board.is_empty(sq):
            return PathBlocked(f"Cannot castle {side}: {sq} is occupied")

    if Rules.is_in_check(board, color):
        return CastleWhileInCheck(f"{color} cannot castle while in check")

    for sq in plan.transit:
        trial = board.copy()
        trial.move_unchecked(plan.king_from, sq)
        if Rules.is_in_check(trial, color):
            return CastleThroughCheck(f"Cannot castle {side}: {sq} is attacked")

    return None


def try_castle(board: Board, color: Color, kingside: bool) -> None:
    """Castle *color* on the given side, or raise a :class:`CastleError`.

    On success the king and rook are relocated, both of *color*'s castling
    rights are cleared and the turn passes to the opponent.
    """
    error = castle_error(board, color, kingside)
    if error is not None:
        _LOGGER.debug("Castling rejected: %s", error)
        raise error

    plan = CASTLE_PLANS[(color, kingside)]
    board[plan.king_from] = None
    board[plan.rook_from] = None
    board[plan.king_to] = Piece(color, PieceType.KING)
    board[plan.rook_to] = Piece(color, PieceType.ROOK)
    board.castling &= ~CastlingRights.both(color)
    board.turn = board.turn.opposite
    _LOGGER.debug("%s castled %s", color, _side_name(kingside))
