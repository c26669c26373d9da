"""Exceptions raised by the chess engine.

Every error here is a recoverable caller error: the board is left unchanged
(the one exception being :class:`InvalidPromotion`, which is raised after the
pawn has already been moved).
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all engine errors."""


class InvalidPosition(ChessError, ValueError):
    """A file/rank pair or square name outside the 8x8 board."""


# ── Move errors ──────────────────────────────────────────────────────────────


class MoveError(ChessError):
    """A move attempt was rejected."""


class NoPieceAtSource(MoveError):
    pass


class WrongTurn(MoveError):
    pass


class IllegalDestination(MoveError):
    pass


class SelfCheck(MoveError):
    """The move would leave the mover's own king in check."""


class InvalidPromotion(MoveError):
    """Promotion to a king or pawn was requested."""


# ── Castling errors ──────────────────────────────────────────────────────────


class CastleError(MoveError):
    """A castling attempt was rejected."""


class CastlingForbidden(CastleError):
    """The king or the rook has already moved."""


class RookMissing(CastleError):
    pass


class PathBlocked(CastleError):
    pass


class CastleWhileInCheck(CastleError):
    pass


class CastleThroughCheck(CastleError):
    pass
