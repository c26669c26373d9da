"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Back rank (1–8) where this side's king and rooks start."""
        return 1 if self == Color.WHITE else 8

    @property
    def pawn_direction(self) -> int:
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, kingside: bool) -> CastlingRights:
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if kingside else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if kingside else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameState(IntEnum):
    """Terminal-state marker of a board.

    Only ``ONGOING`` and the two checkmate values are ever produced by the
    engine; ``STALEMATE`` and ``DRAW`` exist for callers that set them
    through a custom setup.
    """

    ONGOING = 0
    WHITE_CHECKMATED = 1
    BLACK_CHECKMATED = 2
    STALEMATE = 3
    DRAW = 4

    @classmethod
    def checkmate(cls, color: Color) -> GameState:
        """State in which *color* has been checkmated."""
        return cls.WHITE_CHECKMATED if color == Color.WHITE else cls.BLACK_CHECKMATED

    @property
    def checkmated(self) -> Color | None:
        """The checkmated side, or ``None`` when this is not a checkmate."""
        if self == GameState.WHITE_CHECKMATED:
            return Color.WHITE
        if self == GameState.BLACK_CHECKMATED:
            return Color.BLACK
        return None

    @property
    def is_over(self) -> bool:
        return self != GameState.ONGOING
