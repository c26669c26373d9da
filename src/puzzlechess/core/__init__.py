"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from puzzlechess.core import Board, parse_square

    board = Board()
    board.try_move(parse_square("e2"), parse_square("e4"))
    print(board.render())
"""

from puzzlechess.core.board import CASTLE_PLANS, Board, CastlePlan
from puzzlechess.core.castling import castle_error, try_castle
from puzzlechess.core.enums import CastlingRights, Color, GameState, PieceType
from puzzlechess.core.errors import (
    CastleError,
    CastleThroughCheck,
    CastleWhileInCheck,
    CastlingForbidden,
    ChessError,
    IllegalDestination,
    InvalidPosition,
    InvalidPromotion,
    MoveError,
    NoPieceAtSource,
    PathBlocked,
    RookMissing,
    SelfCheck,
    WrongTurn,
)
from puzzlechess.core.move_executor import PROMOTION_TYPES, legal_moves, try_move
from puzzlechess.core.move_generator import MoveGenerator, pseudo_legal_moves
from puzzlechess.core.piece import Piece
from puzzlechess.core.rules import Rules
from puzzlechess.core.types import ALL_SQUARES, Square, make_square, parse_square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameState",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "make_square",
    "parse_square",
    # Domain objects
    "Board",
    "CASTLE_PLANS",
    "CastlePlan",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "PROMOTION_TYPES",
    "castle_error",
    "legal_moves",
    "pseudo_legal_moves",
    "try_castle",
    "try_move",
    # Errors
    "CastleError",
    "CastleThroughCheck",
    "CastleWhileInCheck",
    "CastlingForbidden",
    "ChessError",
    "IllegalDestination",
    "InvalidPosition",
    "InvalidPromotion",
    "MoveError",
    "NoPieceAtSource",
    "PathBlocked",
    "RookMissing",
    "SelfCheck",
    "WrongTurn",
]
