"""Move orchestration: legality checks, commit, promotion, game state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from puzzlechess.core.castling import castle_error, try_castle
from puzzlechess.core.enums import Color, GameState, PieceType
from puzzlechess.core.errors import (
    IllegalDestination,
    InvalidPromotion,
    NoPieceAtSource,
    SelfCheck,
    WrongTurn,
)
from puzzlechess.core.move_generator import MoveGenerator
from puzzlechess.core.rules import Rules

if TYPE_CHECKING:
    from puzzlechess.core.board import Board
    from puzzlechess.core.piece import Piece
    from puzzlechess.core.types import Square

_LOGGER = logging.getLogger(__name__)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


def _castle_side(piece: Piece, from_sq: Square, to_sq: Square) -> bool | None:
    """``True``/``False`` for a king/queen-side castle, ``None`` otherwise."""
    if piece.kind != PieceType.KING:
        return None
    home = piece.color.home_rank
    if from_sq.rank != home or from_sq.file_char != "e" or to_sq.rank != home:
        return None
    if to_sq.file_char == "g":
        return True
    if to_sq.file_char == "c":
        return False
    return None


def _promotion_rank(color: Color) -> int:
    return 8 if color == Color.WHITE else 1


def _leaves_king_safe(board: Board, from_sq: Square, to_sq: Square, color: Color) -> bool:
    trial = board.copy()
    trial.move_unchecked(from_sq, to_sq)
    return not Rules.is_in_check(trial, color)


def try_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> None:
    """Play *from_sq* → *to_sq* for the side to move, or raise a ``MoveError``.

    Every rejection except :class:`InvalidPromotion` leaves *board* untouched.
    An invalid promotion kind is only detected after the pawn has been moved:
    the pawn stays on its destination unpromoted and the turn does not pass.
    """
    piece = board[from_sq]
    if piece is None:
        raise NoPieceAtSource(f"No piece on {from_sq}")

    if piece.color != board.turn:
        raise WrongTurn(f"It is {board.turn}'s turn, not {piece.color}'s")

    if to_sq not in MoveGenerator(board).pseudo_legal_moves(from_sq):
        raise IllegalDestination(f"{piece.kind.name.lower()} on {from_sq} cannot reach {to_sq}")

    kingside = _castle_side(piece, from_sq, to_sq)
    if kingside is not None:
        try_castle(board, piece.color, kingside)
        return

    if not _leaves_king_safe(board, from_sq, to_sq, piece.color):
        _LOGGER.debug("Rejected %s%s: king would be in check", from_sq, to_sq)
        raise SelfCheck(f"{from_sq}{to_sq} would leave the {piece.color} king in check")

    moved = board.move_unchecked(from_sq, to_sq)

    if moved.kind == PieceType.PAWN and to_sq.rank == _promotion_rank(moved.color):
        kind = PieceType.QUEEN if promotion is None else promotion
        if kind not in PROMOTION_TYPES:
            raise InvalidPromotion(f"Cannot promote to {kind.name.lower()}")
        board[to_sq] = moved.promoted(kind)

    board.turn = board.turn.opposite

    if Rules.is_checkmate(board, board.turn):
        board.game_state = GameState.checkmate(board.turn)
        _LOGGER.info("%s%s checkmates %s", from_sq, to_sq, board.turn)
    else:
        board.game_state = GameState.ONGOING


def legal_moves(board: Board, from_sq: Square) -> list[Square]:
    """Pseudo-legal destinations of *from_sq* that survive the legality checks.

    Ignores whose turn it is and promotion choice.
    """
    piece = board[from_sq]
    if piece is None:
        return []

    legal: list[Square] = []
    for to_sq in MoveGenerator(board).pseudo_legal_moves(from_sq):
        kingside = _castle_side(piece, from_sq, to_sq)
        if kingside is not None:
            if castle_error(board, piece.color, kingside) is None:
                legal.append(to_sq)
        elif _leaves_king_safe(board, from_sq, to_sq, piece.color):
            legal.append(to_sq)
    return legal
