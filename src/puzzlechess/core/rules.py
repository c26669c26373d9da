"""High-level chess rules: check and checkmate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlechess.core.enums import Color
from puzzlechess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from puzzlechess.core.board import Board
    from puzzlechess.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Policy for degenerate setups: a color without a king is never in check
    # and therefore never checkmated.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king among the destinations of any enemy piece?"""
        king_sq = board.king_square(color)
        if king_sq is None:
            return False
        return Rules.is_attacked_by(board, king_sq, color.opposite)

    @staticmethod
    def is_attacked_by(board: Board, sq: Square, by_color: Color) -> bool:
        """Whether any *by_color* piece has *sq* as a pseudo-legal destination.

        Pawns only reach diagonals holding an enemy piece, so the answer is
        meaningful for occupied squares such as a king's.
        """
        gen = MoveGenerator(board)
        for from_sq, _ in board.pieces(by_color):
            if sq in gen.pseudo_legal_moves(from_sq):
                return True
        return False

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """In check, and no pseudo-legal move of *color* escapes it."""
        if not Rules.is_in_check(board, color):
            return False

        gen = MoveGenerator(board)
        for from_sq, _ in board.pieces(color):
            for to_sq in gen.pseudo_legal_moves(from_sq):
                trial = board.copy()
                trial.move_unchecked(from_sq, to_sq)
                if not Rules.is_in_check(trial, color):
                    return False
        return True
