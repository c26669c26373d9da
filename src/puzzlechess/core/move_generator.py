"""Pseudo-legal move generation.

Destinations here respect movement and occupancy rules only. King safety is
layered on top by :mod:`puzzlechess.core.rules`,
:mod:`puzzlechess.core.castling` and :mod:`puzzlechess.core.move_executor`;
this module must never call into them, since the check detector runs the
generator for every enemy piece.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlechess.core.board import CASTLE_PLANS
from puzzlechess.core.enums import Color, PieceType
from puzzlechess.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from puzzlechess.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = [sq.offset(df, dr) for df, dr in offsets]
        targets[sq] = tuple(m for m in moves if m is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            nxt = sq.offset(df, dr)
            while nxt is not None:
                ray.append(nxt)
                nxt = nxt.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_ROOK_RAYS = _build_rays(ROOK_DIRS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Computes pseudo-legal destinations on a :class:`Board`.

    The generator only reads the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, from_sq: Square) -> list[Square]:
        """Destinations for the piece on *from_sq* (empty if unoccupied)."""
        piece = self._board[from_sq]
        if piece is None:
            return []

        moves: list[Square] = []
        color = piece.color
        kind = piece.kind
        if kind == PieceType.PAWN:
            self._gen_pawn(from_sq, color, moves)
        elif kind == PieceType.KNIGHT:
            self._gen_leaper(from_sq, color, _KNIGHT_TARGETS[from_sq], moves)
        elif kind == PieceType.BISHOP:
            self._gen_sliding(from_sq, color, _BISHOP_RAYS[from_sq], moves)
        elif kind == PieceType.ROOK:
            self._gen_sliding(from_sq, color, _ROOK_RAYS[from_sq], moves)
        elif kind == PieceType.QUEEN:
            self._gen_sliding(from_sq, color, _QUEEN_RAYS[from_sq], moves)
        else:
            self._gen_leaper(from_sq, color, _KING_TARGETS[from_sq], moves)
            self._gen_castling(from_sq, color, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        step = color.pawn_direction

        one_step = sq.offset(0, step)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if sq.rank == _PAWN_START_RANK[color]:
                two_step = sq.offset(0, 2 * step)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_sq = sq.offset(df, step)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

    def _gen_leaper(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Square]) -> None:
        # Occupancy and rights only; attacked transit squares are the
        # castling subsystem's concern.
        board = self._board
        for kingside in (True, False):
            plan = CASTLE_PLANS[(color, kingside)]
            if king_sq != plan.king_from or not board.castling & plan.right:
                continue
            if all(board.is_empty(sq) for sq in plan.between):
                moves.append(plan.king_to)


def pseudo_legal_moves(board: Board, from_sq: Square) -> list[Square]:
    """Functional shortcut for :meth:`MoveGenerator.pseudo_legal_moves`."""
    return MoveGenerator(board).pseudo_legal_moves(from_sq)
