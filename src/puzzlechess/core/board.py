"""Board - piece placement, side to move, castling rights and game state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from puzzlechess.core.enums import CastlingRights, Color, GameState, PieceType
from puzzlechess.core.errors import NoPieceAtSource
from puzzlechess.core.piece import Piece
from puzzlechess.core.types import FILES, Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class CastlePlan:
    """Fixed geometry of one castling move."""

    right: CastlingRights
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # must be empty: strictly between king and rook
    transit: tuple[Square, ...]  # king must not be attacked on any of these


def _plan(color: Color, kingside: bool) -> CastlePlan:
    rank = color.home_rank
    if kingside:
        return CastlePlan(
            right=CastlingRights.for_side(color, True),
            king_from=make_square("e", rank),
            king_to=make_square("g", rank),
            rook_from=make_square("h", rank),
            rook_to=make_square("f", rank),
            between=(make_square("f", rank), make_square("g", rank)),
            transit=(make_square("f", rank), make_square("g", rank)),
        )
    return CastlePlan(
        right=CastlingRights.for_side(color, False),
        king_from=make_square("e", rank),
        king_to=make_square("c", rank),
        rook_from=make_square("a", rank),
        rook_to=make_square("d", rank),
        between=(make_square("b", rank), make_square("c", rank), make_square("d", rank)),
        transit=(make_square("d", rank), make_square("c", rank)),
    )


CASTLE_PLANS: dict[tuple[Color, bool], CastlePlan] = {
    (color, kingside): _plan(color, kingside)
    for color in Color
    for kingside in (True, False)
}

# Original rook corner → (owner, right lost when that rook leaves)
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    plan.rook_from: (color, plan.right) for (color, _), plan in CASTLE_PLANS.items()
}


class Board:
    """Mutable chess board: sparse square→piece map plus game metadata.

    Only occupied squares are stored. ``Board()`` starts from the standard
    initial position with White to move.
    """

    __slots__ = ("_squares", "turn", "game_state", "castling")

    def __init__(self) -> None:
        self._squares: dict[Square, Piece] = {}
        self.turn = Color.WHITE
        self.game_state = GameState.ONGOING
        self.castling = CastlingRights.ALL
        self.reset()

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls()

    @classmethod
    def custom(
        cls,
        pieces: Mapping[Square, Piece] | Iterable[tuple[Square, Piece]],
        turn: Color = Color.WHITE,
        game_state: GameState = GameState.ONGOING,
    ) -> Board:
        """Arbitrary position for tests and puzzles (all castling flags set)."""
        board = cls()
        board.initialize_custom(pieces, turn, game_state)
        return board

    # -- Setup --------------------------------------------------------------

    def reset(self) -> None:
        """Restore the standard initial position, rights, turn and state."""
        self._squares.clear()
        for file in FILES:
            self._squares[make_square(file, 2)] = Piece(Color.WHITE, PieceType.PAWN)
            self._squares[make_square(file, 7)] = Piece(Color.BLACK, PieceType.PAWN)
        for file, kind in zip(FILES, _BACK_RANK):
            self._squares[make_square(file, 1)] = Piece(Color.WHITE, kind)
            self._squares[make_square(file, 8)] = Piece(Color.BLACK, kind)
        self.turn = Color.WHITE
        self.game_state = GameState.ONGOING
        self.castling = CastlingRights.ALL

    def initialize_custom(
        self,
        pieces: Mapping[Square, Piece] | Iterable[tuple[Square, Piece]],
        turn: Color,
        game_state: GameState,
    ) -> None:
        """Replace all pieces, the side to move and the game state.

        Castling flags are left as they are; a later entry for the same
        square overwrites an earlier one.
        """
        items = pieces.items() if isinstance(pieces, Mapping) else pieces
        self._squares.clear()
        for sq, piece in items:
            self._squares[sq] = piece
        self.turn = turn
        self.game_state = game_state

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is None:
            self._squares.pop(sq, None)
        else:
            self._squares[sq] = piece

    def __contains__(self, sq: object) -> bool:
        return sq in self._squares

    def __len__(self) -> int:
        return len(self._squares)

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        return iter(list(self._squares.items()))

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._squares

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All (square, piece) pairs of *color*."""
        return [(sq, p) for sq, p in self._squares.items() if p.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of the first king of *color*, or ``None`` if it has none."""
        for sq, piece in self._squares.items():
            if piece.color == color and piece.kind == PieceType.KING:
                return sq
        return None

    def can_castle(self, color: Color, kingside: bool) -> bool:
        """Whether the castling right for (*color*, side) is still set."""
        return bool(self.castling & CastlingRights.for_side(color, kingside))

    # -- Mutation / copying -------------------------------------------------

    def move_unchecked(self, from_sq: Square, to_sq: Square) -> Piece:
        """Relocate the piece on *from_sq* without any legality check.

        Whatever stands on *to_sq* is captured. Moving a king clears both of
        its color's castling rights; moving a rook off its original corner
        clears the matching right. Returns the moved piece.
        """
        piece = self._squares.pop(from_sq, None)
        if piece is None:
            raise NoPieceAtSource(f"No piece on {from_sq}")
        self._squares[to_sq] = piece

        if piece.kind == PieceType.KING:
            self.castling &= ~CastlingRights.both(piece.color)
        elif piece.kind == PieceType.ROOK and from_sq in _ROOK_CORNERS:
            owner, right = _ROOK_CORNERS[from_sq]
            if owner == piece.color:
                self.castling &= ~right
        return piece

    def copy(self) -> Board:
        """Independent clone sharing no mutable state."""
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        b.turn = self.turn
        b.game_state = self.game_state
        b.castling = self.castling
        return b

    # -- Rules shortcuts ----------------------------------------------------

    def pseudo_legal_moves(self, from_sq: Square) -> list[Square]:
        """Destinations of the piece on *from_sq*, ignoring king safety."""
        from puzzlechess.core.move_generator import MoveGenerator

        return MoveGenerator(self).pseudo_legal_moves(from_sq)

    def legal_moves(self, from_sq: Square) -> list[Square]:
        """Destinations of the piece on *from_sq* that ``try_move`` would accept."""
        from puzzlechess.core.move_executor import legal_moves

        return legal_moves(self, from_sq)

    def is_in_check(self, color: Color) -> bool:
        from puzzlechess.core.rules import Rules

        return Rules.is_in_check(self, color)

    def is_checkmate(self, color: Color) -> bool:
        from puzzlechess.core.rules import Rules

        return Rules.is_checkmate(self, color)

    def try_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> None:
        """Validate and play a move for the side to move.

        Raises a :class:`~puzzlechess.core.errors.MoveError` subclass when
        the move is rejected.
        """
        from puzzlechess.core.move_executor import try_move

        try_move(self, from_sq, to_sq, promotion)

    # -- Rendering ----------------------------------------------------------

    def glyph_grid(self) -> list[list[str | None]]:
        """Rows of Unicode glyphs, rank 8 first, ``None`` for empty squares."""
        rows: list[list[str | None]] = []
        for rank in range(8, 0, -1):
            row: list[str | None] = []
            for file in range(1, 9):
                piece = self._squares.get(Square(file, rank))
                row.append(piece.symbol if piece else None)
            rows.append(row)
        return rows

    def render(self) -> str:
        """Text diagram of the board, rank 8 at the top."""
        lines: list[str] = []
        for rank, row in zip(range(8, 0, -1), self.glyph_grid()):
            cells = "".join(f" {glyph or '.'} " for glyph in row)
            lines.append(f"{rank} {cells}")
        lines.append("   " + "  ".join(FILES))
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.turn == other.turn
            and self.castling == other.castling
            and self.game_state == other.game_state
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in range(1, 9):
                p = self._squares.get(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
