"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from puzzlechess.core.enums import Color, PieceType

# kind -> (letter, white glyph, black glyph)
_GLYPHS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("p", "♙", "♟"),
    PieceType.KNIGHT: ("n", "♘", "♞"),
    PieceType.BISHOP: ("b", "♗", "♝"),
    PieceType.ROOK: ("r", "♖", "♜"),
    PieceType.QUEEN: ("q", "♕", "♛"),
    PieceType.KING: ("k", "♔", "♚"),
}

_KIND_BY_LETTER = {letter: kind for kind, (letter, _, _) in _GLYPHS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece; compares and hashes by value."""

    color: Color
    kind: PieceType

    def __str__(self) -> str:
        """Letter of the piece, uppercase for White."""
        letter = _GLYPHS[self.kind][0]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str(piece)``: ``"N"`` is a white knight, ``"q"`` a black queen."""
        kind = _KIND_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Unknown piece letter: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    @property
    def symbol(self) -> str:
        _, white, black = _GLYPHS[self.kind]
        return white if self.color == Color.WHITE else black

    def promoted(self, kind: PieceType) -> Piece:
        return Piece(self.color, kind)
