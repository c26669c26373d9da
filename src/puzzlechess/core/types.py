"""Square value type and coordinate helpers.

Files and ranks are both 1-based ordinals:
    a1 = Square(1, 1), h1 = Square(8, 1), ..., h8 = Square(8, 8)
"""

from __future__ import annotations

from dataclasses import dataclass

from puzzlechess.core.errors import InvalidPosition

FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable, validated board coordinate."""

    file: int  # 1–8 (a–h)
    rank: int  # 1–8

    def __post_init__(self) -> None:
        if not (
            isinstance(self.file, int)
            and isinstance(self.rank, int)
            and 1 <= self.file <= 8
            and 1 <= self.rank <= 8
        ):
            raise InvalidPosition(f"Square out of range: file={self.file!r}, rank={self.rank!r}")

    @property
    def file_char(self) -> str:
        return FILES[self.file - 1]

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (*df*, *dr*), or ``None`` when it leaves the board."""
        f = self.file + df
        r = self.rank + dr
        if 1 <= f <= 8 and 1 <= r <= 8:
            return Square(f, r)
        return None

    def __str__(self) -> str:
        return f"{self.file_char}{self.rank}"

    def __repr__(self) -> str:
        return f"Square({self})"


def make_square(file: str, rank: int) -> Square:
    """Create a square from a file letter ('a'–'h') and a rank (1–8)."""
    if not isinstance(file, str) or len(file) != 1 or file not in FILES:
        raise InvalidPosition(f"Invalid file: {file!r}")
    return Square(FILES.index(file) + 1, rank)


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. 'e4' → Square(5, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise InvalidPosition(f"Invalid square name: {name!r}")
    return Square(FILES.index(name[0]) + 1, int(name[1]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(f, r) for r in range(1, 9) for f in range(1, 9)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
