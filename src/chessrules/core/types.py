"""Square value type and coordinate helpers.

Board layout (rank 0 is Black's back rank, as displayed top-down):
    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    a7=(0, 1), ...
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

Notation is the two-character upper-case form used throughout the
package: file letter ``A``–``H`` followed by the displayed rank
``8 - rank``.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "ABCDEFGH"
_RANKS = "12345678"


def is_valid_coordinate(file: int, rank: int) -> bool:
    """Whether (*file*, *rank*) lies on the board."""
    return 0 <= file < 8 and 0 <= rank < 8


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate (file 0–7, rank 0–7)."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_coordinate(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    # ── Notation ─────────────────────────────────────────────────────────

    def to_notation(self) -> str:
        """Two-character name, e.g. Square(4, 6) → 'E2'."""
        return _FILES[self.file] + str(8 - self.rank)

    @classmethod
    def from_notation(cls, name: str) -> Square:
        """Parse an exact two-character name, e.g. 'E4' → Square(4, 4)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), 8 - int(name[1]))

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Flat 0–63 index into a rank-major grid."""
        return self.rank * 8 + self.file

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index & 7, index >> 3)

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (*df*, *dr*), or ``None`` if off the board."""
        file, rank = self.file + df, self.rank + dr
        if not is_valid_coordinate(file, rank):
            return None
        return Square(file, rank)

    def __str__(self) -> str:
        return self.to_notation()

    def __repr__(self) -> str:
        return f"Square({self.to_notation()})"


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
