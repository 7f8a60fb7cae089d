"""Board - piece placement on an 8x8 board plus the en-passant target."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

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


class Board:
    """Mutable 64-square board that owns every :class:`Piece` on it.

    Pieces are never shared between boards; :meth:`copy` clones them.
    """

    __slots__ = ("_squares", "_en_passant")

    def __init__(self, en_passant: Square | None = None) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._en_passant = en_passant

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        # Raw slot write: the piece's stored square is left untouched.
        self._squares[sq.index] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    @property
    def en_passant(self) -> Square | None:
        """Square a pawn may capture onto en passant this half-move."""
        return self._en_passant

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied slot, rank-major."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq* to *to_sq*.

        Resolves en-passant removal, the castling rook slide and the new
        en-passant target. The caller must have validated legality.
        Returns the captured piece, if any.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        captured = self[to_sq]

        # En passant: the captured pawn sits beside the destination
        if (
            piece.piece_type == PieceType.PAWN
            and to_sq.file != from_sq.file
            and captured is None
        ):
            ep_capture_sq = Square(to_sq.file, from_sq.rank)
            captured = self[ep_capture_sq]
            self[ep_capture_sq] = None

        # Slide the rook for castling
        if piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2:
            self._castle_rook(from_sq, to_sq)

        next_en_passant: Square | None = None
        if piece.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
            next_en_passant = Square(
                from_sq.file, from_sq.rank + piece.color.pawn_direction
            )
        self._en_passant = next_en_passant

        self[from_sq] = None
        self[to_sq] = piece
        piece.move_to(to_sq)
        return captured

    def _castle_rook(self, king_from: Square, king_to: Square) -> None:
        kingside = king_to.file > king_from.file
        rook_from = Square(7 if kingside else 0, king_from.rank)
        rook_file = king_to.file - 1 if kingside else king_to.file + 1
        rook_to = Square(rook_file, king_from.rank)
        rook = self[rook_from]
        if rook is None:
            raise ValueError(f"No rook on {rook_from} to castle with")
        self[rook_from] = None
        self[rook_to] = rook
        rook.move_to(rook_to)

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        """Overwrite *sq* with *piece* (promotion substitution)."""
        self[sq] = piece
        if piece is not None:
            piece.square = sq

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._en_passant)
        b._squares = [None if p is None else replace(p) for p in self._squares]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for f, pt in enumerate(_BACK_RANK):
                sq = Square(f, color.back_rank)
                b.set_piece(sq, Piece(color, pt, sq))
            for f in range(8):
                sq = Square(f, color.pawn_rank)
                b.set_piece(sq, Piece(color, PieceType.PAWN, sq))
        return b

    @classmethod
    def from_pieces(
        cls, pieces: Iterable[Piece], en_passant: Square | None = None
    ) -> Board:
        """Rebuild a board from fully described piece records."""
        b = cls(en_passant)
        for piece in pieces:
            if b[piece.square] is not None:
                raise ValueError(f"Two pieces on {piece.square}")
            b[piece.square] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares and self._en_passant == other._en_passant
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8):
            row = []
            for file in range(8):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
