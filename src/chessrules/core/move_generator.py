"""Pseudo-legal move generation, one generator per piece type."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates pseudo-legal destinations on a :class:`Board`.

    Pseudo-legal means consistent with the piece's movement pattern and
    the board occupancy; whether the mover's king is left in check is
    decided by :class:`~chessrules.core.rules.Rules`. The generator never
    mutates the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, sq: Square) -> list[Square]:
        """Destinations for the piece on *sq* (empty if the square is empty).

        The color comes from the piece itself but the origin is *sq*, not
        the piece's stored square, so the generator stays correct while a
        legality probe has a piece temporarily displaced.
        """
        piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Square] = []
        _GENERATORS[piece.piece_type](self, sq, piece, moves)
        return moves

    def all_pseudo_legal_moves(self, color: Color) -> list[tuple[Square, Square]]:
        """Every ``(from, to)`` pair available to *color*'s pieces."""
        pairs: list[tuple[Square, Square]] = []
        for sq, piece in self._board.occupied():
            if piece.color == color:
                pairs.extend((sq, to_sq) for to_sq in self.pseudo_legal_moves(sq))
        return pairs

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        color = piece.color
        step = color.pawn_direction

        one_step = sq.offset(0, step)
        if one_step is None:
            return

        if board.is_empty(one_step):
            moves.append(one_step)
            if sq.rank == color.pawn_rank:
                two_step = Square(sq.file, sq.rank + 2 * step)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_sq = sq.offset(df, step)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)
            elif cap_sq == board.en_passant:
                # The pawn being taken is removed when the move is applied.
                moves.append(cap_sq)

    def _gen_knight(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        self._gen_stepping(_KNIGHT_TARGETS[sq.index], piece.color, moves)

    def _gen_bishop(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        self._gen_sliding(_BISHOP_RAYS[sq.index], piece.color, moves)

    def _gen_rook(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        self._gen_sliding(_ROOK_RAYS[sq.index], piece.color, moves)

    def _gen_queen(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        self._gen_sliding(_QUEEN_RAYS[sq.index], piece.color, moves)

    def _gen_king(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        self._gen_stepping(_KING_TARGETS[sq.index], piece.color, moves)
        self._gen_castling(sq, piece, moves)

    def _gen_stepping(
        self,
        targets: tuple[Square, ...],
        color: Color,
        moves: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
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

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Square]) -> None:
        # Only piece identity, move history and empty squares are checked;
        # attacked transit squares do not prevent castling.
        if king.has_moved:
            return

        board = self._board
        for rook_file, direction in ((7, 1), (0, -1)):
            rook = board[Square(rook_file, king_sq.rank)]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue
            between = range(king_sq.file + direction, rook_file, direction)
            if not between or any(
                not board.is_empty(Square(f, king_sq.rank)) for f in between
            ):
                continue
            dest = king_sq.offset(2 * direction, 0)
            if dest is not None:
                moves.append(dest)


_Generator = Callable[[MoveGenerator, Square, "Piece", list[Square]], None]

_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
