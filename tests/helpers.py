"""Positions and helpers shared by several test modules."""

from __future__ import annotations

from chessrules.core.board import Board

# After 1.f3 e5 2.g4 Qh4#, white is mated
FOOLS_MATE_MOVES = ("F2 F3", "E7 E5", "G2 G4", "D8 H4")

# Black king h8, white king f6, white queen g6; black to move has nothing
STALEMATE_PLACEMENT = "7k/8/5KQ1/8/8/8/8/8"

# Both sides with king and rooks on their home squares, nothing between
CASTLING_PLACEMENT = "r3k2r/8/8/8/8/8/8/R3K2R"

# White pawn one step from promotion, kings out of the way
PROMOTION_PLACEMENT = "8/4P3/8/8/8/8/8/k6K"


def grid_fingerprint(board: Board) -> list[tuple[int, object, object]]:
    """Identity and contents of every slot, for exact before/after checks."""
    return [
        (id(piece), piece.square, piece.has_moved)
        for _, piece in board.occupied()
    ] + [(0, board.en_passant, None)]
