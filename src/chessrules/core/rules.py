"""High-level chess rules: check, legal moves, checkmate and stalemate.

Draws by repetition, the fifty-move rule and insufficient material are
not detected; a game ends only by checkmate or stalemate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # ── Attack detection ─────────────────────────────────────────────────

    @staticmethod
    def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
        """Is *sq* among the pseudo-legal destinations of any *by_color* piece?"""
        gen = MoveGenerator(board)
        for from_sq, piece in board.occupied():
            if piece.color == by_color and sq in gen.pseudo_legal_moves(from_sq):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = board.find_king(color)
        if king_sq is None:
            return False
        return Rules.is_square_attacked(board, king_sq, color.opposite)

    # ── Legality ─────────────────────────────────────────────────────────

    @staticmethod
    def would_leave_king_in_check(
        board: Board, from_sq: Square, to_sq: Square, color: Color
    ) -> bool:
        """Probe a plain relocation and report whether *color* ends in check.

        Both touched slots are restored before returning, whatever the
        outcome; the board is left exactly as it was found.
        """
        piece = board[from_sq]
        captured = board[to_sq]

        board[to_sq] = piece
        board[from_sq] = None
        try:
            return Rules.is_in_check(board, color)
        finally:
            board[from_sq] = piece
            board[to_sq] = captured

    @staticmethod
    def legal_moves(board: Board, sq: Square) -> list[Square]:
        """Pseudo-legal destinations of the piece on *sq* that keep its king safe."""
        piece = board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in MoveGenerator(board).pseudo_legal_moves(sq)
            if not Rules.would_leave_king_in_check(board, sq, to_sq, piece.color)
        ]

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        candidates = MoveGenerator(board).all_pseudo_legal_moves(color)
        return any(
            not Rules.would_leave_king_in_check(board, from_sq, to_sq, color)
            for from_sq, to_sq in candidates
        )

    # ── Terminal conditions ──────────────────────────────────────────────

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Classify the position for *color*, the side about to move."""
        in_check = Rules.is_in_check(board, color)
        if Rules.has_any_legal_move(board, color):
            return GameStatus.CHECK if in_check else GameStatus.ONGOING
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the current game result."""
        status = Rules.status(board, side_to_move)
        if status == GameStatus.CHECKMATE:
            return GameResult.win_for(side_to_move.opposite)
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
