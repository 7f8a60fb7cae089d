"""Tests for pseudo-legal move generation, plus move-count (perft) checks.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import board_from_placement
from chessrules.core.rules import Rules
from chessrules.core.types import (
    A1, A3, B1, B3, B6, C1, C2, C3, C8,
    D3, D4, D6, E1, E2, E3, E4, E5, E6, E7, E8, F5, G1, G6, G8, Square,
)


def _moves(board: Board, sq: Square) -> set[Square]:
    return set(MoveGenerator(board).pseudo_legal_moves(sq))


def perft(board: Board, color: Color, depth: int) -> int:
    """Count leaf nodes at *depth*, playing each legal move on a copy."""
    if depth == 0:
        return 1
    nodes = 0
    for from_sq, piece in list(board.occupied()):
        if piece.color != color:
            continue
        for to_sq in Rules.legal_moves(board, from_sq):
            child = board.copy()
            child.apply_move(from_sq, to_sq)
            nodes += perft(child, color.opposite, depth - 1)
    return nodes


class TestStartingPosition:
    def test_white_has_twenty_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert len(gen.all_pseudo_legal_moves(Color.WHITE)) == 20

    def test_knight_targets(self) -> None:
        assert _moves(Board.initial(), B1) == {A3, C3}

    def test_boxed_in_king(self) -> None:
        assert _moves(Board.initial(), E1) == set()

    def test_empty_square_has_no_moves(self) -> None:
        assert MoveGenerator(Board.initial()).pseudo_legal_moves(E4) == []

    def test_generation_does_not_mutate(self) -> None:
        board = Board.initial()
        MoveGenerator(board).all_pseudo_legal_moves(Color.WHITE)
        assert board == Board.initial()


class TestSlidingPieces:
    def test_rook_open_board(self) -> None:
        board = board_from_placement("4k3/8/8/8/3R4/8/8/4K3")
        assert len(_moves(board, D4)) == 14

    def test_rook_stops_before_own_piece(self) -> None:
        board = board_from_placement("4k3/8/8/8/3RP3/8/8/4K3")
        moves = _moves(board, D4)
        assert len(moves) == 10
        assert E4 not in moves

    def test_bishop_captures_and_stops(self) -> None:
        board = board_from_placement("4k3/8/8/5p2/8/3B4/8/4K3")
        moves = _moves(board, D3)
        assert E4 in moves
        assert F5 in moves
        assert G6 not in moves

    def test_queen_is_rook_plus_bishop(self) -> None:
        board = board_from_placement("4k3/8/8/8/3Q4/8/8/4K3")
        assert len(_moves(board, D4)) == 27


class TestKnightAndKing:
    def test_knight_in_corner(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/N3K3")
        assert _moves(board, A1) == {B3, C2}

    def test_king_may_capture_but_not_take_own(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/3pP3/4K3")
        moves = _moves(board, E1)
        assert Square.from_notation("D2") in moves
        assert E2 not in moves


class TestPawns:
    def test_single_and_double_push_from_home(self) -> None:
        assert _moves(Board.initial(), E2) == {E3, E4}

    def test_black_moves_down_the_board(self) -> None:
        assert _moves(Board.initial(), E7) == {E6, E5}

    def test_no_double_push_off_home_rank(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/4P3/8/4K3")
        assert _moves(board, E3) == {E4}

    def test_blocked_pawn(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/4p3/4P3/4K3")
        assert _moves(board, E2) == set()

    def test_double_push_needs_empty_destination(self) -> None:
        board = board_from_placement("4k3/8/8/8/4p3/8/4P3/4K3")
        assert _moves(board, E2) == {E3}

    def test_diagonal_only_onto_opponent(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/3p1P2/4P3/4K3")
        assert _moves(board, E2) == {E3, E4, D3}

    def test_en_passant_target_offered(self) -> None:
        board = board_from_placement("4k3/8/8/3pP3/8/8/8/4K3", en_passant=D6)
        assert _moves(board, E5) == {E6, D6}

    def test_no_en_passant_without_target(self) -> None:
        board = board_from_placement("4k3/8/8/3pP3/8/8/8/4K3")
        assert _moves(board, E5) == {E6}

    def test_distant_en_passant_target_ignored(self) -> None:
        board = board_from_placement("4k3/8/8/3pP3/8/8/8/4K3", en_passant=B6)
        assert _moves(board, E5) == {E6}


class TestCastlingCandidates:
    PLACEMENT = "r3k2r/8/8/8/8/8/8/R3K2R"

    def test_both_sides_available(self) -> None:
        board = board_from_placement(self.PLACEMENT)
        moves = _moves(board, E1)
        assert {G1, C1} <= moves

    def test_black_both_sides(self) -> None:
        board = board_from_placement(self.PLACEMENT)
        assert {G8, C8} <= _moves(board, E8)

    def test_king_moved(self) -> None:
        board = board_from_placement(self.PLACEMENT)
        board[E1].has_moved = True
        moves = _moves(board, E1)
        assert G1 not in moves
        assert C1 not in moves

    def test_kingside_rook_moved(self) -> None:
        board = board_from_placement(self.PLACEMENT)
        board[Square.from_notation("H1")].has_moved = True
        moves = _moves(board, E1)
        assert G1 not in moves
        assert C1 in moves

    def test_kingside_square_occupied(self) -> None:
        board = board_from_placement("r3k2r/8/8/8/8/8/8/R3KB1R")
        moves = _moves(board, E1)
        assert G1 not in moves
        assert C1 in moves

    def test_queenside_needs_three_empty_squares(self) -> None:
        board = board_from_placement("r3k2r/8/8/8/8/8/8/RN2K2R")
        moves = _moves(board, E1)
        assert C1 not in moves
        assert G1 in moves

    def test_corner_rook_of_other_color(self) -> None:
        board = board_from_placement("r3k3/8/8/8/8/8/8/R3K2r")
        assert G1 not in _moves(board, E1)


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 1) == 20

    def test_depth_2(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(Board.initial(), Color.WHITE, 3) == 8_902
