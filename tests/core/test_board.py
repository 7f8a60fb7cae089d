"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation import board_from_placement
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D5, D6, D7, E2, E3, E4, E5, F3,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        king = board[E1]
        assert king is not None
        assert (king.color, king.piece_type) == (Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        king = board[E8]
        assert king is not None
        assert (king.color, king.piece_type) == (Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt, sq), f"Mismatch at {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt, sq), f"Mismatch at {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        pawns = [p for _, p in board.occupied() if p.piece_type == PieceType.PAWN]
        white = [p for p in pawns if p.color == Color.WHITE]
        black = [p for p in pawns if p.color == Color.BLACK]
        assert len(white) == 8 and all(p.square.to_notation()[1] == "2" for p in white)
        assert len(black) == 8 and all(p.square.to_notation()[1] == "7" for p in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for index in range(16, 48):
            assert board[Square.from_index(index)] is None

    def test_stored_square_matches_slot(self) -> None:
        board = Board.initial()
        assert all(piece.square == sq for sq, piece in board.occupied())

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert not any(piece.has_moved for _, piece in board.occupied())
        assert board.en_passant is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN, E2)
        board.set_piece(E4, piece)
        assert board.piece_at(E4) is piece
        assert piece.square == E4
        assert board.is_empty(E2)

    def test_set_piece_none_clears(self) -> None:
        board = Board.initial()
        board.set_piece(E2, None)
        assert board[E2] is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.apply_move(E2, E4)
        assert board != copy
        assert board[E2] is not None
        assert not board[E2].has_moved

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing_returns_none(self) -> None:
        assert Board().find_king(Color.WHITE) is None

    def test_all_pieces_count(self) -> None:
        colors = [piece.color for _, piece in Board.initial().occupied()]
        assert colors.count(Color.WHITE) == 16
        assert colors.count(Color.BLACK) == 16

    def test_empty_board(self) -> None:
        assert list(Board().occupied()) == []

    def test_from_pieces_duplicate_rejected(self) -> None:
        pieces = [
            Piece(Color.WHITE, PieceType.KING, E1),
            Piece(Color.BLACK, PieceType.KING, E1),
        ]
        with pytest.raises(ValueError, match="Two pieces"):
            Board.from_pieces(pieces)

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestApplyMove:
    def test_plain_move_updates_piece(self) -> None:
        board = Board.initial()
        knight = board[G1]
        captured = board.apply_move(G1, F3)
        assert captured is None
        assert board[F3] is knight
        assert board[G1] is None
        assert knight.square == F3
        assert knight.has_moved

    def test_empty_origin_is_contract_violation(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            Board.initial().apply_move(E4, E5)

    def test_capture_returns_captured(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        captured = board.apply_move(E4, D5)
        assert captured is not None
        assert captured.piece_type == PieceType.PAWN
        assert captured.color == Color.BLACK
        assert board[D5].color == Color.WHITE

    def test_double_push_sets_en_passant_target(self) -> None:
        board = Board.initial()
        board.apply_move(E2, E4)
        assert board.en_passant == E3
        board.apply_move(D7, D5)
        assert board.en_passant == D6

    def test_en_passant_target_cleared_by_next_move(self) -> None:
        board = Board.initial()
        board.apply_move(E2, E4)
        board.apply_move(G8, Square.from_notation("F6"))
        assert board.en_passant is None

    def test_single_push_sets_no_target(self) -> None:
        board = Board.initial()
        board.apply_move(E2, E3)
        assert board.en_passant is None

    def test_en_passant_capture_removes_passed_pawn(self) -> None:
        board = board_from_placement("4k3/8/8/3pP3/8/8/8/4K3", en_passant=D6)
        captured = board.apply_move(E5, D6)
        assert captured is not None and captured.piece_type == PieceType.PAWN
        assert board[D5] is None
        assert board[D6].color == Color.WHITE
        assert board.en_passant is None

    def test_kingside_castling_moves_rook(self) -> None:
        board = board_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        rook = board[H1]
        board.apply_move(E1, G1)
        assert board[G1].piece_type == PieceType.KING
        assert board[F1] is rook
        assert board[H1] is None
        assert rook.square == F1
        assert rook.has_moved

    def test_queenside_castling_moves_rook(self) -> None:
        board = board_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        rook = board[A8]
        board.apply_move(E8, C8)
        assert board[C8].piece_type == PieceType.KING
        assert board[D8] is rook
        assert board[A8] is None
        assert rook.has_moved

    def test_has_moved_never_resets(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/R3K3")
        board.apply_move(A1, Square.from_notation("A2"))
        board.apply_move(Square.from_notation("A2"), A1)
        assert board[A1].has_moved

    def test_promotion_substitution(self) -> None:
        board = board_from_placement("8/4P3/8/8/8/8/8/k6K")
        board.apply_move(Square.from_notation("E7"), E8)
        queen = Piece(Color.WHITE, PieceType.QUEEN, E1, has_moved=True)
        board.set_piece(E8, queen)
        assert board[E8] is queen
        assert queen.square == E8
