"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, Rules, parse_square

    board = Board.initial()
    for to_sq in Rules.legal_moves(board, parse_square("e2")):
        print(to_sq)
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    Color,
    GameResult,
    GameStatus,
    PieceType,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    parse_move_input,
    parse_promotion,
    parse_square,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import ALL_SQUARES, Square, is_valid_coordinate

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_coordinate",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "parse_move_input",
    "parse_promotion",
    "parse_square",
]
