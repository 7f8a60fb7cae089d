"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.notation import board_from_placement
from chessrules.game.session import TurnSession
from helpers import CASTLING_PLACEMENT


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def session() -> TurnSession:
    return TurnSession()


@pytest.fixture
def castling_session() -> TurnSession:
    return TurnSession(board_from_placement(CASTLING_PLACEMENT), Color.WHITE)
