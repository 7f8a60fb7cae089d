"""Abstract interfaces and value types for the game layer.

The :class:`~chessrules.game.session.TurnSession` depends on the
:class:`IMoveSource` ABC, not on any concrete input mechanism.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.notation import parse_move_input, promotion_char

if TYPE_CHECKING:
    from chessrules.core.types import Square
    from chessrules.game.session import TurnSession


# ── Session FSM states ───────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine phases of a session.

    While ``AWAITING_MOVE`` the session's ``side_to_move`` tells whether
    White or Black is on turn.
    """

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class MoveOutcome(IntEnum):
    """Result of submitting a move to a session."""

    APPLIED = 0
    NO_PIECE = auto()
    WRONG_COLOR = auto()
    ILLEGAL_DESTINATION = auto()
    LEAVES_KING_IN_CHECK = auto()
    INVALID_PROMOTION = auto()
    GAME_OVER = auto()

    @property
    def accepted(self) -> bool:
        return self == MoveOutcome.APPLIED


# ── Move requests ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """A candidate move as supplied by a collaborator."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    @classmethod
    def parse(cls, text: str) -> MoveRequest:
        """Parse ``'E2 E4'`` or ``'E7 E8 Q'``; raises ``ValueError``."""
        from_sq, to_sq, promotion = parse_move_input(text)
        return cls(from_sq, to_sq, promotion)

    def __str__(self) -> str:
        base = f"{self.from_sq} {self.to_sq}"
        if self.promotion is not None:
            base += f" {promotion_char(self.promotion)}"
        return base


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMoveSource(ABC):
    """Supplies one move per call to a session (console, script, network...)."""

    @abstractmethod
    def next_move(self, session: TurnSession) -> MoveRequest | None:
        """Return the next candidate move, or ``None`` to stop playing.

        Called once per attempt; after a rejected move the session asks
        again for the same side.
        """

    def choose_promotion(self, session: TurnSession, square: Square) -> PieceType:
        """Piece a pawn arriving on *square* becomes when none was given."""
        return PieceType.QUEEN
