"""Concrete move sources."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.game.interfaces import IMoveSource, MoveRequest

if TYPE_CHECKING:
    from chessrules.core.types import Square
    from chessrules.game.session import TurnSession


class ScriptedMoveSource(IMoveSource):
    """Feeds a fixed sequence of moves, then stops.

    Moves may be given as :class:`MoveRequest` objects or as text such as
    ``"E2 E4"``. Handy for replaying games and for deterministic tests.

    Args:
        moves: The moves to play, in order.
        promotion: Piece chosen whenever a pawn promotes without an
            explicit choice in the script.
    """

    __slots__ = ("_pending", "_promotion", "requested")

    def __init__(
        self,
        moves: Iterable[MoveRequest | str],
        promotion: PieceType = PieceType.QUEEN,
    ) -> None:
        self._pending: deque[MoveRequest] = deque(
            MoveRequest.parse(m) if isinstance(m, str) else m for m in moves
        )
        self._promotion = promotion
        self.requested = 0

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def next_move(self, session: TurnSession) -> MoveRequest | None:
        self.requested += 1
        if not self._pending:
            return None
        return self._pending.popleft()

    def choose_promotion(self, session: TurnSession, square: Square) -> PieceType:
        return self._promotion


class CallbackMoveSource(IMoveSource):
    """A move source that delegates to plain callables.

    Args:
        on_next_move: ``(TurnSession) -> MoveRequest | None``, asked for
            each move.
        on_promotion: ``(TurnSession, Square) -> PieceType``, asked when
            a pawn promotes without an explicit choice; defaults to queen.
    """

    __slots__ = ("_on_next_move", "_on_promotion")

    def __init__(
        self,
        on_next_move: Callable[[TurnSession], MoveRequest | None],
        on_promotion: Callable[[TurnSession, Square], PieceType] | None = None,
    ) -> None:
        self._on_next_move = on_next_move
        self._on_promotion = on_promotion

    def next_move(self, session: TurnSession) -> MoveRequest | None:
        return self._on_next_move(session)

    def choose_promotion(self, session: TurnSession, square: Square) -> PieceType:
        if self._on_promotion is None:
            return super().choose_promotion(session, square)
        return self._on_promotion(session, square)
