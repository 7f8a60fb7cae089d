"""TurnSession, the White-to-move / Black-to-move state machine.

Coordinates: Board, Rules and an injected move source.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    Color,
    GameResult,
    GameStatus,
    PieceType,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square
from chessrules.game.interfaces import GamePhase, IMoveSource, MoveOutcome, MoveRequest

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    piece_type: PieceType
    from_sq: Square
    to_sq: Square
    captured: PieceType | None = None
    promotion: PieceType | None = None
    is_castling: bool = False
    is_en_passant: bool = False
    gives_check: bool = False

    def __str__(self) -> str:
        text = f"{self.from_sq} {self.to_sq}"
        if self.promotion is not None:
            text += f" ={self.promotion.name.title()}"
        if self.gives_check:
            text += " +"
        return text


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
RejectCallback = Callable[[MoveRequest, MoveOutcome], None]
CheckCallback = Callable[[Color], None]  # color in check
GameOverCallback = Callable[[GameResult, GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class TurnSession:
    """Orchestrates one game: validates moves, applies them, flips turns.

    The session exclusively owns its :class:`Board`; collaborators read it
    through :attr:`board` but must not mutate it. Legality probes write to
    the board transiently, so every method is meant to be called from a
    single thread.
    """

    __slots__ = (
        "_board",
        "_side_to_move",
        "_phase",
        "_result",
        "_status",
        "_evaluated",
        "_history",
        "events",
    )

    def __init__(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._phase = GamePhase.AWAITING_MOVE
        self._result = GameResult.IN_PROGRESS
        self._status = GameStatus.ONGOING
        self._evaluated = False
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def status(self) -> GameStatus:
        """Status of the side to move as of the last evaluation."""
        self._ensure_evaluated()
        return self._status

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Queries for collaborators ────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations from *sq* for the side to move."""
        piece = self._board[sq]
        if piece is None or piece.color != self._side_to_move:
            return []
        return Rules.legal_moves(self._board, sq)

    def find_king(self, color: Color) -> Square | None:
        return self._board.find_king(color)

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._board, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self._board, color)

    def is_stalemate(self, color: Color) -> bool:
        return Rules.is_stalemate(self._board, color)

    def is_promotion_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether moving the piece on *from_sq* to *to_sq* promotes a pawn."""
        piece = self._board[from_sq]
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and to_sq.rank == piece.color.opposite.back_rank
        )

    # ── Turn handling ────────────────────────────────────────────────────

    def evaluate(self) -> GameStatus:
        """Classify the side to move and end the session on mate/stalemate."""
        status = Rules.status(self._board, self._side_to_move)
        self._apply_status(status)
        return status

    def validate(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Check a move for the side to move without applying it."""
        self._ensure_evaluated()
        if self.is_game_over:
            return MoveOutcome.GAME_OVER

        piece = self._board[from_sq]
        if piece is None:
            return MoveOutcome.NO_PIECE
        if piece.color != self._side_to_move:
            return MoveOutcome.WRONG_COLOR
        if to_sq not in MoveGenerator(self._board).pseudo_legal_moves(from_sq):
            return MoveOutcome.ILLEGAL_DESTINATION
        if Rules.would_leave_king_in_check(self._board, from_sq, to_sq, piece.color):
            return MoveOutcome.LEAVES_KING_IN_CHECK
        return MoveOutcome.APPLIED

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> MoveOutcome:
        """Validate and, if legal, apply a move. Rejections change nothing."""
        request = MoveRequest(from_sq, to_sq, promotion)
        outcome = self.validate(from_sq, to_sq)
        if outcome.accepted and promotion is not None:
            if (
                promotion not in PROMOTION_TYPES
                or not self.is_promotion_move(from_sq, to_sq)
            ):
                outcome = MoveOutcome.INVALID_PROMOTION
        if not outcome.accepted:
            _LOGGER.debug("Rejected %s: %s", request, outcome.name)
            for cb in self.events.on_rejected:
                cb(request, outcome)
            return outcome

        record = self._apply(from_sq, to_sq, promotion)
        for cb in self.events.on_move:
            cb(record)
        self._apply_status(self._status)
        return outcome

    def play(self, source: IMoveSource) -> GameResult:
        """Run turns, pulling moves from *source* until the game ends.

        Returns ``IN_PROGRESS`` if the source stops before the end.
        """
        self._ensure_evaluated()
        while not self.is_game_over:
            request = source.next_move(self)
            if request is None:
                _LOGGER.info("Move source stopped; game left in progress")
                break
            promotion = request.promotion
            if (
                promotion is None
                and self.is_promotion_move(request.from_sq, request.to_sq)
                and self.validate(request.from_sq, request.to_sq).accepted
            ):
                promotion = source.choose_promotion(self, request.to_sq)
            self.submit_move(request.from_sq, request.to_sq, promotion)
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None
    ) -> MoveRecord:
        board = self._board
        piece = board[from_sq]
        assert piece is not None
        color = piece.color

        is_promotion = self.is_promotion_move(from_sq, to_sq)
        is_castling = (
            piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2
        )
        is_en_passant = (
            piece.piece_type == PieceType.PAWN
            and to_sq.file != from_sq.file
            and board.is_empty(to_sq)
        )

        captured = board.apply_move(from_sq, to_sq)
        promoted_to: PieceType | None = None
        if is_promotion:
            promoted_to = promotion or PieceType.QUEEN
            board.set_piece(to_sq, Piece(color, promoted_to, to_sq, has_moved=True))
            _LOGGER.debug("Pawn on %s promoted to %s", to_sq, promoted_to.name)

        self._side_to_move = color.opposite
        self._status = Rules.status(board, self._side_to_move)
        record = MoveRecord(
            color=color,
            piece_type=piece.piece_type,
            from_sq=from_sq,
            to_sq=to_sq,
            captured=captured.piece_type if captured is not None else None,
            promotion=promoted_to,
            is_castling=is_castling,
            is_en_passant=is_en_passant,
            gives_check=self._status in (GameStatus.CHECK, GameStatus.CHECKMATE),
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s", color, record)
        return record

    def _ensure_evaluated(self) -> None:
        if not self._evaluated:
            self.evaluate()

    def _apply_status(self, status: GameStatus) -> None:
        self._status = status
        self._evaluated = True
        if status == GameStatus.CHECK:
            for cb in self.events.on_check:
                cb(self._side_to_move)
            return
        if not status.is_terminal or self.is_game_over:
            return

        if status == GameStatus.CHECKMATE:
            self._result = GameResult.win_for(self._side_to_move.opposite)
        else:
            self._result = GameResult.DRAW
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("Game over: %s (%s)", self._result.name, status.name)
        for cb in self.events.on_game_over:
            cb(self._result, status)
