"""Interactive terminal move source and session announcements."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from chessrules.console.render import render_board
from chessrules.console.settings import AppSettings
from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.notation import parse_promotion, parse_square
from chessrules.game.interfaces import IMoveSource, MoveOutcome, MoveRequest
from chessrules.game.snapshot import save_snapshot

if TYPE_CHECKING:
    from chessrules.core.types import Square
    from chessrules.game.session import TurnSession

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = (
    "Enter moves as two squares, e.g. [bold]E2 E4[/bold] "
    "(add Q/R/B/N to choose a promotion).\n"
    "Commands: [bold]moves <square>[/bold], [bold]save <file>[/bold], "
    "[bold]help[/bold], [bold]quit[/bold]."
)

_REJECTION_MESSAGES: dict[MoveOutcome, str] = {
    MoveOutcome.NO_PIECE: "No piece at {from_sq}.",
    MoveOutcome.WRONG_COLOR: "You can only move your own pieces.",
    MoveOutcome.ILLEGAL_DESTINATION: "Invalid move for that piece.",
    MoveOutcome.LEAVES_KING_IN_CHECK: "That move would leave your king in check.",
    MoveOutcome.INVALID_PROMOTION: "Promotion is only possible to Q, R, B or N "
    "on the last rank.",
    MoveOutcome.GAME_OVER: "The game is over.",
}


def rejection_message(request: MoveRequest, outcome: MoveOutcome) -> str:
    template = _REJECTION_MESSAGES.get(outcome, "Move rejected.")
    return template.format(from_sq=request.from_sq, to_sq=request.to_sq)


def game_over_message(result: GameResult, status: GameStatus) -> str:
    if status == GameStatus.CHECKMATE:
        winner = "White" if result == GameResult.WHITE_WINS else "Black"
        return f"Checkmate! {winner} wins!"
    return "Stalemate! It's a draw."


def attach_console(session: TurnSession, console: Console) -> None:
    """Print check, rejection and game-over announcements for *session*."""
    session.events.on_rejected.append(
        lambda request, outcome: console.print(
            f"[red]{rejection_message(request, outcome)}[/red]"
        )
    )
    session.events.on_check.append(
        lambda color: console.print(f"[yellow]{_side_name(color)} is in check![/yellow]")
    )
    session.events.on_game_over.append(
        lambda result, status: console.print(
            f"[bold]{game_over_message(result, status)}[/bold]"
        )
    )


def _side_name(color: Color) -> str:
    return str(color).title()


class ConsoleMoveSource(IMoveSource):
    """Reads moves typed at the terminal.

    The board is shown before every prompt. Commands are handled here and
    never reach the session; only parsed move requests do.
    """

    __slots__ = ("_console", "_settings")

    def __init__(self, console: Console, settings: AppSettings | None = None) -> None:
        self._console = console
        self._settings = settings or AppSettings()

    def next_move(self, session: TurnSession) -> MoveRequest | None:
        console = self._console
        highlights: list[Square] = []
        while True:
            console.print(render_board(session.board, self._settings, highlights))
            highlights = []
            line = console.input(f"{_side_name(session.side_to_move)} to move: ").strip()
            if not line:
                continue

            command, _, argument = line.partition(" ")
            command = command.lower()
            if command in ("quit", "exit"):
                return None
            if command == "help":
                console.print(HELP_TEXT)
                continue
            if command == "save":
                self._save(session, argument.strip())
                continue
            if command == "moves":
                highlights = self._show_moves(session, argument.strip())
                continue

            try:
                return MoveRequest.parse(line)
            except ValueError:
                console.print(
                    "[red]Invalid input format. Please use the format: E2 E4.[/red]"
                )

    def choose_promotion(self, session: TurnSession, square: Square) -> PieceType:
        answer = self._console.input("Pawn promotion! Choose piece (Q/R/B/N): ")
        try:
            return parse_promotion(answer)
        except ValueError:
            return PieceType.QUEEN

    # ── Commands ─────────────────────────────────────────────────────────

    def _save(self, session: TurnSession, argument: str) -> None:
        if not argument:
            self._console.print("[red]Usage: save <file>[/red]")
            return
        try:
            path = save_snapshot(session, Path(argument))
        except OSError as exc:
            _LOGGER.warning("Could not save game: %s", exc)
            self._console.print(f"[red]Save failed: {exc}[/red]")
            return
        self._console.print(f"Game saved to {path}")

    def _show_moves(self, session: TurnSession, argument: str) -> list[Square]:
        try:
            sq = parse_square(argument)
        except ValueError:
            self._console.print("[red]Usage: moves <square>, e.g. moves E2[/red]")
            return []
        targets = session.legal_moves(sq)
        if not targets:
            self._console.print(f"No legal moves from {sq}.")
            return []
        names = " ".join(sorted(t.to_notation() for t in targets))
        self._console.print(f"Legal moves from {sq}: {names}")
        return targets if self._settings.highlight_moves else []
