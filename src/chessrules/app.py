"""Application entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from chessrules import __version__
from chessrules.console import (
    AppSettings,
    ConsoleMoveSource,
    attach_console,
    render_board,
)
from chessrules.console.player import HELP_TEXT, game_over_message
from chessrules.core.enums import GameResult, GameStatus
from chessrules.game import SnapshotError, TurnSession, load_snapshot, save_snapshot

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="chessrules",
    help="Standard chess for two players at one terminal.",
    add_completion=False,
)
console = Console()


def configure_logging(level: str) -> None:
    """Route log records to stderr at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def _open_session(path: Path | None) -> TurnSession:
    if path is None:
        return TurnSession()
    try:
        return load_snapshot(path)
    except (OSError, SnapshotError) as exc:
        console.print(f"[red]Could not load {path}: {exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]chessrules[/bold blue] v{__version__}")


@app.command()
def play(
    load: Path | None = typer.Option(
        None, "--load", "-l", help="Resume from a saved snapshot"
    ),
    autosave: Path | None = typer.Option(
        None, "--autosave", help="Save the game here when leaving early"
    ),
    ascii_only: bool = typer.Option(False, "--ascii", help="Use wp/bK piece codes"),
    no_coordinates: bool = typer.Option(
        False, "--no-coordinates", help="Hide file and rank labels"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Play a game, entering moves like E2 E4."""
    settings = AppSettings(
        use_unicode=not ascii_only,
        show_coordinates=not no_coordinates,
        log_level=log_level,
        autosave_path=autosave,
    )
    configure_logging(settings.log_level)

    session = _open_session(load)
    attach_console(session, console)
    console.print("[bold]Welcome to Chess![/bold]")
    console.print(HELP_TEXT)

    result = session.play(ConsoleMoveSource(console, settings))
    if result != GameResult.IN_PROGRESS:
        console.print(render_board(session.board, settings))
        return

    if settings.autosave_path is not None:
        path = save_snapshot(session, settings.autosave_path)
        console.print(f"Game saved to {path}")
    _LOGGER.info("Left game after %d moves", len(session.history))


@app.command()
def show(
    path: Path = typer.Argument(..., help="Snapshot file to display"),
    ascii_only: bool = typer.Option(False, "--ascii", help="Use wp/bK piece codes"),
) -> None:
    """Display a saved game and its status."""
    session = _open_session(path)
    console.print(render_board(session.board, AppSettings(use_unicode=not ascii_only)))

    status = session.status
    side = str(session.side_to_move).title()
    if status.is_terminal:
        console.print(game_over_message(session.result, status))
    elif status == GameStatus.CHECK:
        console.print(f"{side} to move and in check.")
    else:
        console.print(f"{side} to move.")


def main() -> None:
    """Launch the chessrules command line."""
    app()


if __name__ == "__main__":
    main()
