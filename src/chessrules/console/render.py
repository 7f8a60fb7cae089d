"""Text rendering of a board for the terminal."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from chessrules.console.settings import AppSettings
from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.types import Square

_FILE_LABELS = "ABCDEFGH"


def _cell(board: Board, sq: Square, settings: AppSettings, marked: bool) -> str:
    piece = board[sq]
    if settings.use_unicode:
        if piece is not None:
            return f"{piece.symbol} "
        return "• " if marked else "· "
    if piece is not None:
        return piece.code
    if marked:
        return "**"
    return "##" if (sq.file + sq.rank) % 2 == 0 else "  "


def format_board(
    board: Board,
    settings: AppSettings | None = None,
    highlights: Iterable[Square] = (),
) -> str:
    """Plain-text board, rank 8 at the top."""
    return render_board(board, settings, highlights).plain


def render_board(
    board: Board,
    settings: AppSettings | None = None,
    highlights: Iterable[Square] = (),
) -> Text:
    """Styled board for a rich console, rank 8 at the top."""
    settings = settings or AppSettings()
    marked = set(highlights)
    text = Text()
    for rank in range(8):
        if settings.show_coordinates:
            text.append(f"{8 - rank} ", style="dim")
        for file in range(8):
            sq = Square(file, rank)
            piece = board[sq]
            if sq in marked:
                style = "bold green"
            elif piece is None:
                style = "dim"
            elif piece.color == Color.WHITE:
                style = "bold"
            else:
                style = "cyan"
            text.append(_cell(board, sq, settings, sq in marked), style=style)
            if file < 7:
                text.append(" ")
        text.append("\n")
    if settings.show_coordinates:
        width = 3
        files = "".join(label.ljust(width) for label in _FILE_LABELS).rstrip()
        text.append(f"  {files}\n", style="dim")
    return text
