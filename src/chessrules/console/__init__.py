"""Terminal collaborators: rendering, settings and keyboard input."""

from chessrules.console.player import ConsoleMoveSource, attach_console
from chessrules.console.render import format_board, render_board
from chessrules.console.settings import AppSettings

__all__ = [
    "AppSettings",
    "ConsoleMoveSource",
    "attach_console",
    "format_board",
    "render_board",
]
