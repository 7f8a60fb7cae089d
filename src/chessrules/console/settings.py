"""Console front-end settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    use_unicode: bool = True
    show_coordinates: bool = True
    highlight_moves: bool = True  # mark targets on the board for `moves <sq>`

    # Logging
    log_level: str = "WARNING"

    # Persistence
    autosave_path: Path | None = None
