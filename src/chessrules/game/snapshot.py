"""Versioned game snapshots: save and restore a session's board and turn.

The format is plain JSON so any implementation can read it::

    {
      "version": 1,
      "side_to_move": "white",
      "en_passant": "E3" | null,
      "pieces": [
        {"square": "A8", "type": "rook", "color": "black", "has_moved": false},
        ...
      ]
    }

Pieces are listed in board order (rank 8 to rank 1, file A to H).
Move history is not part of a snapshot.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.session import TurnSession

_LOGGER = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1
SNAPSHOT_SUFFIX = ".json"


class SnapshotError(ValueError):
    """Raised when snapshot data is malformed or of an unsupported version."""


@dataclass(frozen=True, slots=True)
class PieceEntry:
    """One occupied square in a snapshot."""

    square: Square
    piece_type: PieceType
    color: Color
    has_moved: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "square": self.square.to_notation(),
            "type": self.piece_type.name.lower(),
            "color": str(self.color),
            "has_moved": self.has_moved,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PieceEntry:
        try:
            has_moved = data["has_moved"]
            if not isinstance(has_moved, bool):
                raise SnapshotError(f"has_moved must be a boolean: {data!r}")
            return cls(
                square=Square.from_notation(data["square"]),
                piece_type=PieceType[data["type"].upper()],
                color=Color[data["color"].upper()],
                has_moved=has_moved,
            )
        except SnapshotError:
            raise
        except (KeyError, AttributeError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Invalid piece entry {data!r}: {exc}") from exc

    def to_piece(self) -> Piece:
        return Piece(self.color, self.piece_type, self.square, self.has_moved)


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything needed to resume a session."""

    side_to_move: Color
    en_passant: Square | None = None
    pieces: tuple[PieceEntry, ...] = field(default_factory=tuple)
    version: int = SNAPSHOT_VERSION

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def capture(cls, session: TurnSession) -> GameSnapshot:
        board = session.board
        return cls(
            side_to_move=session.side_to_move,
            en_passant=board.en_passant,
            pieces=tuple(
                PieceEntry(sq, piece.piece_type, piece.color, piece.has_moved)
                for sq, piece in board.occupied()
            ),
        )

    def to_board(self) -> Board:
        try:
            return Board.from_pieces(
                (entry.to_piece() for entry in self.pieces), self.en_passant
            )
        except ValueError as exc:
            raise SnapshotError(str(exc)) from exc

    def to_session(self) -> TurnSession:
        return TurnSession(self.to_board(), self.side_to_move)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "side_to_move": str(self.side_to_move),
            "en_passant": (
                self.en_passant.to_notation() if self.en_passant is not None else None
            ),
            "pieces": [entry.to_dict() for entry in self.pieces],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSnapshot:
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object")
        version = data.get("version")
        if version != SNAPSHOT_VERSION:
            raise SnapshotError(f"Unsupported snapshot version: {version!r}")
        try:
            side = Color[str(data["side_to_move"]).upper()]
            ep_text = data.get("en_passant")
            en_passant = Square.from_notation(ep_text) if ep_text is not None else None
            raw_pieces = data["pieces"]
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Invalid snapshot header: {exc}") from exc
        if not isinstance(raw_pieces, list):
            raise SnapshotError("'pieces' must be a list")
        pieces = tuple(PieceEntry.from_dict(entry) for entry in raw_pieces)
        return cls(side, en_passant, pieces, version)


# ── Text and file helpers ────────────────────────────────────────────────────


def snapshot_session(session: TurnSession) -> GameSnapshot:
    return GameSnapshot.capture(session)


def dumps(session: TurnSession) -> str:
    """Serialise *session* to snapshot JSON text."""
    return json.dumps(snapshot_session(session).to_dict(), indent=2)


def loads(text: str) -> TurnSession:
    """Restore a session from snapshot JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    return GameSnapshot.from_dict(data).to_session()


def save_snapshot(session: TurnSession, file_path: Path) -> Path:
    """Write *session* to *file_path*, adding the ``.json`` suffix if missing."""
    save_path = file_path
    if save_path.suffix.lower() != SNAPSHOT_SUFFIX:
        save_path = save_path.with_suffix(SNAPSHOT_SUFFIX)
    save_path.write_text(dumps(session), encoding="utf-8")
    _LOGGER.info("Saved game to %s", save_path)
    return save_path


def load_snapshot(file_path: Path) -> TurnSession:
    """Read a session back from a snapshot file."""
    session = loads(file_path.read_text(encoding="utf-8"))
    _LOGGER.info("Loaded game from %s", file_path)
    return session
