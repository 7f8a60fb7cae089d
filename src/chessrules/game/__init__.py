"""Game management layer: turn state machine, move sources, snapshots.

Quick start::

    from chessrules.game import ScriptedMoveSource, TurnSession

    session = TurnSession()
    result = session.play(ScriptedMoveSource(["F2 F3", "E7 E5", "G2 G4", "D8 H4"]))
"""

from chessrules.game.interfaces import (
    GamePhase,
    IMoveSource,
    MoveOutcome,
    MoveRequest,
)
from chessrules.game.player import CallbackMoveSource, ScriptedMoveSource
from chessrules.game.session import GameEvents, MoveRecord, TurnSession
from chessrules.game.snapshot import (
    SNAPSHOT_VERSION,
    GameSnapshot,
    SnapshotError,
    load_snapshot,
    save_snapshot,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IMoveSource",
    "MoveOutcome",
    "MoveRequest",
    # Concrete
    "CallbackMoveSource",
    "GameEvents",
    "MoveRecord",
    "ScriptedMoveSource",
    "TurnSession",
    # Persistence
    "SNAPSHOT_VERSION",
    "GameSnapshot",
    "SnapshotError",
    "load_snapshot",
    "save_snapshot",
]
