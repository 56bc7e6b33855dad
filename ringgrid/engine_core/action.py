"""
Action Results - What the engine hands back for a join or a move.

Rejections are ordinary results, never exceptions. Each one carries
the reason it was rejected; the pass/fail outcome is the same as a
plain boolean.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameSession


class RejectReason(str, Enum):
    """Why a join or move was refused."""
    # Joins
    ROSTER_FULL = "ROSTER_FULL"
    GAME_ALREADY_STARTED = "GAME_ALREADY_STARTED"

    # Moves, in the order they are checked
    GAME_NOT_PLAYING = "GAME_NOT_PLAYING"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    NO_RINGS_REMAINING = "NO_RINGS_REMAINING"
    SLOT_OCCUPIED = "SLOT_OCCUPIED"


_MESSAGES = {
    RejectReason.ROSTER_FULL: "Game already has the maximum number of players",
    RejectReason.GAME_ALREADY_STARTED: "Game has already started",
    RejectReason.GAME_NOT_PLAYING: "Game is not in progress",
    RejectReason.OUT_OF_BOUNDS: "Position is off the board",
    RejectReason.NOT_YOUR_TURN: "It is not this color's turn",
    RejectReason.NO_RINGS_REMAINING: "No rings of that size left",
    RejectReason.SLOT_OCCUPIED: "Cell already holds a ring of that size",
}


@dataclass
class ActionResult:
    """
    Result of a join or move.

    On success `session` is the (mutated) session. On failure the
    session is untouched and `reason` says why.
    """
    success: bool
    session: GameSession | None = None
    reason: RejectReason | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, session: GameSession) -> ActionResult:
        return cls(success=True, session=session)

    @classmethod
    def failure(cls, reason: RejectReason) -> ActionResult:
        """Create a rejection result."""
        return cls(success=False, reason=reason, message=_MESSAGES[reason])
