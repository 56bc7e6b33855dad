"""
Game State - The mutable state of one game session.

A session moves WAITING -> PLAYING -> FINISHED and never goes back.
All state changes go through the GameEngine; this module only holds
data and read helpers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import time
import uuid

from .board import Board
from .inventory import RingInventory
from .pieces import Color


class GameStatus(str, Enum):
    """Lifecycle of a game session."""
    WAITING = "WAITING"  # Fewer than two players seated
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"  # Somebody won; terminal


@dataclass
class Player:
    """A seated player with their assigned color and remaining rings."""
    name: str
    color: Color
    inventory: RingInventory = field(default_factory=RingInventory)

    def has_any_rings(self) -> bool:
        return self.inventory.has_any()


@dataclass
class GameSession:
    """
    Complete state of one game.

    Owned by the session registry. The engine operates on exactly one
    session per call and never looks at any other.
    """
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    players: list[Player] = field(default_factory=list)
    board: Board = field(default_factory=Board)
    current_player_index: int = 0
    status: GameStatus = GameStatus.WAITING

    # Set once, when the game finishes
    winner: Color | None = None
    winning_line: list[str] | None = None

    last_activity: float = field(default_factory=time.time)

    @property
    def current_player(self) -> Player | None:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player_by_color(self, color: Any) -> Player | None:
        parsed = Color.parse(color)
        for player in self.players:
            if player.color == parsed:
                return player
        return None

    def has_playable_rings(self) -> bool:
        """True if any seated player still holds a ring."""
        return any(player.has_any_rings() for player in self.players)

    def touch(self) -> None:
        self.last_activity = time.time()
