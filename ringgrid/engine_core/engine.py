"""
Game Engine - Joins, moves, turn order and win detection.

The engine is the single point of state mutation for a session.

Design principles:
- Stateless: all state lives in the GameSession passed in
- Validates everything before touching anything; a rejected call
  leaves board, inventories and turn untouched
- Returns ActionResult instead of raising
- Not thread-safe: the session registry serializes calls per game
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .action import ActionResult, RejectReason
from .board import Board
from .pieces import MAX_PLAYERS, PALETTE, Color, Size
from .state import GameSession, GameStatus, Player
from .win_detection import find_winner


@dataclass
class GameEngine:
    """
    Applies joins and moves to a game session.

    Usage:
        engine = GameEngine()
        engine.add_player(session, "Alice")
        engine.add_player(session, "Bob")
        result = engine.attempt_move(session, 0, 0, "SMALL", "RED")
    """
    max_players: int = MAX_PLAYERS

    def add_player(self, session: GameSession, name: str) -> ActionResult:
        """
        Seat a player and give them the next palette color.

        The game starts as soon as the roster is full.
        """
        if session.num_players >= self.max_players:
            return ActionResult.failure(RejectReason.ROSTER_FULL)
        if session.status != GameStatus.WAITING:
            return ActionResult.failure(RejectReason.GAME_ALREADY_STARTED)

        color = PALETTE[session.num_players]
        session.players.append(Player(name=name, color=color))

        if session.num_players == self.max_players:
            session.status = GameStatus.PLAYING

        session.touch()
        return ActionResult.ok(session)

    def attempt_move(
        self,
        session: GameSession,
        row: int,
        col: int,
        size: Any,
        color: Any,
    ) -> ActionResult:
        """
        Place a ring for the player whose turn it is.

        Preconditions are checked in order and the first failure is
        reported. On success the board is rescanned for a win; if there
        is none the turn passes on.
        """
        rejection = self._validate_move(session, row, col, size, color)
        if rejection:
            return ActionResult.failure(rejection)

        player = session.current_player
        ring_size = Size.parse(size)
        session.board.place(row, col, ring_size, player.color)
        player.inventory.consume(ring_size)

        win = find_winner(session.board)
        if win:
            session.winner = win.color
            session.winning_line = win.winning_line
            session.status = GameStatus.FINISHED
        else:
            self._advance_turn(session)

        session.touch()
        return ActionResult.ok(session)

    def _validate_move(
        self,
        session: GameSession,
        row: int,
        col: int,
        size: Any,
        color: Any,
    ) -> RejectReason | None:
        if session.status != GameStatus.PLAYING:
            return RejectReason.GAME_NOT_PLAYING
        if not Board.in_bounds(row, col):
            return RejectReason.OUT_OF_BOUNDS

        player = session.current_player
        if player.color != Color.parse(color):
            return RejectReason.NOT_YOUR_TURN
        if not player.inventory.has_remaining(size):
            return RejectReason.NO_RINGS_REMAINING
        if not session.board.can_place(row, col, size):
            return RejectReason.SLOT_OCCUPIED
        return None

    def _advance_turn(self, session: GameSession) -> None:
        """
        Pass the turn round-robin, skipping players with no rings.

        Bounded by the roster size. If nobody has rings left the turn
        moves exactly one seat.
        """
        count = session.num_players
        for _ in range(count):
            session.current_player_index = (session.current_player_index + 1) % count
            if session.current_player.has_any_rings() or not session.has_playable_rings():
                return


def add_player(session: GameSession, name: str) -> ActionResult:
    """Convenience wrapper around GameEngine.add_player()."""
    return GameEngine().add_player(session, name)


def attempt_move(
    session: GameSession,
    row: int,
    col: int,
    size: Any,
    color: Any,
) -> ActionResult:
    """Convenience wrapper around GameEngine.attempt_move()."""
    return GameEngine().attempt_move(session, row, col, size, color)
