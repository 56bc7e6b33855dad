"""
Engine Core - Rules engine for a single game session.

The engine is the runtime that:
1. Seats players and hands out colors
2. Checks move legality (turn, inventory, board)
3. Places rings and consumes inventory
4. Scans the board for a win after every placement
5. Passes the turn

No I/O, no locking, no global state.
"""

from .pieces import (
    BOARD_SIZE,
    MAX_PLAYERS,
    PALETTE,
    SIZES,
    STARTING_RINGS_PER_SIZE,
    Color,
    Piece,
    Size,
)
from .inventory import RingInventory
from .board import Board, Cell
from .state import GameSession, GameStatus, Player
from .action import ActionResult, RejectReason
from .win_detection import WinResult, all_lines, find_winner, format_coordinate
from .engine import GameEngine, add_player, attempt_move

__all__ = [
    "BOARD_SIZE",
    "MAX_PLAYERS",
    "PALETTE",
    "SIZES",
    "STARTING_RINGS_PER_SIZE",
    "Color",
    "Piece",
    "Size",
    "RingInventory",
    "Board",
    "Cell",
    "GameSession",
    "GameStatus",
    "Player",
    "ActionResult",
    "RejectReason",
    "WinResult",
    "all_lines",
    "find_winner",
    "format_coordinate",
    "GameEngine",
    "add_player",
    "attempt_move",
]
