"""
Session Manager - Creates, finds and removes game sessions.

LIFECYCLE:
1. Client creates a game -> empty session (WAITING), new uuid
2. Two players join -> PLAYING
3. Moves until somebody wins -> FINISHED
4. Session is removed explicitly or swept once idle for too long

PERSISTENCE RULES:
- In-memory only, nothing is written anywhere
- One manager instance is owned by the API service and injected; there
  is no module-level registry

CONCURRENCY:
- Every mutating call on a session must happen inside locked(), which
  holds that session's lock. Calls on different games never block
  each other.
- The engine itself does no locking.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator
import logging
import threading
import time

from ..engine_core.state import GameSession

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions
    - Look them up by id
    - Serialize mutations per session
    - Clean up removed and stale sessions
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create_session(self) -> GameSession:
        """Create a new, empty game session."""
        session = GameSession()
        with self._registry_lock:
            self._sessions[session.game_id] = session
            self._locks[session.game_id] = threading.Lock()
        logger.info("Created game %s", session.game_id)
        return session

    def get_session(self, game_id: str) -> GameSession | None:
        """Get a session by ID."""
        with self._registry_lock:
            return self._sessions.get(game_id)

    @contextmanager
    def locked(self, game_id: str) -> Iterator[GameSession | None]:
        """
        Hold a session's lock for the duration of the block.

        Yields None if the game does not exist (or was removed while
        waiting for the lock).
        """
        with self._registry_lock:
            lock = self._locks.get(game_id)
        if lock is None:
            yield None
            return

        with lock:
            yield self.get_session(game_id)

    def remove_session(self, game_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        with self._registry_lock:
            session = self._sessions.pop(game_id, None)
            self._locks.pop(game_id, None)
        if session is None:
            return False
        logger.info("Removed game %s", game_id)
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions."""
        with self._registry_lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._sessions)

    def cleanup_stale_sessions(self, max_idle_seconds: float = 3600) -> int:
        """
        Remove sessions with no activity for max_idle_seconds.

        Returns the number of sessions removed.
        """
        cutoff = time.time() - max_idle_seconds
        with self._registry_lock:
            stale = [
                game_id for game_id, session in self._sessions.items()
                if session.last_activity < cutoff
            ]

        removed = sum(1 for game_id in stale if self.remove_session(game_id))
        if removed:
            logger.info("Swept %d stale game(s)", removed)
        return removed
