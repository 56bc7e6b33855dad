"""
Session Module - Registry of live game sessions.

A session represents one game:
- Created empty when a client asks for a new game
- Looked up by its opaque id on every request
- Mutated only while its lock is held
- Removed on request or when idle for too long

Sessions are EPHEMERAL: in-memory only, no persistence.
"""

from .manager import SessionManager

__all__ = [
    "SessionManager",
]
