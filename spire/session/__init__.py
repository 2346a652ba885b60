"""
Session Module - Manages in-memory game sessions.

A session represents one run:
- Created when the player starts a new game
- Holds the current game state
- Replaced wholesale on every successful command

Sessions are EPHEMERAL:
- No persistence to disk or database
- Lost when the process exits
"""

from .store import GameSession, SessionStore, InMemorySessionStore
from .manager import SessionManager, SessionNotFoundError, CommandOutcome

__all__ = [
    "GameSession",
    "SessionStore",
    "InMemorySessionStore",
    "SessionManager",
    "SessionNotFoundError",
    "CommandOutcome",
]
