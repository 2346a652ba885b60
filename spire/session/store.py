"""
Session Store - Where game sessions live between requests.

The engine never touches storage directly. Anything that can create,
fetch and replace a GameState by ID can back a SessionManager:

    store.create(state) -> GameSession   (assigns a new unique ID)
    store.get(id)       -> GameSession | None
    store.put(id, state) -> GameSession

Sessions are process-lifetime only. There is no delete: a finished run
simply stays in memory until the process exits.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator
import threading
import time
import uuid

from ..engine_core.state import GameState


@dataclass
class GameSession:
    """A stored run: its ID and current state."""
    session_id: str
    game_state: GameState
    created_at: float
    updated_at: float


class SessionStore(ABC):
    """Storage interface for game sessions."""

    @abstractmethod
    def create(self, state: GameState) -> GameSession:
        """Store a new session under a freshly generated ID."""

    @abstractmethod
    def get(self, session_id: str) -> GameSession | None:
        """Fetch a session, or None if the ID is unknown."""

    @abstractmethod
    def put(self, session_id: str, state: GameState) -> GameSession:
        """Replace the state of an existing session."""

    @abstractmethod
    def lock(self, session_id: str):
        """Context manager giving exclusive access to one session."""

    @abstractmethod
    def list_ids(self) -> list[str]:
        """IDs of every stored session."""


class InMemorySessionStore(SessionStore):
    """
    Dict-backed store with one lock per session.

    Each session ID gets its own lock so commands for one game are
    serialized while different games proceed independently.
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create(self, state: GameState) -> GameSession:
        session_id = str(uuid.uuid4())
        now = time.time()
        session = GameSession(
            session_id=session_id,
            game_state=state,
            created_at=now,
            updated_at=now,
        )
        with self._registry_lock:
            self._sessions[session_id] = session
            self._locks[session_id] = threading.Lock()
        return session

    def get(self, session_id: str) -> GameSession | None:
        return self._sessions.get(session_id)

    def put(self, session_id: str, state: GameState) -> GameSession:
        existing = self._sessions.get(session_id)
        if existing is None:
            raise KeyError(f"Unknown session: {session_id}")
        session = GameSession(
            session_id=session_id,
            game_state=state,
            created_at=existing.created_at,
            updated_at=time.time(),
        )
        self._sessions[session_id] = session
        return session

    @contextmanager
    def lock(self, session_id: str) -> Iterator[None]:
        with self._registry_lock:
            session_lock = self._locks.get(session_id)
        if session_lock is None:
            # Unknown ID: nothing to guard, the caller's lookup will fail
            yield
            return
        with session_lock:
            yield

    def list_ids(self) -> list[str]:
        return list(self._sessions.keys())

    def __len__(self) -> int:
        return len(self._sessions)
