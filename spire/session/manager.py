"""
Session Manager - Runs commands against stored game sessions.

LIFECYCLE:
1. new_game() builds an initial state and stores it under a new ID
2. apply() fetches the state, runs the reducer, and stores the result
3. Sessions are never deleted; they live as long as the process

Every apply() holds the session's lock for the whole
fetch -> reduce -> store sequence, so two commands for the same game
never interleave. A rejected command stores nothing.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random

from ..content import GameContent, create_default_content, create_initial_state
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from .store import GameSession, SessionStore, InMemorySessionStore


logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """Raised when a command names a session that does not exist."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Game not found: {self.session_id}"


@dataclass
class CommandOutcome:
    """What happened to a session after a command."""
    session: GameSession
    result: ActionResult

    @property
    def success(self) -> bool:
        return self.result.success


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a fresh run
    - Apply player commands through the reducer
    - Persist successful transitions

    No persistence beyond the injected store.
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        content: GameContent | None = None,
        rng: random.Random | None = None,
    ):
        self.store = store if store is not None else InMemorySessionStore()
        self.content = content or create_default_content()
        self.rng = rng or random.Random()
        self.reducer = Reducer(content=self.content, rng=self.rng)

    def new_game(self) -> GameSession:
        """Create a new session holding a fresh run."""
        state = create_initial_state(self.content, rng=self.rng)
        session = self.store.create(state)
        logger.info(
            "Created session %s (enemy=%s, levels=%d)",
            session.session_id,
            state.enemy.name,
            state.max_level,
        )
        return session

    def get_session(self, session_id: str) -> GameSession:
        """Get a session by ID."""
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def apply(self, session_id: str, action: Action) -> CommandOutcome:
        """
        Apply a command to a stored session.

        Raises SessionNotFoundError for unknown IDs. Rejections come back
        as an unsuccessful outcome carrying the unchanged session.
        """
        with self.store.lock(session_id):
            session = self.get_session(session_id)
            result = self.reducer.apply(session.game_state, action)
            if not result.success:
                return CommandOutcome(session=session, result=result)

            updated = self.store.put(session_id, result.new_state)
            logger.debug(
                "Session %s: %s -> phase=%s turn=%d",
                session_id,
                action.action_type.value,
                result.new_state.phase.value,
                result.new_state.turn,
            )
            return CommandOutcome(session=updated, result=result)

    def list_sessions(self) -> list[str]:
        """List IDs of stored sessions."""
        return self.store.list_ids()
