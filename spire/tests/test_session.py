"""
Tests for session storage and the session manager.
"""

import random
import threading

import pytest

from ..engine_core.action import Action, RejectionCode
from ..engine_core.state import GamePhase
from ..session import (
    InMemorySessionStore,
    SessionManager,
    SessionNotFoundError,
)
from .conftest import make_state


class TestInMemorySessionStore:
    """Tests for the dict-backed store."""

    def test_create_assigns_unique_ids(self):
        store = InMemorySessionStore()
        a = store.create(make_state())
        b = store.create(make_state())

        assert a.session_id != b.session_id
        assert len(store) == 2

    def test_get_returns_stored_state(self):
        store = InMemorySessionStore()
        state = make_state()
        session = store.create(state)

        assert store.get(session.session_id).game_state is state

    def test_get_unknown_returns_none(self):
        assert InMemorySessionStore().get("missing") is None

    def test_put_replaces_state(self):
        store = InMemorySessionStore()
        session = store.create(make_state())
        new_state = make_state(enemy_health=10)

        updated = store.put(session.session_id, new_state)

        assert updated.game_state is new_state
        assert updated.created_at == session.created_at
        assert updated.updated_at >= session.updated_at
        assert store.get(session.session_id).game_state.enemy.health == 10

    def test_put_unknown_raises(self):
        with pytest.raises(KeyError):
            InMemorySessionStore().put("missing", make_state())

    def test_lock_is_exclusive(self):
        """A second holder waits until the first releases."""
        store = InMemorySessionStore()
        session = store.create(make_state())
        acquired = threading.Event()

        def try_lock():
            with store.lock(session.session_id):
                acquired.set()

        with store.lock(session.session_id):
            worker = threading.Thread(target=try_lock)
            worker.start()
            assert not acquired.wait(timeout=0.1)

        worker.join(timeout=1)
        assert acquired.is_set()

    def test_lock_unknown_id_does_not_block(self):
        store = InMemorySessionStore()
        with store.lock("missing"):
            pass
        assert store.list_ids() == []


class TestSessionManager:
    """Tests for SessionManager."""

    @pytest.fixture
    def manager(self):
        return SessionManager(rng=random.Random(42))

    def test_new_game_is_stored(self, manager):
        session = manager.new_game()

        assert manager.get_session(session.session_id) is session
        assert session.game_state.phase == GamePhase.COMBAT
        assert manager.list_sessions() == [session.session_id]

    def test_uses_injected_empty_store(self):
        store = InMemorySessionStore()
        manager = SessionManager(store=store)

        session = manager.new_game()

        assert manager.store is store
        assert store.get(session.session_id) is session

    def test_unknown_session_raises(self, manager):
        with pytest.raises(SessionNotFoundError) as exc_info:
            manager.get_session("missing")
        assert "missing" in str(exc_info.value)

    def test_apply_unknown_session_raises(self, manager):
        with pytest.raises(SessionNotFoundError):
            manager.apply("missing", Action.end_turn())

    def test_successful_command_is_persisted(self, manager):
        session = manager.new_game()
        card_id = session.game_state.hand[0].card_id

        outcome = manager.apply(session.session_id, Action.play_card(card_id))

        assert outcome.success
        stored = manager.get_session(session.session_id)
        assert stored.game_state is outcome.result.new_state
        assert len(stored.game_state.hand) == 4

    def test_rejected_command_leaves_session(self, manager):
        session = manager.new_game()
        before = session.game_state

        outcome = manager.apply(session.session_id, Action.advance_level())

        assert not outcome.success
        assert outcome.result.error_code == RejectionCode.WRONG_PHASE
        assert manager.get_session(session.session_id).game_state is before
        assert outcome.session.game_state is before

    def test_sessions_are_independent(self, manager):
        a = manager.new_game()
        b = manager.new_game()

        manager.apply(a.session_id, Action.end_turn())

        assert manager.get_session(a.session_id).game_state.turn == 2
        assert manager.get_session(b.session_id).game_state.turn == 1
