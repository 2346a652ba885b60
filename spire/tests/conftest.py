"""
Pytest fixtures for Spire tests.
"""

import random

import pytest

from ..content import GameContent, create_default_content, create_initial_state
from ..content.cards import STRIKE, DEFEND, FLEX, BASH, SHRUG_IT_OFF
from ..content.enemies import CULTIST
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, GamePhase, Player


@pytest.fixture
def content() -> GameContent:
    """Standard three-level content."""
    return create_default_content()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible runs."""
    return random.Random(1234)


@pytest.fixture
def reducer(content: GameContent, rng: random.Random) -> Reducer:
    return Reducer(content=content, rng=rng)


@pytest.fixture
def fresh_state(content: GameContent, rng: random.Random) -> GameState:
    """A brand new run."""
    return create_initial_state(content, rng=rng, game_id="test_game")


def make_state(
    hand=None,
    deck=None,
    discard=None,
    enemy_health=None,
    enemy_armor=0,
    energy=3,
    phase=GamePhase.COMBAT,
    current_level=1,
    max_level=3,
) -> GameState:
    """Build a combat state with exactly the given zones."""
    enemy = CULTIST.spawn()
    if enemy_health is not None:
        enemy.health = enemy_health
    enemy.armor = enemy_armor
    return GameState(
        game_id="test_game",
        player=Player(health=80, max_health=80, energy=energy, max_energy=3),
        enemy=enemy,
        hand=list(hand if hand is not None else [STRIKE, STRIKE, DEFEND, FLEX, BASH]),
        deck=list(deck if deck is not None else [STRIKE, DEFEND, STRIKE, DEFEND, STRIKE, SHRUG_IT_OFF]),
        discard_pile=list(discard or []),
        phase=phase,
        turn=1,
        log=["Combat begins! Defeat the Cultist to proceed."],
        current_level=current_level,
        max_level=max_level,
    )


@pytest.fixture
def combat_state() -> GameState:
    """A level 1 combat state with a known hand and deck."""
    return make_state()
