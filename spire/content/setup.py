"""
Game Setup - Creates the initial state of a run.

This module handles:
- Building the player at full health and energy
- Spawning the level 1 enemy with its first intent
- Shuffling the starting deck and dealing the opening hand
"""

from __future__ import annotations
import random
import uuid
from typing import TYPE_CHECKING

from ..engine_core.enemy_ai import commit_next_action
from ..engine_core.state import GameState, GamePhase, Player

if TYPE_CHECKING:
    from . import GameContent


HAND_SIZE = 5
PLAYER_MAX_HEALTH = 80
PLAYER_MAX_ENERGY = 3


def create_initial_state(
    content: GameContent,
    rng: random.Random | None = None,
    game_id: str | None = None,
) -> GameState:
    """
    Set up a new run.

    Args:
        content: Cards and enemies to play with
        rng: Random source for shuffling and the first enemy intent
        game_id: Explicit ID (a uuid4 is generated if not provided)

    Returns:
        Initial GameState in COMBAT on turn 1 of level 1
    """
    rng = rng or random.Random()

    player = Player(
        health=PLAYER_MAX_HEALTH,
        max_health=PLAYER_MAX_HEALTH,
        energy=PLAYER_MAX_ENERGY,
        max_energy=PLAYER_MAX_ENERGY,
    )

    enemy_type = content.enemy_for_level(1)
    enemy = enemy_type.spawn()
    commit_next_action(enemy, enemy_type, rng)

    deck = list(content.starting_deck)
    rng.shuffle(deck)
    hand = deck[:HAND_SIZE]
    deck = deck[HAND_SIZE:]

    return GameState(
        game_id=game_id or str(uuid.uuid4()),
        player=player,
        enemy=enemy,
        hand=hand,
        deck=deck,
        discard_pile=[],
        phase=GamePhase.COMBAT,
        turn=1,
        log=[f"Combat begins! Defeat the {enemy.name} to proceed."],
        current_level=1,
        max_level=content.max_level,
    )
