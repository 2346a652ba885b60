"""
Tests for engine building blocks.

Tests:
- Weighted enemy intent selection
- Effect tag parsing
- Initial state setup
- Content lookups
"""

import random
from collections import Counter

import pytest

from ..content import GameContent, create_default_content, create_initial_state, get_card_by_id
from ..content.cards import STARTING_DECK, REWARD_POOL
from ..engine_core.effects import (
    ApplyStatus, DrawCards, UnknownEffect, EffectTarget, parse_effect,
)
from ..engine_core.enemy_ai import choose_action, commit_next_action
from ..engine_core.state import (
    EnemyAction, EnemyActionKind, EnemyType, GamePhase, Player,
)


def _enemy_type(*weights) -> EnemyType:
    kinds = list(EnemyActionKind)
    return EnemyType(
        type_id="dummy",
        name="Dummy",
        max_health=10,
        actions=tuple(
            EnemyAction(kind=kinds[i % len(kinds)], description=f"action {i}", weight=w)
            for i, w in enumerate(weights)
        ),
    )


class FixedRng(random.Random):
    """Returns a fixed value from random()."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class TestWeightedSelection:
    """Tests for choose_action."""

    def test_zero_weight_never_chosen(self):
        enemy_type = _enemy_type(0, 5, 0, 5)
        rng = random.Random(7)

        chosen = {choose_action(enemy_type, rng).description for _ in range(500)}

        assert chosen == {"action 1", "action 3"}

    @pytest.mark.parametrize(
        "roll,expected",
        [
            (0.0, "action 0"),
            (0.49, "action 0"),
            (0.5, "action 1"),
            (0.74, "action 1"),
            (0.75, "action 2"),
            (0.999, "action 2"),
        ],
    )
    def test_cumulative_boundaries(self, roll, expected):
        """The roll lands in the first row whose running weight exceeds it."""
        enemy_type = _enemy_type(50, 25, 25)

        assert choose_action(enemy_type, FixedRng(roll)).description == expected

    def test_distribution_follows_weights(self):
        enemy_type = _enemy_type(75, 25)
        rng = random.Random(99)

        counts = Counter(choose_action(enemy_type, rng).description for _ in range(4000))

        share = counts["action 0"] / 4000
        assert 0.70 < share < 0.80

    def test_no_positive_weight_is_an_error(self):
        with pytest.raises(ValueError):
            choose_action(_enemy_type(0, 0), random.Random())

    def test_total_weight_ignores_non_positive(self):
        assert _enemy_type(3, 0, -2, 4).total_weight == 7

    def test_commit_updates_enemy(self):
        enemy_type = _enemy_type(0, 1)
        enemy = enemy_type.spawn()

        action = commit_next_action(enemy, enemy_type, random.Random())

        assert enemy.next_action == action.kind == EnemyActionKind.DEFEND
        assert enemy.next_action_description == "action 1"


class TestEffects:
    """Tests for effect tag parsing."""

    def test_strength_tag(self):
        effect = parse_effect("strength_2")
        assert isinstance(effect, ApplyStatus)
        assert (effect.status, effect.magnitude, effect.duration) == ("Strength", 2, 1)
        assert effect.target == EffectTarget.PLAYER

    def test_vulnerable_tag_targets_enemy(self):
        effect = parse_effect("vulnerable_2")
        assert effect.target == EffectTarget.ENEMY
        assert effect.duration == 3

    def test_permanent_strength_has_no_duration(self):
        assert parse_effect("strength_permanent_2").duration is None

    def test_draw_tag(self):
        assert parse_effect("draw_1") == DrawCards(tag="draw_1", count=1)

    def test_unknown_tag(self):
        assert parse_effect("summon_dragon") == UnknownEffect(tag="summon_dragon")

    def test_card_effect_tags_round_trip(self):
        assert get_card_by_id("bash").effect_tags == ["vulnerable_2"]
        assert get_card_by_id("strike").effect_tags == []


class TestSetup:
    """Tests for initial state creation."""

    def test_fresh_game(self, fresh_state):
        state = fresh_state
        assert state.player == Player(health=80, max_health=80, energy=3, max_energy=3)
        assert state.enemy.name == "Cultist"
        assert (state.enemy.health, state.enemy.max_health) == (48, 48)
        assert len(state.hand) == 5
        assert len(state.deck) == 5
        assert state.discard_pile == []
        assert state.phase == GamePhase.COMBAT
        assert state.turn == 1
        assert (state.current_level, state.max_level) == (1, 3)
        assert state.log == ["Combat begins! Defeat the Cultist to proceed."]

    def test_starting_deck_composition(self, fresh_state):
        counts = Counter(card.card_id for card in fresh_state.hand + fresh_state.deck)
        assert counts == {"strike": 5, "defend": 4, "flex": 1}

    def test_first_intent_comes_from_table(self, fresh_state, content):
        descriptions = [a.description for a in content.enemy_for_level(1).actions]
        assert fresh_state.enemy.next_action_description in descriptions

    def test_same_seed_same_game(self, content):
        a = create_initial_state(content, rng=random.Random(5), game_id="g")
        b = create_initial_state(content, rng=random.Random(5), game_id="g")
        assert a == b

    def test_generated_ids_are_unique(self, content):
        a = create_initial_state(content)
        b = create_initial_state(content)
        assert a.game_id != b.game_id


class TestContent:
    """Tests for content tables."""

    def test_levels_map_to_enemies(self, content):
        assert [content.enemy_for_level(n).type_id for n in (1, 2, 3)] == [
            "cultist", "spider", "elite_guard",
        ]

    def test_levels_past_table_reuse_last(self, content):
        assert content.enemy_for_level(9).type_id == "elite_guard"

    def test_each_kind_once_per_table(self, content):
        for enemy_type in content.level_enemies:
            kinds = [action.kind for action in enemy_type.actions]
            assert len(kinds) == len(set(kinds))
            assert enemy_type.ascii_art

    def test_reward_pool_has_enough_cards(self):
        assert len(REWARD_POOL) >= 3
        assert len(STARTING_DECK) == 10

    def test_max_level_override(self):
        assert create_default_content(max_level=1).max_level == 1
        assert create_default_content().max_level == 3

    def test_zero_max_level_rejected(self):
        with pytest.raises(ValueError):
            create_default_content(max_level=0)

    def test_invalid_content_rejected(self):
        with pytest.raises(ValueError):
            GameContent(starting_deck=(), reward_pool=(), level_enemies=())

    def test_unknown_card(self):
        assert get_card_by_id("nope") is None
