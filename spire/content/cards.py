"""
Card definitions.

Starter cards, the starting deck list, and the reward pool offered after
each defeated enemy.
"""

from ..engine_core.effects import parse_effects
from ..engine_core.state import Card, CardType


# ============================================================================
# Starter cards
# ============================================================================

STRIKE = Card(
    card_id="strike",
    name="Strike",
    card_type=CardType.ATTACK,
    cost=1,
    description="Deal 6 damage.",
    damage=6,
)

DEFEND = Card(
    card_id="defend",
    name="Defend",
    card_type=CardType.DEFENSE,
    cost=1,
    description="Gain 5 Armor.",
    armor=5,
)

HEAVY_BLOW = Card(
    card_id="heavy_blow",
    name="Heavy Blow",
    card_type=CardType.ATTACK,
    cost=2,
    description="Deal 14 damage.",
    damage=14,
)

IRON_WAVE = Card(
    card_id="iron_wave",
    name="Iron Wave",
    card_type=CardType.DEFENSE,
    cost=2,
    description="Gain 5 Armor. Deal 5 damage.",
    damage=5,
    armor=5,
)

FLEX = Card(
    card_id="flex",
    name="Flex",
    card_type=CardType.SKILL,
    cost=0,
    description="Gain 2 Strength. At end of turn, lose 2 Strength.",
    effects=parse_effects("strength_2"),
)

BASH = Card(
    card_id="bash",
    name="Bash",
    card_type=CardType.ATTACK,
    cost=2,
    description="Deal 8 damage. Apply 2 Vulnerable.",
    damage=8,
    effects=parse_effects("vulnerable_2"),
)


# ============================================================================
# Reward-only cards
# ============================================================================

CLEAVE = Card(
    card_id="cleave",
    name="Cleave",
    card_type=CardType.ATTACK,
    cost=1,
    description="Deal 8 damage to ALL enemies.",
    damage=8,
)

SHRUG_IT_OFF = Card(
    card_id="shrug_it_off",
    name="Shrug It Off",
    card_type=CardType.SKILL,
    cost=1,
    description="Gain 8 Armor. Draw 1 card.",
    armor=8,
    effects=parse_effects("draw_1"),
)

INFLAME = Card(
    card_id="inflame",
    name="Inflame",
    card_type=CardType.SKILL,
    cost=1,
    description="Gain 2 Strength.",
    effects=parse_effects("strength_permanent_2"),
)


STARTER_CARDS: list[Card] = [STRIKE, DEFEND, HEAVY_BLOW, IRON_WAVE, FLEX, BASH]

STARTING_DECK: list[Card] = [STRIKE] * 5 + [DEFEND] * 4 + [FLEX]

REWARD_POOL: list[Card] = [CLEAVE, SHRUG_IT_OFF, INFLAME, HEAVY_BLOW, IRON_WAVE, BASH]


def get_card_by_id(card_id: str) -> Card | None:
    """Look up any known card template by ID."""
    for card in STARTER_CARDS + REWARD_POOL:
        if card.card_id == card_id:
            return card
    return None
