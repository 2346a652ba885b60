"""
Content - Static cards and enemies a run is played with.

GameContent bundles everything the reducer needs to know about the
game's data:
- Starting deck
- Reward pool offered after each defeated enemy
- Enemy type for every level
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import Card, EnemyType
from .cards import STARTING_DECK, REWARD_POOL, get_card_by_id
from .enemies import LEVEL_ENEMIES
from .setup import create_initial_state


@dataclass(frozen=True)
class GameContent:
    """Cards and enemies for one ruleset. Levels are numbered from 1."""
    starting_deck: tuple[Card, ...]
    reward_pool: tuple[Card, ...]
    level_enemies: tuple[EnemyType, ...]
    max_level: int = 3
    rewards_offered: int = 3

    def __post_init__(self):
        if not self.level_enemies:
            raise ValueError("At least one enemy type is required")
        if self.max_level < 1:
            raise ValueError("max_level must be at least 1")

    def enemy_for_level(self, level: int) -> EnemyType:
        """Enemy type for a level. Levels past the table reuse the last type."""
        index = min(max(level, 1), len(self.level_enemies)) - 1
        return self.level_enemies[index]

    def get_enemy_type(self, type_id: str) -> EnemyType | None:
        for enemy_type in self.level_enemies:
            if enemy_type.type_id == type_id:
                return enemy_type
        return None


def create_default_content(max_level: int | None = None) -> GameContent:
    """The standard three-level run."""
    return GameContent(
        starting_deck=tuple(STARTING_DECK),
        reward_pool=tuple(REWARD_POOL),
        level_enemies=tuple(LEVEL_ENEMIES),
        max_level=max_level if max_level is not None else len(LEVEL_ENEMIES),
    )


__all__ = [
    "GameContent",
    "create_default_content",
    "create_initial_state",
    "get_card_by_id",
]
