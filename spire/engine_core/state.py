"""
Game State - The single aggregate the combat engine operates on.

Design principles:
- One root record (GameState) owns everything a session needs
- Card templates are immutable and shared between zones
- Combatants and zones are plain mutable dataclasses; the reducer
  clones the whole state before touching it
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum

from .effects import CardEffect


class GamePhase(Enum):
    """Top-level position of the game state machine."""
    COMBAT = "COMBAT"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    LEVEL_COMPLETE = "LEVEL_COMPLETE"
    CARD_SELECTION = "CARD_SELECTION"  # Reserved, nothing transitions here


class CardType(Enum):
    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"
    SKILL = "SKILL"


class EnemyActionKind(Enum):
    """What an enemy intends to do on its next turn."""
    ATTACK = "ATTACK"
    DEFEND = "DEFEND"
    CHARGE = "CHARGE"
    SPECIAL = "SPECIAL"


@dataclass(frozen=True)
class Card:
    """
    A card template.

    Hand, deck and discard hold references to these; two Strikes in the
    deck are equal values, not distinct instances.
    """
    card_id: str
    name: str
    card_type: CardType
    cost: int
    description: str = ""
    damage: int | None = None
    armor: int | None = None
    effects: tuple[CardEffect, ...] = ()

    @property
    def effect_tags(self) -> list[str]:
        return [effect.tag for effect in self.effects]


@dataclass
class StatusEffect:
    """
    A named modifier on a combatant.

    duration None means permanent; otherwise it is decremented at the
    owner's end of turn and the effect is removed once it reaches 0.
    """
    name: str
    value: int
    duration: int | None = None


@dataclass
class Combatant:
    """Shared health/armor/status bookkeeping for player and enemy."""
    health: int
    max_health: int
    armor: int = 0
    status_effects: list[StatusEffect] = field(default_factory=list)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def get_status(self, name: str) -> StatusEffect | None:
        for effect in self.status_effects:
            if effect.name == name:
                return effect
        return None

    def take_damage(self, damage: int) -> int:
        """
        Apply raw damage through armor.

        Health loses whatever armor does not absorb. Armor itself is then
        reduced by the full raw damage, not by the absorbed amount.
        Returns the post-armor damage.
        """
        dealt = max(0, damage - self.armor)
        self.health = max(0, self.health - dealt)
        self.armor = max(0, self.armor - damage)
        return dealt

    def heal(self, amount: int) -> int:
        """Heal up to max_health. Returns the amount restored."""
        before = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - before


@dataclass
class Player(Combatant):
    energy: int = 3
    max_energy: int = 3


@dataclass
class Enemy(Combatant):
    type_id: str = ""
    name: str = ""
    next_action: EnemyActionKind = EnemyActionKind.ATTACK
    next_action_description: str = ""


@dataclass(frozen=True)
class EnemyAction:
    """One row of an enemy type's weighted action table."""
    kind: EnemyActionKind
    description: str
    weight: int
    damage: int | None = None
    armor: int | None = None


@dataclass(frozen=True)
class EnemyType:
    """Static enemy template. Enemy instances are spawned from it per level."""
    type_id: str
    name: str
    max_health: int
    actions: tuple[EnemyAction, ...]
    ascii_art: str = ""

    @property
    def total_weight(self) -> int:
        return sum(action.weight for action in self.actions if action.weight > 0)

    def find_action(self, kind: EnemyActionKind) -> EnemyAction | None:
        """First action of the given kind, if any."""
        for action in self.actions:
            if action.kind == kind:
                return action
        return None

    def spawn(self) -> Enemy:
        """Create a fresh enemy at full health with no statuses."""
        return Enemy(
            health=self.max_health,
            max_health=self.max_health,
            type_id=self.type_id,
            name=self.name,
        )


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    game_id: str
    player: Player
    enemy: Enemy

    # Card zones; index 0 of the deck is the top
    hand: list[Card] = field(default_factory=list)
    deck: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)

    phase: GamePhase = GamePhase.COMBAT
    turn: int = 1
    log: list[str] = field(default_factory=list)

    # Reward choices offered after an enemy is defeated
    available_cards: list[Card] | None = None

    current_level: int = 1
    max_level: int = 3
    level_complete: bool = False

    @property
    def is_final_level(self) -> bool:
        return self.current_level >= self.max_level

    @property
    def total_cards(self) -> int:
        """Cards owned by the player across hand, deck and discard."""
        return len(self.hand) + len(self.deck) + len(self.discard_pile)

    def find_in_hand(self, card_id: str) -> Card | None:
        for card in self.hand:
            if card.card_id == card_id:
                return card
        return None

    def find_reward(self, card_id: str) -> Card | None:
        for card in self.available_cards or []:
            if card.card_id == card_id:
                return card
        return None

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
