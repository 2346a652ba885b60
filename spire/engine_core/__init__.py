"""
Engine Core - Combat state and turn resolution.

The engine is the runtime that:
1. Holds the GameState of a run
2. Validates player commands
3. Resolves cards, status decay and enemy intents via the reducer
4. Cycles deck, hand and discard between turns
5. Moves the run from level to level
"""

from .state import (
    GameState,
    GamePhase,
    Card,
    CardType,
    StatusEffect,
    Player,
    Enemy,
    EnemyAction,
    EnemyActionKind,
    EnemyType,
)
from .effects import ApplyStatus, DrawCards, UnknownEffect, EffectTarget, parse_effect
from .action import Action, ActionType, ActionPayload, ActionResult, RejectionCode
from .reducer import Reducer, apply_action
from .enemy_ai import choose_action, commit_next_action

__all__ = [
    "GameState",
    "GamePhase",
    "Card",
    "CardType",
    "StatusEffect",
    "Player",
    "Enemy",
    "EnemyAction",
    "EnemyActionKind",
    "EnemyType",
    "ApplyStatus",
    "DrawCards",
    "UnknownEffect",
    "EffectTarget",
    "parse_effect",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RejectionCode",
    "Reducer",
    "apply_action",
    "choose_action",
    "commit_next_action",
]
