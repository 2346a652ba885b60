"""
Enemy AI - Weighted random intent selection.

Each enemy type carries a table of (action, weight) rows. The enemy picks
its *next* action at the end of its turn; the player sees that intent for
a full turn before it resolves.
"""

from __future__ import annotations
import random

from .state import Enemy, EnemyAction, EnemyType


def choose_action(enemy_type: EnemyType, rng: random.Random) -> EnemyAction:
    """
    Sample one action from the weighted table.

    Draws r uniformly from [0, total_weight) and walks the table until the
    running sum of weights exceeds r. Rows with weight 0 can never be
    returned.
    """
    total = enemy_type.total_weight
    if total <= 0:
        raise ValueError(f"Enemy type {enemy_type.type_id} has no selectable actions")

    roll = rng.random() * total
    cumulative = 0
    for action in enemy_type.actions:
        if action.weight <= 0:
            continue
        cumulative += action.weight
        if roll < cumulative:
            return action

    # Only reachable through float rounding at the very top of the range
    return [action for action in enemy_type.actions if action.weight > 0][-1]


def commit_next_action(enemy: Enemy, enemy_type: EnemyType, rng: random.Random) -> EnemyAction:
    """Choose the enemy's next intent and store it on the enemy."""
    action = choose_action(enemy_type, rng)
    enemy.next_action = action.kind
    enemy.next_action_description = action.description
    return action
