"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure with respect to its input: (state, action) -> new_state
- Validates before applying; a rejected action never touches state
- Returns ActionResult with success/failure and the new log lines
- Randomness comes from an injected random.Random
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import TYPE_CHECKING

from .state import Card, Combatant, GameState, GamePhase, EnemyActionKind, StatusEffect
from .action import Action, ActionType, ActionResult, RejectionCode
from .effects import ApplyStatus, CardEffect, DrawCards, EffectTarget, UnknownEffect
from .enemy_ai import commit_next_action

if TYPE_CHECKING:
    from ..content import GameContent


logger = logging.getLogger(__name__)

HAND_SIZE = 5
LEVEL_HEAL = 10

# Used when a committed intent has no matching row in the enemy's table
DEFAULT_ATTACK_DAMAGE = 12
DEFAULT_DEFEND_ARMOR = 8


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless apart from the RNG - all game state is in GameState.
    Content provides the enemy tables and the reward pool.
    """
    content: GameContent
    rng: random.Random = field(default_factory=random.Random)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=RejectionCode.NO_HANDLER,
            )

        rejection = self._validate_action(state, action)
        if rejection:
            logger.info("Rejected %s: %s", action.action_type.value, rejection.error)
            return rejection

        new_state = state.clone()
        changes: list[str] = []
        try:
            handler(new_state, action, changes)
        except Exception as e:
            logger.exception("Handler for %s failed", action.action_type.value)
            return ActionResult.failure(str(e), error_code=RejectionCode.HANDLER_ERROR)

        new_state.log.extend(changes)
        logger.debug("Applied %s: %s", action.action_type.value, changes)
        return ActionResult.success_with_state(new_state, changes=changes)

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLAY_CARD: self._handle_play_card,
            ActionType.END_TURN: self._handle_end_turn,
            ActionType.SELECT_CARD: self._handle_select_card,
            ActionType.ADVANCE_LEVEL: self._handle_advance_level,
        }
        return handlers.get(action_type)

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_action(self, state: GameState, action: Action) -> ActionResult | None:
        """
        Check the preconditions of an action.

        Returns a failure result if invalid, None if valid.
        """
        if action.action_type == ActionType.PLAY_CARD:
            if state.phase != GamePhase.COMBAT:
                return ActionResult.failure(
                    "Cannot play cards outside of combat", RejectionCode.WRONG_PHASE
                )
            card = state.find_in_hand(action.payload.card_id)
            if not card:
                return ActionResult.failure("Card not in hand", RejectionCode.CARD_NOT_IN_HAND)
            if state.player.energy < card.cost:
                return ActionResult.failure(
                    f"Not enough energy: {card.name} costs {card.cost}, "
                    f"{state.player.energy} available",
                    RejectionCode.INSUFFICIENT_ENERGY,
                )

        elif action.action_type == ActionType.END_TURN:
            if state.phase != GamePhase.COMBAT:
                return ActionResult.failure(
                    "Cannot end turn outside of combat", RejectionCode.WRONG_PHASE
                )

        elif action.action_type == ActionType.SELECT_CARD:
            if state.phase not in {GamePhase.VICTORY, GamePhase.LEVEL_COMPLETE}:
                return ActionResult.failure(
                    "Cannot select cards outside of a completed encounter",
                    RejectionCode.WRONG_PHASE,
                )
            if not state.available_cards:
                return ActionResult.failure(
                    "No cards available for selection", RejectionCode.NO_REWARDS_AVAILABLE
                )
            if not state.find_reward(action.payload.card_id):
                return ActionResult.failure(
                    "Selected card not available", RejectionCode.CARD_NOT_AVAILABLE
                )

        elif action.action_type == ActionType.ADVANCE_LEVEL:
            if state.phase != GamePhase.LEVEL_COMPLETE:
                return ActionResult.failure(
                    "Can only advance after completing a level", RejectionCode.WRONG_PHASE
                )

        return None

    # =========================================================================
    # Handlers - each mutates the cloned state in place
    # =========================================================================

    def _handle_play_card(self, state: GameState, action: Action, changes: list[str]):
        """Handle play card action."""
        card = state.find_in_hand(action.payload.card_id)
        state.hand.remove(card)
        state.discard_pile.append(card)
        state.player.energy -= card.cost

        changes.append(f"You played {card.name}")
        enemy = state.enemy

        if card.damage:
            dealt = enemy.take_damage(card.damage)
            changes.append(f"{enemy.name} takes {dealt} damage")

        if card.armor:
            state.player.armor += card.armor
            changes.append(f"Player gains {card.armor} armor")

        for effect in card.effects:
            self._resolve_effect(state, effect, changes)

        if not enemy.is_alive:
            self._complete_encounter(state, changes)

    def _handle_end_turn(self, state: GameState, action: Action, changes: list[str]):
        """
        Handle end turn.

        Player statuses decay, then the enemy resolves the intent it
        committed to last turn and commits to the next one. If the player
        survives, the hand is cycled for the next turn.
        """
        self._decay_statuses(state.player, "Player", changes)

        enemy = state.enemy
        if enemy.is_alive:
            self._resolve_enemy_intent(state, changes)
            self._decay_statuses(enemy, enemy.name, changes)
            enemy_type = self.content.enemy_for_level(state.current_level)
            commit_next_action(enemy, enemy_type, self.rng)

        if not state.player.is_alive:
            state.phase = GamePhase.DEFEAT
            changes.append("Defeat! The enemy has bested you.")
            return

        self._cycle_hand(state)
        state.player.energy = state.player.max_energy
        state.turn += 1
        changes.append(f"Turn {state.turn} begins!")

    def _handle_select_card(self, state: GameState, action: Action, changes: list[str]):
        """Add the chosen reward to the deck. The phase does not change."""
        card = state.find_reward(action.payload.card_id)
        state.deck.append(card)
        state.available_cards = None
        changes.append(f"Added {card.name} to your deck!")

        if state.phase == GamePhase.VICTORY:
            changes.append("Run complete! Start a new game to play again.")
        else:
            changes.append("Advance to face the next enemy.")

    def _handle_advance_level(self, state: GameState, action: Action, changes: list[str]):
        """Start the next level's encounter."""
        state.current_level += 1
        enemy_type = self.content.enemy_for_level(state.current_level)
        state.enemy = enemy_type.spawn()
        commit_next_action(state.enemy, enemy_type, self.rng)

        player = state.player
        healed = player.heal(LEVEL_HEAL)
        player.energy = player.max_energy
        player.armor = 0

        # Unclaimed rewards are forfeited
        state.available_cards = None
        self._cycle_hand(state)

        state.turn = 1
        state.phase = GamePhase.COMBAT
        state.level_complete = False

        changes.append(
            f"Level {state.current_level}: A {state.enemy.name} appears! "
            f"You recover {healed} health."
        )

    # =========================================================================
    # Rules
    # =========================================================================

    def _resolve_effect(self, state: GameState, effect: CardEffect, changes: list[str]):
        """Dispatch one card effect variant."""
        if isinstance(effect, ApplyStatus):
            self._apply_status(state, effect, changes)
        elif isinstance(effect, DrawCards):
            drawn = self._draw(state, effect.count)
            noun = "card" if drawn == 1 else "cards"
            changes.append(f"Player draws {drawn} {noun}")
        elif isinstance(effect, UnknownEffect):
            logger.debug("Ignoring unknown effect tag %r", effect.tag)
        else:
            raise TypeError(f"Unhandled effect variant: {type(effect).__name__}")

    def _apply_status(self, state: GameState, effect: ApplyStatus, changes: list[str]):
        """Stack onto an existing same-named status or add a new one."""
        if effect.target == EffectTarget.PLAYER:
            target, target_name = state.player, "Player"
        else:
            target, target_name = state.enemy, state.enemy.name

        existing = target.get_status(effect.status)
        if existing:
            existing.value += effect.magnitude
            existing.duration = effect.duration
        else:
            target.status_effects.append(
                StatusEffect(name=effect.status, value=effect.magnitude, duration=effect.duration)
            )

        line = f"{target_name} gains {effect.magnitude} {effect.status}"
        if effect.duration == 1:
            line += " (until end of turn)"
        changes.append(line)

    def _decay_statuses(self, combatant: Combatant, owner: str, changes: list[str]):
        """Tick down timed statuses at the owner's end of turn."""
        remaining = []
        for effect in combatant.status_effects:
            if effect.duration is not None:
                effect.duration -= 1
                if effect.duration <= 0:
                    changes.append(f"{owner} loses {effect.name}")
                    continue
            remaining.append(effect)
        combatant.status_effects = remaining

    def _resolve_enemy_intent(self, state: GameState, changes: list[str]):
        """Carry out the intent the enemy showed during the player's turn."""
        enemy = state.enemy
        enemy_type = self.content.enemy_for_level(state.current_level)
        row = enemy_type.find_action(enemy.next_action)

        if enemy.next_action == EnemyActionKind.ATTACK:
            damage = row.damage if row and row.damage is not None else DEFAULT_ATTACK_DAMAGE
            dealt = state.player.take_damage(damage)
            changes.append(f"{enemy.name} attacks for {dealt} damage")
        elif enemy.next_action == EnemyActionKind.DEFEND:
            armor = row.armor if row and row.armor is not None else DEFAULT_DEFEND_ARMOR
            enemy.armor += armor
            changes.append(f"{enemy.name} gains {armor} armor")
        elif enemy.next_action == EnemyActionKind.CHARGE:
            changes.append(f"{enemy.name} is charging up...")
        elif enemy.next_action == EnemyActionKind.SPECIAL:
            changes.append(f"{enemy.name} prepares something sinister...")

    def _complete_encounter(self, state: GameState, changes: list[str]):
        """Enemy is dead: offer rewards and close the level."""
        state.level_complete = True
        pool = list(self.content.reward_pool)
        self.rng.shuffle(pool)
        state.available_cards = pool[:self.content.rewards_offered]

        if state.is_final_level:
            state.phase = GamePhase.VICTORY
            changes.append("Victory! Choose a card to add to your deck.")
        else:
            state.phase = GamePhase.LEVEL_COMPLETE
            changes.append(
                f"{state.enemy.name} defeated! Level {state.current_level} complete. "
                "Choose a card to add to your deck."
            )

    def _cycle_hand(self, state: GameState):
        """Discard the hand and draw a fresh one, reshuffling if the deck runs low."""
        state.discard_pile.extend(state.hand)
        state.hand = []
        if len(state.deck) < HAND_SIZE:
            self._reshuffle_discard(state)
        self._draw(state, HAND_SIZE)

    def _reshuffle_discard(self, state: GameState):
        deck = state.deck + state.discard_pile
        self.rng.shuffle(deck)
        state.deck = deck
        state.discard_pile = []

    def _draw(self, state: GameState, count: int) -> int:
        """Move up to count cards from the top of the deck into the hand."""
        drawn = 0
        for _ in range(count):
            if not state.deck:
                if not state.discard_pile:
                    break
                self._reshuffle_discard(state)
            card: Card = state.deck.pop(0)
            state.hand.append(card)
            drawn += 1
        return drawn


def apply_action(
    content: GameContent,
    state: GameState,
    action: Action,
    rng: random.Random | None = None,
) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(content=content, rng=rng or random.Random())
    return reducer.apply(state, action)
