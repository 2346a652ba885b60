"""
Action System - Actions, payloads, and results.

Actions represent the four player commands of a run:
1. Play a card from hand
2. End the turn (enemy acts, next hand is drawn)
3. Pick a reward card after a win
4. Advance to the next level

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    PLAY_CARD = "play_card"
    END_TURN = "end_turn"
    SELECT_CARD = "select_card"
    ADVANCE_LEVEL = "advance_level"


class RejectionCode(str, Enum):
    """Why the reducer refused an action. The state is untouched in every case."""
    WRONG_PHASE = "wrong_phase"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    INSUFFICIENT_ENERGY = "insufficient_energy"
    NO_REWARDS_AVAILABLE = "no_rewards_available"
    CARD_NOT_AVAILABLE = "card_not_available"
    NO_HANDLER = "no_handler"
    HANDLER_ERROR = "handler_error"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Only PLAY_CARD and SELECT_CARD carry a card id.
    """
    card_id: str | None = None


@dataclass
class Action:
    """A complete command to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def play_card(cls, card_id: str) -> Action:
        """Factory for play card action."""
        return cls(
            action_type=ActionType.PLAY_CARD,
            payload=ActionPayload(card_id=card_id),
        )

    @classmethod
    def end_turn(cls) -> Action:
        """Factory for end turn action."""
        return cls(action_type=ActionType.END_TURN)

    @classmethod
    def select_card(cls, card_id: str) -> Action:
        """Factory for reward selection."""
        return cls(
            action_type=ActionType.SELECT_CARD,
            payload=ActionPayload(card_id=card_id),
        )

    @classmethod
    def advance_level(cls) -> Action:
        """Factory for advancing to the next level."""
        return cls(action_type=ActionType.ADVANCE_LEVEL)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and its code (if rejected)
    - Log lines the action appended
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: RejectionCode | None = None

    # Human-readable lines appended to the game log
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: RejectionCode | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
