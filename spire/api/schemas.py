"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the client and the engine.
The wire format is camelCase JSON; requests also accept snake_case.

Error Codes:
- WRONG_PHASE: Command not allowed in the current phase
- CARD_NOT_IN_HAND: Played card is not in the hand
- INSUFFICIENT_ENERGY: Card costs more energy than the player has
- NO_REWARDS_AVAILABLE: No reward cards are on offer
- CARD_NOT_AVAILABLE: Selected card is not among the offered rewards
- GAME_NOT_FOUND: Game does not exist
- VALIDATION_ERROR: Malformed request body
- INTERNAL_ERROR: Unexpected engine failure
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    WRONG_PHASE = "WRONG_PHASE"
    CARD_NOT_IN_HAND = "CARD_NOT_IN_HAND"
    INSUFFICIENT_ENERGY = "INSUFFICIENT_ENERGY"
    NO_REWARDS_AVAILABLE = "NO_REWARDS_AVAILABLE"
    CARD_NOT_AVAILABLE = "CARD_NOT_AVAILABLE"
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GamePhase(str, Enum):
    COMBAT = "COMBAT"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    LEVEL_COMPLETE = "LEVEL_COMPLETE"
    CARD_SELECTION = "CARD_SELECTION"


class CardType(str, Enum):
    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"
    SKILL = "SKILL"


class EnemyAction(str, Enum):
    ATTACK = "ATTACK"
    DEFEND = "DEFEND"
    CHARGE = "CHARGE"
    SPECIAL = "SPECIAL"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """A card as shown to the client."""
    id: str
    name: str
    type: CardType
    cost: int = Field(ge=0)
    description: str = ""
    damage: Optional[int] = None
    armor: Optional[int] = None
    effects: Optional[list[str]] = Field(default=None, description="Effect tags, e.g. strength_2")

    model_config = CAMEL_CONFIG


class StatusEffectInfo(BaseModel):
    name: str
    value: int
    duration: Optional[int] = Field(default=None, description="Turns left; absent means permanent")

    model_config = CAMEL_CONFIG


class PlayerInfo(BaseModel):
    health: int = Field(ge=0)
    max_health: int
    energy: int
    max_energy: int
    armor: int = Field(ge=0)
    status_effects: list[StatusEffectInfo] = Field(default_factory=list)

    model_config = CAMEL_CONFIG


class EnemyInfo(BaseModel):
    type_id: str
    name: str
    health: int = Field(ge=0)
    max_health: int
    armor: int = Field(ge=0)
    next_action: EnemyAction
    next_action_description: str
    status_effects: list[StatusEffectInfo] = Field(default_factory=list)
    ascii_art: str = ""

    model_config = CAMEL_CONFIG


class GameStateInfo(BaseModel):
    """Full game state sent after every command."""
    id: str
    player: PlayerInfo
    enemy: EnemyInfo
    hand: list[CardInfo]
    deck: list[CardInfo]
    discard_pile: list[CardInfo]
    phase: GamePhase
    turn: int
    logs: list[str]
    available_cards: Optional[list[CardInfo]] = None
    current_level: int = 1
    max_level: int = 3
    level_complete: bool = False

    model_config = CAMEL_CONFIG


# =============================================================================
# Request Models
# =============================================================================

class PlayCardRequest(BaseModel):
    """Play a card from hand."""
    game_id: str = Field(min_length=1)
    card_id: str = Field(min_length=1)

    model_config = CAMEL_CONFIG


class EndTurnRequest(BaseModel):
    """End the player's turn."""
    game_id: str = Field(min_length=1)

    model_config = CAMEL_CONFIG


class SelectCardRequest(BaseModel):
    """Pick one of the offered reward cards."""
    game_id: str = Field(min_length=1)
    card_id: str = Field(min_length=1)

    model_config = CAMEL_CONFIG


class NextLevelRequest(BaseModel):
    """Advance to the next level after a completed encounter."""
    game_id: str = Field(min_length=1)

    model_config = CAMEL_CONFIG


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """A game session: its ID and current state."""
    id: str
    game_state: GameStateInfo
    api_version: str = "v1"

    model_config = CAMEL_CONFIG


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
    api_version: str = "v1"

    model_config = CAMEL_CONFIG


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    environment: str
    active_games: int = 0

    model_config = CAMEL_CONFIG
