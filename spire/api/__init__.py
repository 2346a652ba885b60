"""
API Module - Client interface.

Exposes the engine via a JSON REST API. The client:
1. Starts a new game
2. Sends play-card / end-turn commands
3. Picks reward cards and advances levels
4. Renders the full state returned after every command

All state is session-scoped. No accounts, no persistence.
"""

from .schemas import (
    # Requests
    PlayCardRequest,
    EndTurnRequest,
    SelectCardRequest,
    NextLevelRequest,
    # Responses
    SessionResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    GameStateInfo,
    PlayerInfo,
    EnemyInfo,
    CardInfo,
    StatusEffectInfo,
    ErrorCode,
)
from .service import APIService

__all__ = [
    # Requests
    "PlayCardRequest",
    "EndTurnRequest",
    "SelectCardRequest",
    "NextLevelRequest",
    # Responses
    "SessionResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "GameStateInfo",
    "PlayerInfo",
    "EnemyInfo",
    "CardInfo",
    "StatusEffectInfo",
    "ErrorCode",
    # Service
    "APIService",
]
