"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Runs them through the SessionManager
3. Converts engine state into response schemas
4. Turns rejections into structured ErrorResponses

This layer is framework-agnostic (can be used with FastAPI, a CLI, tests).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    PlayCardRequest,
    EndTurnRequest,
    SelectCardRequest,
    NextLevelRequest,
    # Responses
    SessionResponse,
    ErrorResponse,
    # Shared
    GameStateInfo,
    PlayerInfo,
    EnemyInfo,
    CardInfo,
    StatusEffectInfo,
    # Enums
    ErrorCode,
)
from ..engine_core.action import Action, RejectionCode
from ..engine_core.state import Card, GameState, StatusEffect
from ..session import SessionManager, SessionNotFoundError, GameSession


logger = logging.getLogger(__name__)


REJECTION_ERROR_CODES: dict[RejectionCode, ErrorCode] = {
    RejectionCode.WRONG_PHASE: ErrorCode.WRONG_PHASE,
    RejectionCode.CARD_NOT_IN_HAND: ErrorCode.CARD_NOT_IN_HAND,
    RejectionCode.INSUFFICIENT_ENERGY: ErrorCode.INSUFFICIENT_ENERGY,
    RejectionCode.NO_REWARDS_AVAILABLE: ErrorCode.NO_REWARDS_AVAILABLE,
    RejectionCode.CARD_NOT_AVAILABLE: ErrorCode.CARD_NOT_AVAILABLE,
    RejectionCode.NO_HANDLER: ErrorCode.INTERNAL_ERROR,
    RejectionCode.HANDLER_ERROR: ErrorCode.INTERNAL_ERROR,
}


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.new_game()
        response = service.play_card(PlayCardRequest(game_id=session.id, card_id="strike"))
        if isinstance(response, ErrorResponse):
            ...
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def new_game(self) -> SessionResponse:
        """Create a new game session."""
        session = self.session_manager.new_game()
        return self._session_to_response(session)

    def get_game(self, game_id: str) -> SessionResponse | ErrorResponse:
        """Get a game session."""
        try:
            session = self.session_manager.get_session(game_id)
        except SessionNotFoundError as e:
            return self._not_found(e)
        return self._session_to_response(session)

    def play_card(self, request: PlayCardRequest) -> SessionResponse | ErrorResponse:
        return self._run(request.game_id, Action.play_card(request.card_id))

    def end_turn(self, request: EndTurnRequest) -> SessionResponse | ErrorResponse:
        return self._run(request.game_id, Action.end_turn())

    def select_card(self, request: SelectCardRequest) -> SessionResponse | ErrorResponse:
        return self._run(request.game_id, Action.select_card(request.card_id))

    def advance_level(self, request: NextLevelRequest) -> SessionResponse | ErrorResponse:
        return self._run(request.game_id, Action.advance_level())

    def active_game_count(self) -> int:
        return len(self.session_manager.list_sessions())

    # =========================================================================
    # Helpers
    # =========================================================================

    def _run(self, game_id: str, action: Action) -> SessionResponse | ErrorResponse:
        """Apply an action and convert the outcome."""
        try:
            outcome = self.session_manager.apply(game_id, action)
        except SessionNotFoundError as e:
            return self._not_found(e)

        if not outcome.success:
            result = outcome.result
            return ErrorResponse(
                error=result.error or "Command rejected",
                error_code=REJECTION_ERROR_CODES.get(result.error_code, ErrorCode.INTERNAL_ERROR),
                details={
                    "action": action.action_type.value,
                    "phase": outcome.session.game_state.phase.value,
                },
            )

        return self._session_to_response(outcome.session)

    def _not_found(self, error: SessionNotFoundError) -> ErrorResponse:
        logger.info("Unknown game id %s", error.session_id)
        return ErrorResponse(
            error="Game not found",
            error_code=ErrorCode.GAME_NOT_FOUND,
            details={"game_id": error.session_id},
        )

    def _session_to_response(self, session: GameSession) -> SessionResponse:
        return SessionResponse(
            id=session.session_id,
            game_state=self._convert_state(session.game_state),
        )

    def _convert_state(self, state: GameState) -> GameStateInfo:
        """Convert engine state to the API schema."""
        player = state.player
        enemy = state.enemy
        enemy_type = self.session_manager.content.get_enemy_type(enemy.type_id)

        return GameStateInfo(
            id=state.game_id,
            player=PlayerInfo(
                health=player.health,
                max_health=player.max_health,
                energy=player.energy,
                max_energy=player.max_energy,
                armor=player.armor,
                status_effects=[_convert_status(s) for s in player.status_effects],
            ),
            enemy=EnemyInfo(
                type_id=enemy.type_id,
                name=enemy.name,
                health=enemy.health,
                max_health=enemy.max_health,
                armor=enemy.armor,
                next_action=enemy.next_action.value,
                next_action_description=enemy.next_action_description,
                status_effects=[_convert_status(s) for s in enemy.status_effects],
                ascii_art=enemy_type.ascii_art if enemy_type else "",
            ),
            hand=[_convert_card(c) for c in state.hand],
            deck=[_convert_card(c) for c in state.deck],
            discard_pile=[_convert_card(c) for c in state.discard_pile],
            phase=state.phase.value,
            turn=state.turn,
            logs=list(state.log),
            available_cards=(
                [_convert_card(c) for c in state.available_cards]
                if state.available_cards is not None else None
            ),
            current_level=state.current_level,
            max_level=state.max_level,
            level_complete=state.level_complete,
        )


def _convert_card(card: Card) -> CardInfo:
    return CardInfo(
        id=card.card_id,
        name=card.name,
        type=card.card_type.value,
        cost=card.cost,
        description=card.description,
        damage=card.damage,
        armor=card.armor,
        effects=card.effect_tags or None,
    )


def _convert_status(status: StatusEffect) -> StatusEffectInfo:
    return StatusEffectInfo(name=status.name, value=status.value, duration=status.duration)
