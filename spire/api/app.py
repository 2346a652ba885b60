"""
FastAPI Application - REST API for the game client.

Endpoints:
    POST   /api/game/new           Create a new game
    GET    /api/game/{id}          Get a game
    POST   /api/game/play-card     Play a card from hand
    POST   /api/game/end-turn      End the turn (enemy acts, new hand)
    POST   /api/game/select-card   Pick a reward card
    POST   /api/game/next-level    Advance to the next level
    GET    /api/health             Health check

Every command returns the full updated session, or an ErrorResponse with
the unchanged state left in place.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Union
import logging
import os
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..content import create_default_content
from ..session import SessionManager
from .service import APIService
from .schemas import (
    # Request models
    PlayCardRequest,
    EndTurnRequest,
    SelectCardRequest,
    NextLevelRequest,
    # Response models
    SessionResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)


logger = logging.getLogger(__name__)

# Environment configuration
SPIRE_ENV = os.getenv("SPIRE_ENV", "development")
SPIRE_MAX_LEVEL = int(os.getenv("SPIRE_MAX_LEVEL", "3"))
SPIRE_SEED = os.getenv("SPIRE_SEED")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

ERROR_STATUS_CODES = {
    ErrorCode.GAME_NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_service(max_level: int = SPIRE_MAX_LEVEL, seed: str | int | None = SPIRE_SEED) -> APIService:
    """Build an APIService from configuration values."""
    rng = random.Random(int(seed)) if seed is not None else random.Random()
    manager = SessionManager(content=create_default_content(max_level=max_level), rng=rng)
    return APIService(session_manager=manager)


def create_app(service: APIService | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates one from the
            environment if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Spire Engine API",
        description="""
Turn-based card battle - the server holds the authoritative game state.

## Flow

1. `POST /api/game/new` starts a run on level 1
2. `play-card` / `end-turn` until the enemy or the player falls
3. On `LEVEL_COMPLETE`: `select-card` (optional) then `next-level`
4. On `VICTORY`: `select-card`, the run is over

## Error Codes

| Code | Description |
|------|-------------|
| `WRONG_PHASE` | Command not allowed in the current phase |
| `CARD_NOT_IN_HAND` | Card is not in the hand |
| `INSUFFICIENT_ENERGY` | Not enough energy to play the card |
| `NO_REWARDS_AVAILABLE` | No reward cards on offer |
| `CARD_NOT_AVAILABLE` | Card is not among the offered rewards |
| `GAME_NOT_FOUND` | Game does not exist |
| `VALIDATION_ERROR` | Malformed request body |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or create_service()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Serialize an ErrorResponse with its HTTP status."""
        return JSONResponse(
            status_code=ERROR_STATUS_CODES.get(error.error_code, 400),
            content=error.model_dump(mode="json", by_alias=True),
        )

    def respond(
        response: Union[SessionResponse, ErrorResponse],
    ) -> Union[SessionResponse, JSONResponse]:
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
        return make_error_response(
            ErrorResponse(
                error="Invalid request data",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                    for err in exc.errors()
                ]},
            )
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/game/new",
        response_model=SessionResponse,
        tags=["Game"],
        summary="Create a new game",
    )
    async def new_game() -> SessionResponse:
        """Start a fresh run: full health, starting deck, level 1 enemy."""
        return api_service.new_game()

    @app.get(
        "/api/game/{game_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get a game",
    )
    async def get_game(game_id: str):
        return respond(api_service.get_game(game_id))

    @app.post(
        "/api/game/play-card",
        response_model=SessionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Wrong phase, card not in hand, or not enough energy"},
            404: {"model": ErrorResponse},
        },
        tags=["Game"],
        summary="Play a card from hand",
    )
    async def play_card(request: PlayCardRequest):
        return respond(api_service.play_card(request))

    @app.post(
        "/api/game/end-turn",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="End the turn",
    )
    async def end_turn(request: EndTurnRequest):
        """
        End the player's turn.

        The enemy carries out the intent it showed, picks its next one,
        and a new hand is drawn.
        """
        return respond(api_service.end_turn(request))

    @app.post(
        "/api/game/select-card",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Pick a reward card",
    )
    async def select_card(request: SelectCardRequest):
        return respond(api_service.select_card(request))

    @app.post(
        "/api/game/next-level",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Advance to the next level",
    )
    async def next_level(request: NextLevelRequest):
        return respond(api_service.advance_level(request))

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/api/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(
            version=__version__,
            environment=SPIRE_ENV,
            active_games=api_service.active_game_count(),
        )

    @app.get("/", tags=["System"])
    async def root():
        return {
            "name": "Spire Engine API",
            "version": __version__,
            "docs": "/api/docs",
        }

    return app


# For running directly: uvicorn spire.api.app:app
app = create_app()
