"""Games API routes."""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from crazyeights.cards import DECK_SIZE, Suit, card_from_index
from crazyeights.engine import choose_suit, draw, initialize, play, resolve_computer_turn
from crazyeights.errors import SetupError
from crazyeights.serialization import state_to_dict
from crazyeights.state import GameState
from crazyeights.web.dependencies import get_store
from crazyeights.web.store import (
    GameNotFoundError,
    GameStore,
    MoveNotAllowedError,
    StoredGame,
    VersionConflictError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# Request/Response models


class GameResponse(BaseModel):
    """Current view of a game."""

    game_id: str
    version: int
    state: dict[str, Any]


class VersionedRequest(BaseModel):
    """Base for requests that change a game."""

    version: int  # Optimistic locking - must match current version


class PlayRequest(VersionedRequest):
    """Request to play a card from the player's hand."""

    card: int = Field(ge=0, lt=DECK_SIZE)


class SuitRequest(VersionedRequest):
    """Request to name the suit after playing an 8."""

    suit: Suit


def _to_response(game: StoredGame, reveal_ai_hand: bool = False) -> GameResponse:
    return GameResponse(
        game_id=game.game_id,
        version=game.version,
        state=state_to_dict(game.state, reveal_ai_hand=reveal_ai_hand),
    )


def _apply(
    store: GameStore,
    game_id: str,
    version: int,
    operation: Callable[[GameState], GameState],
) -> GameResponse:
    """Run an engine operation and map store errors to HTTP errors."""
    try:
        game = store.update(game_id, version, operation)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    except VersionConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except MoveNotAllowedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(game)


# Endpoints


@router.post("/games", response_model=GameResponse, status_code=201)
async def new_game(store: GameStore = Depends(get_store)):
    """Deal a new game with the player to move."""
    try:
        state = initialize()
    except SetupError as e:
        logger.error(f"Failed to deal game: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to start game: {e}")
    return _to_response(store.create(state))


@router.get("/games/{game_id}", response_model=GameResponse)
async def get_game(
    game_id: str,
    debug: bool = False,
    store: GameStore = Depends(get_store),
):
    """Get the current view of a game.

    With ``debug=true`` the computer's hand is included.
    """
    try:
        game = store.get(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_response(game, reveal_ai_hand=debug)


@router.delete("/games/{game_id}", status_code=204)
async def abandon_game(game_id: str, store: GameStore = Depends(get_store)):
    """Discard a game, e.g. before restarting."""
    try:
        store.delete(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return Response(status_code=204)


@router.post("/games/{game_id}/draw", response_model=GameResponse)
async def draw_card(
    game_id: str,
    request: VersionedRequest,
    store: GameStore = Depends(get_store),
):
    """Draw a card for the player."""
    return _apply(store, game_id, request.version, draw)


@router.post("/games/{game_id}/play", response_model=GameResponse)
async def play_card(
    game_id: str,
    request: PlayRequest,
    store: GameStore = Depends(get_store),
):
    """Play a card from the player's hand."""
    card = card_from_index(request.card)
    return _apply(store, game_id, request.version, lambda s: play(s, card))


@router.post("/games/{game_id}/suit", response_model=GameResponse)
async def select_suit(
    game_id: str,
    request: SuitRequest,
    store: GameStore = Depends(get_store),
):
    """Name the suit after the player's 8."""
    return _apply(store, game_id, request.version, lambda s: choose_suit(s, request.suit))


@router.post("/games/{game_id}/computer-turn", response_model=GameResponse)
async def computer_turn(
    game_id: str,
    request: VersionedRequest,
    store: GameStore = Depends(get_store),
):
    """Resolve one computer turn.

    The front-end calls this once per computer turn after its own pacing
    delay. The version check rejects a duplicate call for the same turn.
    """
    return _apply(store, game_id, request.version, resolve_computer_turn)
