"""
Game API endpoints.

HTTP face of the mock Game API.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from cardsmith.api.deps import envelope_response, get_apis
from cardsmith.mock_api.apis import MockApis

router = APIRouter(prefix="/api", tags=["games"])

Apis = Annotated[MockApis, Depends(get_apis)]


@router.get("/games")
async def list_games(apis: Apis) -> JSONResponse:
    return envelope_response(await apis.games.get_games())


@router.get("/games/{game_id}")
async def get_game(game_id: str, apis: Apis) -> JSONResponse:
    return envelope_response(await apis.games.get_game(game_id))


@router.post("/games")
async def create_game(data: Annotated[dict[str, Any], Body()], apis: Apis) -> JSONResponse:
    """Create a game. Returns 201 with the stored game."""
    return envelope_response(await apis.games.create_game(data), status.HTTP_201_CREATED)


@router.put("/games/{game_id}")
async def update_game(
    game_id: str,
    data: Annotated[dict[str, Any], Body()],
    apis: Apis,
) -> JSONResponse:
    return envelope_response(await apis.games.update_game(game_id, data))


@router.delete("/games/{game_id}")
async def delete_game(game_id: str, apis: Apis) -> JSONResponse:
    """Delete a game together with its cards and decks."""
    return envelope_response(await apis.games.delete_game(game_id))
