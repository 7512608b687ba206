"""
Deck API endpoints.

HTTP face of the mock Deck API, including export and import.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from cardsmith.api.deps import envelope_response, get_apis
from cardsmith.config import DEFAULT_DECK_PAGE_SIZE, DEFAULT_PAGE
from cardsmith.mock_api.apis import MockApis

router = APIRouter(prefix="/api", tags=["decks"])

Apis = Annotated[MockApis, Depends(get_apis)]


@router.get("/games/{game_id}/decks")
async def list_decks(
    game_id: str,
    apis: Apis,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_DECK_PAGE_SIZE,
    search: str | None = None,
) -> JSONResponse:
    response = await apis.decks.get_decks(game_id, page=page, limit=limit, search=search)
    return envelope_response(response)


@router.post("/games/{game_id}/decks/import")
async def import_deck(
    game_id: str,
    apis: Apis,
    import_data: Annotated[Any, Body(alias="importData", embed=True)] = None,
) -> JSONResponse:
    """
    Import a deck.

    Body: {"importData": <object | JSON string | text deck list>}.
    Returns 201 with the created deck and an import summary.
    """
    response = await apis.decks.import_deck(game_id, import_data)
    return envelope_response(response, status.HTTP_201_CREATED)


@router.get("/decks/{deck_id}")
async def get_deck(deck_id: str, apis: Apis) -> JSONResponse:
    return envelope_response(await apis.decks.get_deck(deck_id))


@router.post("/games/{game_id}/decks")
async def create_deck(
    game_id: str,
    data: Annotated[dict[str, Any], Body()],
    apis: Apis,
) -> JSONResponse:
    return envelope_response(await apis.decks.create_deck(game_id, data), status.HTTP_201_CREATED)


@router.put("/decks/{deck_id}")
async def update_deck(
    deck_id: str,
    data: Annotated[dict[str, Any], Body()],
    apis: Apis,
) -> JSONResponse:
    return envelope_response(await apis.decks.update_deck(deck_id, data))


@router.delete("/decks/{deck_id}")
async def delete_deck(deck_id: str, apis: Apis) -> JSONResponse:
    return envelope_response(await apis.decks.delete_deck(deck_id))


@router.get("/decks/{deck_id}/export")
async def export_deck(
    deck_id: str,
    apis: Apis,
    export_format: Annotated[str, Query(alias="format")] = "json",
) -> JSONResponse:
    """Export a deck as JSON (default) or text (?format=text)."""
    return envelope_response(await apis.decks.export_deck(deck_id, export_format))
