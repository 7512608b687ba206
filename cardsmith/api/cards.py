"""
Card API endpoints.

HTTP face of the mock Card API.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from cardsmith.api.deps import envelope_response, get_apis
from cardsmith.config import DEFAULT_CARD_PAGE_SIZE, DEFAULT_PAGE
from cardsmith.mock_api.apis import MockApis

router = APIRouter(prefix="/api", tags=["cards"])

Apis = Annotated[MockApis, Depends(get_apis)]


@router.get("/games/{game_id}/cards")
async def list_cards(
    game_id: str,
    apis: Apis,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_CARD_PAGE_SIZE,
    search: str | None = None,
    card_type: Annotated[str | None, Query(alias="type")] = None,
    rarity: str | None = None,
) -> JSONResponse:
    """
    List a game's cards.

    Filters (search, type, rarity) apply before pagination.
    """
    response = await apis.cards.get_cards(
        game_id,
        page=page,
        limit=limit,
        search=search,
        card_type=card_type,
        rarity=rarity,
    )
    return envelope_response(response)


@router.post("/cards/bulk-delete")
async def bulk_delete_cards(body: Annotated[dict[str, Any], Body()], apis: Apis) -> JSONResponse:
    """Delete several cards. Body: {"cardIds": [...]}."""
    return envelope_response(await apis.cards.delete_cards(body.get("cardIds")))


@router.get("/cards/{card_id}")
async def get_card(card_id: str, apis: Apis) -> JSONResponse:
    return envelope_response(await apis.cards.get_card(card_id))


@router.post("/games/{game_id}/cards")
async def create_card(
    game_id: str,
    data: Annotated[dict[str, Any], Body()],
    apis: Apis,
) -> JSONResponse:
    return envelope_response(await apis.cards.create_card(game_id, data), status.HTTP_201_CREATED)


@router.put("/cards/{card_id}")
async def update_card(
    card_id: str,
    data: Annotated[dict[str, Any], Body()],
    apis: Apis,
) -> JSONResponse:
    return envelope_response(await apis.cards.update_card(card_id, data))


@router.delete("/cards/{card_id}")
async def delete_card(card_id: str, apis: Apis) -> JSONResponse:
    """Delete a card; it is removed from every deck first."""
    return envelope_response(await apis.cards.delete_card(card_id))
