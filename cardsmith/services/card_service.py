"""Card service: mock API in development, live backend otherwise."""

from collections.abc import Mapping, Sequence
from typing import Any

from cardsmith.config import DEFAULT_CARD_PAGE_SIZE, DEFAULT_PAGE
from cardsmith.mock_api.card_api import CardApi
from cardsmith.models.response import ApiResponse
from cardsmith.services.base import BackendService


class CardService(BackendService[CardApi]):
    async def get_cards(
        self,
        game_id: str,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_CARD_PAGE_SIZE,
        search: str | None = None,
        card_type: str | None = None,
        rarity: str | None = None,
    ) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_cards(
                game_id,
                page=page,
                limit=limit,
                search=search,
                card_type=card_type,
                rarity=rarity,
            )
        params = {
            "page": page,
            "limit": limit,
            "search": search,
            "type": card_type,
            "rarity": rarity,
        }
        return await self.client.get(f"/games/{game_id}/cards", params=params)

    async def get_card(self, card_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_card(card_id)
        return await self.client.get(f"/cards/{card_id}")

    async def create_card(self, game_id: str, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.create_card(game_id, data)
        return await self.client.post(f"/games/{game_id}/cards", json=dict(data))

    async def update_card(self, card_id: str, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.update_card(card_id, data)
        return await self.client.put(f"/cards/{card_id}", json=dict(data))

    async def delete_card(self, card_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.delete_card(card_id)
        return await self.client.delete(f"/cards/{card_id}")

    async def delete_cards(self, card_ids: Sequence[str]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.delete_cards(card_ids)
        return await self.client.post("/cards/bulk-delete", json={"cardIds": list(card_ids)})
