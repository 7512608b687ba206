"""Deck service: mock API in development, live backend otherwise."""

from collections.abc import Mapping
from typing import Any

from cardsmith.config import DEFAULT_DECK_PAGE_SIZE, DEFAULT_PAGE
from cardsmith.mock_api.deck_api import DeckApi
from cardsmith.models.response import ApiResponse
from cardsmith.services.base import BackendService


class DeckService(BackendService[DeckApi]):
    async def get_decks(
        self,
        game_id: str,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_DECK_PAGE_SIZE,
        search: str | None = None,
    ) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_decks(game_id, page=page, limit=limit, search=search)
        params = {"page": page, "limit": limit, "search": search}
        return await self.client.get(f"/games/{game_id}/decks", params=params)

    async def get_deck(self, deck_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_deck(deck_id)
        return await self.client.get(f"/decks/{deck_id}")

    async def create_deck(self, game_id: str, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.create_deck(game_id, data)
        return await self.client.post(f"/games/{game_id}/decks", json=dict(data))

    async def update_deck(self, deck_id: str, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.update_deck(deck_id, data)
        return await self.client.put(f"/decks/{deck_id}", json=dict(data))

    async def delete_deck(self, deck_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.delete_deck(deck_id)
        return await self.client.delete(f"/decks/{deck_id}")

    async def export_deck(self, deck_id: str, export_format: str = "json") -> ApiResponse:
        if self.mock is not None:
            return await self.mock.export_deck(deck_id, export_format)
        return await self.client.get(f"/decks/{deck_id}/export", params={"format": export_format})

    async def import_deck(self, game_id: str, import_data: Mapping[str, Any] | str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.import_deck(game_id, import_data)
        payload = import_data if isinstance(import_data, str) else dict(import_data)
        return await self.client.post(
            f"/games/{game_id}/decks/import", json={"importData": payload}
        )
