"""Game service: mock API in development, live backend otherwise."""

from collections.abc import Mapping
from typing import Any

from cardsmith.mock_api.game_api import GameApi
from cardsmith.models.response import ApiResponse
from cardsmith.services.base import BackendService


class GameService(BackendService[GameApi]):
    async def get_games(self) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_games()
        return await self.client.get("/games")

    async def get_game(self, game_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.get_game(game_id)
        return await self.client.get(f"/games/{game_id}")

    async def create_game(self, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.create_game(data)
        return await self.client.post("/games", json=dict(data))

    async def update_game(self, game_id: str, data: Mapping[str, Any]) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.update_game(game_id, data)
        return await self.client.put(f"/games/{game_id}", json=dict(data))

    async def delete_game(self, game_id: str) -> ApiResponse:
        if self.mock is not None:
            return await self.mock.delete_game(game_id)
        return await self.client.delete(f"/games/{game_id}")
