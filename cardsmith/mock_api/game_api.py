"""
Mock Game API.

CRUD over the games table. Deleting a game cascades to its cards and decks.
"""

import logging
from collections.abc import Mapping
from typing import Any

from cardsmith.config import settings
from cardsmith.mock_api.base import MockApi, endpoint
from cardsmith.mock_api.latency import Latency
from cardsmith.models.game import Game, GameCreate, GameUpdate
from cardsmith.store.store import Store

logger = logging.getLogger(__name__)


class GameApi(MockApi):
    """Games: list, fetch, create, update, delete."""

    def __init__(
        self,
        store: Store,
        latency: Latency | None = None,
        creator_id: str | None = None,
    ) -> None:
        super().__init__(store, latency)
        self.creator_id = creator_id or settings.default_creator_id

    @endpoint(300)
    def get_games(self) -> list[Game]:
        return [game.model_copy(deep=True) for game in self.store.games.values()]

    @endpoint(200)
    def get_game(self, game_id: str) -> Game:
        return self._require_game(game_id).model_copy(deep=True)

    @endpoint(500)
    def create_game(self, data: Mapping[str, Any]) -> Game:
        """Create a game owned by the default creator, with zero cards and decks."""
        payload = GameCreate.model_validate(data)
        now = self.store.now()
        game = Game(
            id=self.store.generate_id("game"),
            **payload.model_dump(),
            creator_id=self.creator_id,
            card_count=0,
            deck_count=0,
            created_at=now,
            updated_at=now,
        )
        self.store.games[game.id] = game
        logger.info("game_created", extra={"game_id": game.id})
        return game.model_copy(deep=True)

    @endpoint(300)
    def update_game(self, game_id: str, data: Mapping[str, Any]) -> Game:
        """Merge the provided fields; ids, ownership and counts stay as stored."""
        game = self._require_game(game_id)
        payload = GameUpdate.model_validate(data)
        updated = Game.model_validate(
            {**game.model_dump(), **payload.changes(), "updated_at": self.store.now()}
        )
        self.store.games[game_id] = updated
        logger.info("game_updated", extra={"game_id": game_id})
        return updated.model_copy(deep=True)

    @endpoint(400)
    def delete_game(self, game_id: str) -> dict[str, str]:
        """Delete a game after removing its cards and decks."""
        self._require_game(game_id)
        self.store.cleanup_deleted_game(game_id)
        del self.store.games[game_id]
        logger.info("game_deleted", extra={"game_id": game_id})
        return {"message": "Game deleted successfully"}
