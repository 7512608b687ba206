"""
Mock Card API.

CRUD over the cards table with relational integrity:
- creating or deleting a card refreshes its game's card count
- deleting a card first removes it from every deck that holds it
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from cardsmith.config import DEFAULT_CARD_PAGE_SIZE, DEFAULT_PAGE
from cardsmith.mock_api.base import MockApi, endpoint, paginate, require_optional_text
from cardsmith.models.card import Card, CardCreate, CardUpdate
from cardsmith.models.response import ApiError, ApiResponse, ErrorCode

logger = logging.getLogger(__name__)


class CardApi(MockApi):
    """Cards of a game: list, fetch, create, update, delete, bulk delete."""

    @endpoint(400)
    def get_cards(
        self,
        game_id: str,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_CARD_PAGE_SIZE,
        search: str | None = None,
        card_type: str | None = None,
        rarity: str | None = None,
    ) -> ApiResponse:
        """
        List one page of a game's cards.

        Filters apply before pagination: ``search`` is a case-insensitive
        substring match over name and description, ``card_type`` and
        ``rarity`` are exact matches.
        """
        self._require_game(game_id)
        require_optional_text("search", search)
        require_optional_text("type", card_type)
        require_optional_text("rarity", rarity)

        cards = self.store.cards_for_game(game_id)
        if search:
            cards = [card for card in cards if card.matches_search(search)]
        if card_type:
            cards = [card for card in cards if card.type == card_type]
        if rarity:
            cards = [card for card in cards if card.rarity == rarity]

        page_items, pagination = paginate(cards, page, limit)
        return ApiResponse.ok([card.model_copy(deep=True) for card in page_items], pagination)

    @endpoint(200)
    def get_card(self, card_id: str) -> Card:
        return self._require_card(card_id).model_copy(deep=True)

    @endpoint(500)
    def create_card(self, game_id: str, data: Mapping[str, Any]) -> Card:
        """Create a card in a game. The game comes from ``game_id``, never from ``data``."""
        self._require_game(game_id)
        payload = CardCreate.model_validate(data)
        now = self.store.now()
        card = Card(
            id=self.store.generate_id("card"),
            game_id=game_id,
            **payload.model_dump(),
            created_at=now,
            updated_at=now,
        )
        self.store.cards[card.id] = card
        self.store.update_game_card_count(game_id)
        logger.info("card_created", extra={"card_id": card.id, "game_id": game_id})
        return card.model_copy(deep=True)

    @endpoint(300)
    def update_card(self, card_id: str, data: Mapping[str, Any]) -> Card:
        """Merge the provided fields; the owning game cannot change."""
        card = self._require_card(card_id)
        payload = CardUpdate.model_validate(data)
        updated = Card.model_validate(
            {
                **card.model_dump(),
                **payload.changes(),
                "game_id": card.game_id,
                "updated_at": self.store.now(),
            }
        )
        self.store.cards[card_id] = updated
        logger.info("card_updated", extra={"card_id": card_id})
        return updated.model_copy(deep=True)

    @endpoint(300)
    def delete_card(self, card_id: str) -> dict[str, str]:
        card = self._require_card(card_id)

        self.store.remove_deleted_card_from_decks(card_id)
        del self.store.cards[card_id]
        self.store.update_game_card_count(card.game_id)

        logger.info("card_deleted", extra={"card_id": card_id, "game_id": card.game_id})
        return {"message": "Card deleted successfully"}

    @endpoint(500)
    def delete_cards(self, card_ids: Sequence[str]) -> dict[str, Any]:
        """
        Delete every listed card that exists; unknown ids are skipped.

        Each affected game's card count is recomputed once, after all
        removals.
        """
        if isinstance(card_ids, str) or not isinstance(card_ids, Sequence) or not card_ids:
            raise ApiError(ErrorCode.INVALID_REQUEST, "No cards specified for deletion")
        if not all(isinstance(card_id, str) for card_id in card_ids):
            raise ApiError(ErrorCode.INVALID_REQUEST, "Card ids must be strings")

        requested = list(dict.fromkeys(card_ids))
        doomed = [self.store.cards[card_id] for card_id in requested if card_id in self.store.cards]
        if not doomed:
            raise ApiError(ErrorCode.CARDS_NOT_FOUND)

        affected_games: dict[str, None] = {}
        for card in doomed:
            affected_games[card.game_id] = None
            self.store.remove_deleted_card_from_decks(card.id)

        for card in doomed:
            del self.store.cards[card.id]

        for game_id in affected_games:
            self.store.update_game_card_count(game_id)

        logger.info(
            "cards_bulk_deleted",
            extra={
                "requested": len(requested),
                "deleted": len(doomed),
                "game_ids": list(affected_games),
            },
        )
        return {
            "message": f"Successfully deleted {len(doomed)} cards",
            "deletedCount": len(doomed),
        }

    def _require_card(self, card_id: str) -> Card:
        card = self.store.cards.get(card_id) if card_id else None
        if card is None:
            raise ApiError(ErrorCode.CARD_NOT_FOUND)
        return card
