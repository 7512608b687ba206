"""
Mock Deck API.

CRUD over the decks table plus export/import.

Two card-reference policies:
- create/update are all-or-nothing: one unknown card rejects the write
- import is partial: unknown cards are dropped and reported, the deck is
  still created

Reads sanitize: entries pointing at cards that no longer exist are dropped
from the returned copy and card_count is recomputed.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cardsmith.config import DEFAULT_DECK_PAGE_SIZE, DEFAULT_PAGE, settings
from cardsmith.mock_api.base import MockApi, endpoint, paginate, require_optional_text
from cardsmith.mock_api.latency import Latency
from cardsmith.models.card import Card
from cardsmith.models.deck import (
    Deck,
    DeckCard,
    DeckCreate,
    DeckImportFields,
    DeckUpdate,
    ExpandedDeck,
    ExpandedDeckCard,
    total_quantity,
)
from cardsmith.models.response import ApiError, ApiResponse, ErrorCode
from cardsmith.parsers.deck_text import DeckTextLine, format_deck_text, parse_deck_text
from cardsmith.store.store import Store

logger = logging.getLogger(__name__)

EXPORT_FORMATS = frozenset({"json", "text"})

UNKNOWN_GAME_TITLE = "Unknown Game"


class DeckApi(MockApi):
    """Decks of a game: list, fetch, create, update, delete, export, import."""

    def __init__(
        self,
        store: Store,
        latency: Latency | None = None,
        creator_id: str | None = None,
    ) -> None:
        super().__init__(store, latency)
        self.creator_id = creator_id or settings.default_creator_id

    @endpoint(300)
    def get_decks(
        self,
        game_id: str,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_DECK_PAGE_SIZE,
        search: str | None = None,
    ) -> ApiResponse:
        """List one page of a game's decks, each sanitized."""
        self._require_game(game_id)
        require_optional_text("search", search)

        decks = self.store.decks_for_game(game_id)
        if search:
            decks = [deck for deck in decks if deck.matches_search(search)]

        page_items, pagination = paginate(decks, page, limit)
        return ApiResponse.ok([self._sanitize(deck) for deck in page_items], pagination)

    @endpoint(200)
    def get_deck(self, deck_id: str) -> ExpandedDeck:
        """Fetch a sanitized deck with each entry carrying a copy of its card."""
        deck = self._sanitize(self._require_deck(deck_id))
        expanded = [
            ExpandedDeckCard(
                card_id=entry.card_id,
                quantity=entry.quantity,
                card=self.store.cards[entry.card_id].model_copy(deep=True),
            )
            for entry in deck.cards
        ]
        return ExpandedDeck.model_validate({**deck.model_dump(), "expanded_cards": expanded})

    @endpoint(400)
    def create_deck(self, game_id: str, data: Mapping[str, Any]) -> Deck:
        """
        Create a deck in a game.

        Every card must belong to the game, otherwise nothing is written
        and INVALID_CARDS lists the offending ids.
        """
        self._require_game(game_id)
        payload = DeckCreate.model_validate(data)
        self._check_card_refs(game_id, payload.cards)

        now = self.store.now()
        deck = Deck(
            id=self.store.generate_id("deck"),
            game_id=game_id,
            creator_id=self.creator_id,
            name=payload.name,
            description=payload.description,
            cards=payload.cards,
            card_count=total_quantity(payload.cards),
            is_public=payload.is_public,
            created_at=now,
            updated_at=now,
        )
        self.store.decks[deck.id] = deck
        self.store.update_game_deck_count(game_id)
        logger.info(
            "deck_created",
            extra={"deck_id": deck.id, "game_id": game_id, "card_count": deck.card_count},
        )
        return deck.model_copy(deep=True)

    @endpoint(300)
    def update_deck(self, deck_id: str, data: Mapping[str, Any]) -> Deck:
        """
        Merge the provided fields onto a deck.

        Game and creator stay pinned. When ``cards`` is supplied it is
        validated like on create and card_count is recomputed.
        """
        deck = self._require_deck(deck_id)
        payload = DeckUpdate.model_validate(data)

        changes = payload.changes()
        if payload.cards is not None:
            self._check_card_refs(deck.game_id, payload.cards)
            changes["card_count"] = total_quantity(payload.cards)

        updated = Deck.model_validate(
            {
                **deck.model_dump(),
                **changes,
                "game_id": deck.game_id,
                "creator_id": deck.creator_id,
                "updated_at": self.store.now(),
            }
        )
        self.store.decks[deck_id] = updated
        logger.info("deck_updated", extra={"deck_id": deck_id})
        return updated.model_copy(deep=True)

    @endpoint(300)
    def delete_deck(self, deck_id: str) -> dict[str, str]:
        deck = self._require_deck(deck_id)
        del self.store.decks[deck_id]
        self.store.update_game_deck_count(deck.game_id)
        logger.info("deck_deleted", extra={"deck_id": deck_id, "game_id": deck.game_id})
        return {"message": "Deck deleted successfully"}

    @endpoint(200)
    def export_deck(self, deck_id: str, export_format: str = "json") -> dict[str, Any]:
        """
        Export a sanitized deck.

        Returns:
            {"format": "json", "content": {name, game, cards: [{id, name, type, quantity}]}}
            or {"format": "text", "content": "# <deck> - <game>\\n\\n<qty>x <name> (<type>)..."}
        """
        if export_format not in EXPORT_FORMATS:
            raise ApiError(
                ErrorCode.INVALID_REQUEST,
                f"Unsupported export format: {export_format}",
                {"format": export_format, "supported": sorted(EXPORT_FORMATS)},
            )

        deck = self._sanitize(self._require_deck(deck_id))
        game = self.store.games.get(deck.game_id)
        game_title = game.title if game else UNKNOWN_GAME_TITLE
        cards = [(entry, self.store.cards[entry.card_id]) for entry in deck.cards]

        if export_format == "text":
            lines = [
                DeckTextLine(quantity=entry.quantity, name=card.name, type=card.type)
                for entry, card in cards
            ]
            return {"format": "text", "content": format_deck_text(deck.name, game_title, lines)}

        return {
            "format": "json",
            "content": {
                "name": deck.name,
                "game": game_title,
                "cards": [
                    {
                        "id": entry.card_id,
                        "name": card.name,
                        "type": card.type,
                        "quantity": entry.quantity,
                    }
                    for entry, card in cards
                ],
            },
        }

    @endpoint(500)
    def import_deck(self, game_id: str, import_data: Mapping[str, Any] | str) -> dict[str, Any]:
        """
        Create a deck from imported data, keeping whatever resolves.

        ``import_data`` is a mapping, a JSON string, or a text deck list.
        Card entries are either ``{cardId, quantity}`` (kept if the card
        belongs to the game) or ``{name, quantity}`` (resolved by
        case-insensitive exact name within the game). Quantity defaults
        to 1. Entries that do not resolve are reported in
        ``importSummary`` and left out of the deck.
        """
        self._require_game(game_id)
        deck_data = self._decode_import(import_data)

        if not isinstance(deck_data, Mapping):
            raise ApiError(ErrorCode.INVALID_IMPORT, "Import data must be an object")
        name = deck_data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ApiError(ErrorCode.INVALID_IMPORT)
        fields = DeckImportFields.model_validate(dict(deck_data))

        game_cards = self.store.cards_for_game(game_id)
        by_id = {card.id: card for card in game_cards}
        by_name: dict[str, Card] = {}
        for card in game_cards:
            by_name.setdefault(card.name.lower(), card)

        raw_cards = deck_data.get("cards")
        entries: list[Any] = raw_cards if isinstance(raw_cards, list) else []

        valid: list[DeckCard] = []
        invalid: list[Any] = []
        for raw in entries:
            resolved = _resolve_import_entry(raw, by_id, by_name)
            if resolved is None:
                invalid.append(raw)
            else:
                valid.append(resolved)

        now = self.store.now()
        deck = Deck(
            id=self.store.generate_id("deck"),
            game_id=game_id,
            creator_id=self.creator_id,
            name=name,
            description=fields.description or f"Imported deck: {name}",
            cards=valid,
            card_count=total_quantity(valid),
            is_public=fields.is_public,
            created_at=now,
            updated_at=now,
        )
        self.store.decks[deck.id] = deck
        self.store.update_game_deck_count(game_id)

        logger.info(
            "deck_imported",
            extra={
                "deck_id": deck.id,
                "game_id": game_id,
                "valid_cards": len(valid),
                "invalid_cards": len(invalid),
            },
        )
        return {
            "deck": deck.model_copy(deep=True),
            "importSummary": {
                "totalCards": len(valid) + len(invalid),
                "validCards": len(valid),
                "invalidCards": len(invalid),
                "invalidCardDetails": invalid,
            },
        }

    # --- Helpers ---

    def _require_deck(self, deck_id: str) -> Deck:
        deck = self.store.decks.get(deck_id) if deck_id else None
        if deck is None:
            raise ApiError(ErrorCode.DECK_NOT_FOUND)
        return deck

    def _sanitize(self, deck: Deck) -> Deck:
        """
        Return a copy of the deck without dangling card references.

        The stored row is left untouched.
        """
        sanitized = deck.model_copy(deep=True)
        remaining = [entry for entry in sanitized.cards if entry.card_id in self.store.cards]
        if len(remaining) != len(sanitized.cards):
            logger.warning(
                "deck_sanitized",
                extra={
                    "deck_id": deck.id,
                    "dropped_entries": len(sanitized.cards) - len(remaining),
                },
            )
        return sanitized.model_copy(
            update={"cards": remaining, "card_count": total_quantity(remaining)}
        )

    def _check_card_refs(self, game_id: str, entries: Iterable[DeckCard]) -> None:
        """Reject entries whose card is missing or belongs to another game."""
        invalid_ids = [
            entry.card_id
            for entry in entries
            if (card := self.store.cards.get(entry.card_id)) is None or card.game_id != game_id
        ]
        if invalid_ids:
            raise ApiError(ErrorCode.INVALID_CARDS, details={"invalidCardIds": invalid_ids})

    @staticmethod
    def _decode_import(import_data: Any) -> Any:
        """Turn a JSON or text deck list string into a mapping; pass anything else through."""
        if not isinstance(import_data, str):
            return import_data

        try:
            return json.loads(import_data)
        except json.JSONDecodeError as exc:
            parsed = parse_deck_text(import_data)
            if parsed.is_empty:
                raise ApiError(ErrorCode.IMPORT_ERROR, details={"error": str(exc)}) from exc
            return parsed.to_import_payload()


def _resolve_import_entry(
    raw: Any,
    by_id: Mapping[str, Card],
    by_name: Mapping[str, Card],
) -> DeckCard | None:
    """Resolve one imported entry to a deck card of the target game, or None."""
    if not isinstance(raw, Mapping):
        return None

    quantity = _import_quantity(raw.get("quantity"))
    if quantity is None:
        return None

    card_id = raw.get("cardId") or raw.get("card_id")
    name = raw.get("name")
    if isinstance(card_id, str):
        card = by_id.get(card_id)
    elif isinstance(name, str):
        card = by_name.get(name.lower())
    else:
        card = None

    if card is None:
        return None
    return DeckCard(card_id=card.id, quantity=quantity)


def _import_quantity(value: Any) -> int | None:
    """
    Quantity of an imported entry, or None if it is unusable.

    A missing or null quantity means 1. Whole-number floats and digit
    strings are accepted; zero, negatives, fractions and booleans are not.
    """
    if value is None:
        return 1
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        if not value.strip().isdigit():
            return None
        value = int(value)
    elif not isinstance(value, int):
        return None
    return value if value >= 1 else None
