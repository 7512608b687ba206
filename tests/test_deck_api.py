"""Tests for the mock Deck API: CRUD, card-reference validation and sanitizing."""

from cardsmith.mock_api.apis import MockApis
from cardsmith.models.deck import DeckCard, ExpandedDeck
from cardsmith.models.response import ErrorCode
from cardsmith.store.store import Store


def _add_dangling_entry(store: Store) -> None:
    """Point deck_001 at a card that does not exist, bypassing the APIs."""
    deck = store.decks["deck_001"]
    store.decks["deck_001"] = deck.model_copy(
        update={
            "cards": [*deck.cards, DeckCard(card_id="card_ghost", quantity=5)],
            "card_count": 11,
        }
    )


class TestGetDecks:
    async def test_lists_game_decks(self, apis: MockApis) -> None:
        response = await apis.decks.get_decks("game_001")

        assert [deck.id for deck in response.data] == ["deck_001"]
        assert response.pagination.items_per_page == 10

    async def test_search(self, apis: MockApis) -> None:
        await apis.decks.create_deck("game_001", {"name": "Control"})

        response = await apis.decks.get_decks("game_001", search="dragon")

        assert [deck.name for deck in response.data] == ["Dragon Dominance"]
        assert response.pagination.total_items == 1

    async def test_sanitizes_listed_decks(self, apis: MockApis, store: Store) -> None:
        _add_dangling_entry(store)

        response = await apis.decks.get_decks("game_001")

        deck = response.data[0]
        assert [entry.card_id for entry in deck.cards] == ["card_001", "card_002", "card_003"]
        assert deck.card_count == 6

    async def test_sanitizing_does_not_write_back(self, apis: MockApis, store: Store) -> None:
        _add_dangling_entry(store)

        await apis.decks.get_decks("game_001")

        assert len(store.decks["deck_001"].cards) == 4
        assert store.decks["deck_001"].card_count == 11

    async def test_unknown_game(self, apis: MockApis) -> None:
        response = await apis.decks.get_decks("game_999")

        assert response.error.code == ErrorCode.GAME_NOT_FOUND

    async def test_non_string_search_is_invalid(self, apis: MockApis) -> None:
        response = await apis.decks.get_decks("game_001", search=42)

        assert response.error.code == ErrorCode.INVALID_REQUEST
        assert response.error.details == {"search": "int"}


class TestGetDeck:
    async def test_expands_cards(self, apis: MockApis) -> None:
        response = await apis.decks.get_deck("deck_001")

        deck = response.data
        assert isinstance(deck, ExpandedDeck)
        assert [(e.card.name, e.quantity) for e in deck.expanded_cards] == [
            ("Dragon Knight", 3),
            ("Magic Barrier", 2),
            ("Shadow Trap", 1),
        ]

    async def test_expanded_wire_shape(self, apis: MockApis) -> None:
        response = await apis.decks.get_deck("deck_001")

        payload = response.to_dict()["data"]
        assert payload["cardCount"] == 6
        assert payload["expandedCards"][0]["cardId"] == "card_001"
        assert payload["expandedCards"][0]["card"]["gameId"] == "game_001"

    async def test_expanded_deck_is_sanitized(self, apis: MockApis, store: Store) -> None:
        _add_dangling_entry(store)

        response = await apis.decks.get_deck("deck_001")

        assert len(response.data.expanded_cards) == 3
        assert response.data.card_count == 6

    async def test_not_found(self, apis: MockApis) -> None:
        response = await apis.decks.get_deck("deck_999")

        assert response.error.code == ErrorCode.DECK_NOT_FOUND


class TestCreateDeck:
    async def test_creates_deck(self, apis: MockApis, store: Store) -> None:
        response = await apis.decks.create_deck(
            "game_001",
            {
                "name": "Trap Box",
                "cards": [
                    {"cardId": "card_003", "quantity": 3},
                    {"cardId": "card_002", "quantity": 1},
                ],
                "isPublic": True,
            },
        )

        deck = response.data
        assert deck.id.startswith("deck_")
        assert deck.game_id == "game_001"
        assert deck.creator_id == "user_001"
        assert deck.card_count == 4
        assert deck.is_public is True
        assert store.games["game_001"].deck_count == 2
        assert store.check_integrity() == []

    async def test_defaults(self, apis: MockApis) -> None:
        response = await apis.decks.create_deck("game_002", {})

        deck = response.data
        assert deck.name == "New Deck"
        assert deck.cards == []
        assert deck.card_count == 0
        assert deck.is_public is False

    async def test_unknown_card_rejects_whole_deck(self, apis: MockApis, store: Store) -> None:
        response = await apis.decks.create_deck(
            "game_001",
            {
                "name": "Broken",
                "cards": [
                    {"cardId": "card_001", "quantity": 2},
                    {"cardId": "card_ghost", "quantity": 1},
                ],
            },
        )

        assert response.error.code == ErrorCode.INVALID_CARDS
        assert response.error.message == "Some cards in the deck do not exist"
        assert response.error.details == {"invalidCardIds": ["card_ghost"]}
        assert len(store.decks) == 3
        assert store.games["game_001"].deck_count == 1

    async def test_card_from_other_game_is_invalid(self, apis: MockApis) -> None:
        response = await apis.decks.create_deck(
            "game_001", {"cards": [{"cardId": "card_101", "quantity": 1}]}
        )

        assert response.error.code == ErrorCode.INVALID_CARDS
        assert response.error.details == {"invalidCardIds": ["card_101"]}

    async def test_non_positive_quantity_is_invalid(self, apis: MockApis) -> None:
        response = await apis.decks.create_deck(
            "game_001", {"cards": [{"cardId": "card_001", "quantity": 0}]}
        )

        assert response.error.code == ErrorCode.INVALID_REQUEST

    async def test_unknown_game(self, apis: MockApis) -> None:
        response = await apis.decks.create_deck("game_999", {"name": "Nowhere"})

        assert response.error.code == ErrorCode.GAME_NOT_FOUND


class TestUpdateDeck:
    async def test_replaces_cards_and_recomputes_count(
        self, apis: MockApis, store: Store, clock
    ) -> None:
        later = clock.advance()

        response = await apis.decks.update_deck(
            "deck_001", {"cards": [{"cardId": "card_001", "quantity": 4}]}
        )

        deck = response.data
        assert deck.card_count == 4
        assert deck.updated_at == later
        assert store.decks["deck_001"].card_count == 4
        assert store.check_integrity() == []

    async def test_without_cards_keeps_count(self, apis: MockApis) -> None:
        response = await apis.decks.update_deck("deck_001", {"name": "Renamed", "cardCount": 99})

        assert response.data.name == "Renamed"
        assert response.data.card_count == 6

    async def test_game_and_creator_pinned(self, apis: MockApis) -> None:
        response = await apis.decks.update_deck(
            "deck_001", {"gameId": "game_002", "creatorId": "user_999"}
        )

        assert response.data.game_id == "game_001"
        assert response.data.creator_id == "user_001"

    async def test_invalid_cards_leave_deck_untouched(self, apis: MockApis, store: Store) -> None:
        before = store.decks["deck_001"].model_dump()

        response = await apis.decks.update_deck(
            "deck_001",
            {"name": "Bad", "cards": [{"cardId": "card_201", "quantity": 1}]},
        )

        assert response.error.code == ErrorCode.INVALID_CARDS
        assert store.decks["deck_001"].model_dump() == before

    async def test_not_found(self, apis: MockApis) -> None:
        response = await apis.decks.update_deck("deck_999", {"name": "x"})

        assert response.error.code == ErrorCode.DECK_NOT_FOUND


class TestDeleteDeck:
    async def test_deletes_and_refreshes_count(self, apis: MockApis, store: Store) -> None:
        response = await apis.decks.delete_deck("deck_001")

        assert response.data == {"message": "Deck deleted successfully"}
        assert "deck_001" not in store.decks
        assert store.games["game_001"].deck_count == 0
        assert len(store.cards_for_game("game_001")) == 3

    async def test_not_found(self, apis: MockApis) -> None:
        response = await apis.decks.delete_deck("deck_999")

        assert response.error.code == ErrorCode.DECK_NOT_FOUND
