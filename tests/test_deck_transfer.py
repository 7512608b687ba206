"""Tests for deck export and import."""

import json

import pytest

from cardsmith.mock_api.apis import MockApis
from cardsmith.models.response import ErrorCode
from cardsmith.store.store import Store

DRAGON_DOMINANCE_TEXT = """# Dragon Dominance - Fantasy Realms

3x Dragon Knight (Monster)
2x Magic Barrier (Spell)
1x Shadow Trap (Trap)"""


class TestExportDeck:
    async def test_json_export(self, apis: MockApis) -> None:
        response = await apis.decks.export_deck("deck_001", "json")

        assert response.data == {
            "format": "json",
            "content": {
                "name": "Dragon Dominance",
                "game": "Fantasy Realms",
                "cards": [
                    {"id": "card_001", "name": "Dragon Knight", "type": "Monster", "quantity": 3},
                    {"id": "card_002", "name": "Magic Barrier", "type": "Spell", "quantity": 2},
                    {"id": "card_003", "name": "Shadow Trap", "type": "Trap", "quantity": 1},
                ],
            },
        }

    async def test_json_is_default(self, apis: MockApis) -> None:
        response = await apis.decks.export_deck("deck_002")

        assert response.data["format"] == "json"
        assert response.data["content"]["game"] == "Cyber Wars"

    async def test_text_export(self, apis: MockApis) -> None:
        response = await apis.decks.export_deck("deck_001", "text")

        assert response.data == {"format": "text", "content": DRAGON_DOMINANCE_TEXT}
        assert response.data["content"].startswith("# Dragon Dominance - Fantasy Realms")

    async def test_export_skips_missing_cards(self, apis: MockApis, store: Store) -> None:
        del store.cards["card_002"]

        response = await apis.decks.export_deck("deck_001", "text")

        assert "Magic Barrier" not in response.data["content"]
        assert "3x Dragon Knight (Monster)" in response.data["content"]

    async def test_unknown_game_title_fallback(self, apis: MockApis, store: Store) -> None:
        del store.games["game_002"]

        response = await apis.decks.export_deck("deck_002", "json")

        assert response.data["content"]["game"] == "Unknown Game"

    async def test_unknown_format(self, apis: MockApis) -> None:
        response = await apis.decks.export_deck("deck_001", "xml")

        assert response.error.code == ErrorCode.INVALID_REQUEST
        assert response.error.details["supported"] == ["json", "text"]

    async def test_not_found(self, apis: MockApis) -> None:
        response = await apis.decks.export_deck("deck_999")

        assert response.error.code == ErrorCode.DECK_NOT_FOUND


class TestImportDeck:
    async def test_name_entries_resolve_case_insensitively(
        self, apis: MockApis, store: Store
    ) -> None:
        """Unresolved entries are reported and the deck is created anyway."""
        response = await apis.decks.import_deck(
            "game_001",
            {
                "name": "Imported",
                "cards": [
                    {"name": "dragon knight", "quantity": 2},
                    {"name": "Nope", "quantity": 1},
                    {"name": "SHADOW TRAP"},
                ],
            },
        )

        assert response.success is True
        deck = response.data["deck"]
        assert [(e.card_id, e.quantity) for e in deck.cards] == [
            ("card_001", 2),
            ("card_003", 1),
        ]
        assert deck.card_count == 3
        assert deck.description == "Imported deck: Imported"
        assert response.data["importSummary"] == {
            "totalCards": 3,
            "validCards": 2,
            "invalidCards": 1,
            "invalidCardDetails": [{"name": "Nope", "quantity": 1}],
        }
        assert store.games["game_001"].deck_count == 2
        assert store.check_integrity() == []

    async def test_card_id_entries_must_belong_to_game(self, apis: MockApis) -> None:
        response = await apis.decks.import_deck(
            "game_001",
            {
                "name": "Mixed",
                "description": "Mixed sources",
                "cards": [
                    {"cardId": "card_002", "quantity": 4},
                    {"cardId": "card_101", "quantity": 1},
                ],
            },
        )

        deck = response.data["deck"]
        assert [e.card_id for e in deck.cards] == ["card_002"]
        assert deck.description == "Mixed sources"
        assert response.data["importSummary"]["invalidCards"] == 1

    async def test_all_invalid_still_creates_empty_deck(self, apis: MockApis) -> None:
        response = await apis.decks.import_deck(
            "game_001", {"name": "Empty", "cards": [{"name": "Nope"}, "garbage"]}
        )

        assert response.success is True
        assert response.data["deck"].cards == []
        assert response.data["importSummary"]["validCards"] == 0
        assert response.data["importSummary"]["invalidCards"] == 2

    async def test_json_string(self, apis: MockApis) -> None:
        payload = json.dumps({"name": "From JSON", "cards": [{"cardId": "card_001"}]})

        response = await apis.decks.import_deck("game_001", payload)

        deck = response.data["deck"]
        assert deck.name == "From JSON"
        assert deck.card_count == 1

    async def test_text_export_round_trips(self, apis: MockApis) -> None:
        exported = await apis.decks.export_deck("deck_001", "text")

        response = await apis.decks.import_deck("game_001", exported.data["content"])

        deck = response.data["deck"]
        assert deck.name == "Dragon Dominance"
        assert [(e.card_id, e.quantity) for e in deck.cards] == [
            ("card_001", 3),
            ("card_002", 2),
            ("card_003", 1),
        ]

    async def test_import_response_wire_shape(self, apis: MockApis) -> None:
        response = await apis.decks.import_deck("game_001", {"name": "Wire"})

        payload = response.to_dict()["data"]
        assert payload["deck"]["gameId"] == "game_001"
        assert payload["importSummary"]["totalCards"] == 0

    async def test_unparseable_string(self, apis: MockApis, store: Store) -> None:
        response = await apis.decks.import_deck("game_001", "not a deck")

        assert response.error.code == ErrorCode.IMPORT_ERROR
        assert response.error.message == "Failed to process import data"
        assert "error" in response.error.details
        assert len(store.decks) == 3

    @pytest.mark.parametrize(
        "import_data",
        [
            {"cards": [{"cardId": "card_001"}]},
            {"name": "   "},
            ["card_001"],
            "[1, 2, 3]",
            "3x Dragon Knight",
        ],
    )
    async def test_missing_name(self, apis: MockApis, store: Store, import_data) -> None:
        response = await apis.decks.import_deck("game_001", import_data)

        assert response.error.code == ErrorCode.INVALID_IMPORT
        assert len(store.decks) == 3

    async def test_unusable_quantities_are_reported(self, apis: MockApis) -> None:
        """Zero, negative, fractional and boolean quantities are not coerced."""
        entries = [
            {"name": "dragon knight", "quantity": 0},
            {"name": "magic barrier", "quantity": 2.9},
            {"name": "shadow trap", "quantity": -2},
            {"name": "dragon knight", "quantity": True},
            {"name": "dragon knight", "quantity": "two"},
        ]

        response = await apis.decks.import_deck("game_001", {"name": "Z", "cards": entries})

        assert response.data["deck"].cards == []
        assert response.data["importSummary"] == {
            "totalCards": 5,
            "validCards": 0,
            "invalidCards": 5,
            "invalidCardDetails": entries,
        }

    async def test_whole_number_quantities_are_accepted(self, apis: MockApis) -> None:
        response = await apis.decks.import_deck(
            "game_001",
            {
                "name": "Counts",
                "cards": [
                    {"cardId": "card_001", "quantity": 2.0},
                    {"cardId": "card_002", "quantity": "3"},
                    {"cardId": "card_003", "quantity": None},
                ],
            },
        )

        deck = response.data["deck"]
        assert [(e.card_id, e.quantity) for e in deck.cards] == [
            ("card_001", 2),
            ("card_002", 3),
            ("card_003", 1),
        ]
        assert deck.card_count == 6

    @pytest.mark.parametrize(
        ("is_public", "expected"), [("false", False), ("true", True), (1, True)]
    )
    async def test_is_public_is_parsed_as_bool(
        self, apis: MockApis, is_public: object, expected: bool
    ) -> None:
        response = await apis.decks.import_deck(
            "game_001", {"name": "Visibility", "isPublic": is_public}
        )

        assert response.data["deck"].is_public is expected

    async def test_invalid_is_public_writes_nothing(self, apis: MockApis, store: Store) -> None:
        response = await apis.decks.import_deck(
            "game_001", {"name": "Visibility", "isPublic": "sometimes"}
        )

        assert response.error.code == ErrorCode.INVALID_REQUEST
        assert len(store.decks) == 3

    async def test_unknown_game(self, apis: MockApis) -> None:
        response = await apis.decks.import_deck("game_999", {"name": "Lost"})

        assert response.error.code == ErrorCode.GAME_NOT_FOUND
