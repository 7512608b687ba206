from dataclasses import dataclass

from cardsmith.mock_api.card_api import CardApi
from cardsmith.mock_api.deck_api import DeckApi
from cardsmith.mock_api.game_api import GameApi
from cardsmith.mock_api.latency import Latency
from cardsmith.store.store import Store


@dataclass
class MockApis:
    """The three entity APIs sharing one store."""

    store: Store
    games: GameApi
    cards: CardApi
    decks: DeckApi

    @classmethod
    def create(
        cls,
        store: Store,
        latency: Latency | None = None,
        creator_id: str | None = None,
    ) -> "MockApis":
        latency = latency or Latency()
        return cls(
            store=store,
            games=GameApi(store, latency, creator_id=creator_id),
            cards=CardApi(store, latency),
            decks=DeckApi(store, latency, creator_id=creator_id),
        )
