from cardsmith.mock_api.apis import MockApis
from cardsmith.mock_api.base import MockApi, endpoint, paginate
from cardsmith.mock_api.card_api import CardApi
from cardsmith.mock_api.deck_api import DeckApi
from cardsmith.mock_api.game_api import GameApi
from cardsmith.mock_api.latency import NO_LATENCY, Latency

__all__ = [
    "NO_LATENCY",
    "CardApi",
    "DeckApi",
    "GameApi",
    "Latency",
    "MockApi",
    "MockApis",
    "endpoint",
    "paginate",
]
