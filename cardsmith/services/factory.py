"""
Service wiring.

``create_services`` reads the mock/live switch once and builds the three
services on top of either a fresh store or the live HTTP client. Callers
use the returned services without ever checking the mode themselves.
"""

import logging
from dataclasses import dataclass

import httpx

from cardsmith.config import Settings, settings
from cardsmith.mock_api.apis import MockApis
from cardsmith.mock_api.latency import Latency
from cardsmith.services.card_service import CardService
from cardsmith.services.deck_service import DeckService
from cardsmith.services.game_service import GameService
from cardsmith.services.http_client import LiveApiClient
from cardsmith.store.store import Store

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """The services a front end talks to."""

    games: GameService
    cards: CardService
    decks: DeckService
    store: Store | None = None
    client: LiveApiClient | None = None

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.aclose()


def create_services(
    config: Settings = settings,
    *,
    store: Store | None = None,
    latency: Latency | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> Services:
    """
    Build services for the configured mode.

    Args:
        config: Settings holding the mock/live switch
        store: Store to serve mock calls from (new seeded store if omitted)
        latency: Mock latency (defaults to ``config.mock_latency_scale``)
        http_client: Pre-built httpx client for live mode (tests, custom transports)
    """
    if config.use_mock_api:
        store = store or Store()
        apis = MockApis.create(
            store,
            latency or Latency(scale=config.mock_latency_scale),
            creator_id=config.default_creator_id,
        )
        logger.info("services_created", extra={"mode": "mock"})
        return Services(
            games=GameService(mock=apis.games),
            cards=CardService(mock=apis.cards),
            decks=DeckService(mock=apis.decks),
            store=store,
        )

    client = LiveApiClient(config.api_base_url, timeout=config.api_timeout, client=http_client)
    logger.info("services_created", extra={"mode": "live", "base_url": config.api_base_url})
    return Services(
        games=GameService(client=client),
        cards=CardService(client=client),
        decks=DeckService(client=client),
        client=client,
    )
