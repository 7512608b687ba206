"""
Cardsmith services.

One async method per operation, independent of whether calls are served by
the in-memory mock API or a live backend.
"""

from cardsmith.services.card_service import CardService
from cardsmith.services.deck_service import DeckService
from cardsmith.services.factory import Services, create_services
from cardsmith.services.game_service import GameService
from cardsmith.services.http_client import LiveApiClient

__all__ = [
    "CardService",
    "DeckService",
    "GameService",
    "LiveApiClient",
    "Services",
    "create_services",
]
