from cardsmith.api.cards import router as cards_router
from cardsmith.api.decks import router as decks_router
from cardsmith.api.games import router as games_router
from cardsmith.api.health import router as health_router

__all__ = [
    "cards_router",
    "decks_router",
    "games_router",
    "health_router",
]
