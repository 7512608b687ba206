from cardsmith.models.card import Card, CardCreate, CardUpdate
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
from cardsmith.models.game import Game, GameCreate, GameUpdate
from cardsmith.models.response import (
    STANDARD_MESSAGES,
    ApiError,
    ApiResponse,
    ErrorCode,
    ErrorDetail,
    Pagination,
)

__all__ = [
    "STANDARD_MESSAGES",
    "ApiError",
    "ApiResponse",
    "Card",
    "CardCreate",
    "CardUpdate",
    "Deck",
    "DeckCard",
    "DeckCreate",
    "DeckImportFields",
    "DeckUpdate",
    "ErrorCode",
    "ErrorDetail",
    "ExpandedDeck",
    "ExpandedDeckCard",
    "Game",
    "GameCreate",
    "GameUpdate",
    "Pagination",
    "total_quantity",
]
