from collections.abc import Iterable
from datetime import datetime

from pydantic import Field

from cardsmith.models.base import CamelModel, PatchModel
from cardsmith.models.card import Card


class DeckCard(CamelModel):
    """A card reference inside a deck."""

    card_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)


class Deck(CamelModel):
    """
    A deck built from the cards of one game.

    Attributes:
        id: Server-assigned identifier (e.g., "deck_001")
        game_id: Owning game, fixed at creation
        creator_id: Owner of the deck, fixed at creation
        name: Deck name
        description: Free-form description
        cards: Card references with quantities
        card_count: Sum of quantities over ``cards`` (derived)
        is_public: Whether the deck is shared
    """

    id: str
    game_id: str
    creator_id: str
    name: str
    description: str = ""
    cards: list[DeckCard] = Field(default_factory=list)
    card_count: int = 0
    is_public: bool = False
    created_at: datetime
    updated_at: datetime

    def matches_search(self, needle: str) -> bool:
        """Case-insensitive substring match over name and description."""
        needle = needle.lower()
        return needle in self.name.lower() or needle in self.description.lower()


class ExpandedDeckCard(DeckCard):
    """Deck entry carrying a copy of the referenced card."""

    card: Card | None = None


class ExpandedDeck(Deck):
    """Deck with its entries expanded for rendering."""

    expanded_cards: list[ExpandedDeckCard] = Field(default_factory=list)


class DeckCreate(CamelModel):
    """Client payload for creating a deck. Game and creator come from the server."""

    name: str = Field(default="New Deck", min_length=1)
    description: str = ""
    cards: list[DeckCard] = Field(default_factory=list)
    is_public: bool = False


class DeckImportFields(CamelModel):
    """Deck-level fields of an import payload. Name and card entries are checked separately."""

    description: str | None = None
    is_public: bool = False


class DeckUpdate(PatchModel):
    """Client payload for updating a deck. Game and creator are not writable."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    cards: list[DeckCard] | None = None
    is_public: bool | None = None


def total_quantity(entries: Iterable[DeckCard]) -> int:
    """Total cards across deck entries."""
    return sum(entry.quantity for entry in entries)
