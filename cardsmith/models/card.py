from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from cardsmith.models.base import CamelModel, PatchModel


class Card(CamelModel):
    """
    A card belonging to exactly one game.

    Attributes:
        id: Server-assigned identifier (e.g., "card_001")
        game_id: Owning game, fixed at creation
        name: Card name, matched case-insensitively on deck import
        type: Card type (e.g., "Monster", "Spell", "Trap")
        rarity: Rarity label (e.g., "Common", "Rare")
        image: Image URL, if one was uploaded
        description: Rules or flavor text
        attributes: Game-specific stats {name: value} (attack, defense, cost, ...)
    """

    id: str
    game_id: str
    name: str
    type: str = ""
    rarity: str = ""
    image: str | None = None
    description: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    def matches_search(self, needle: str) -> bool:
        """Case-insensitive substring match over name and description."""
        needle = needle.lower()
        return needle in self.name.lower() or needle in self.description.lower()


class CardCreate(CamelModel):
    """Client payload for creating a card. The owning game comes from the path."""

    name: str = Field(min_length=1)
    type: str = ""
    rarity: str = ""
    image: str | None = None
    description: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)


class CardUpdate(PatchModel):
    """Client payload for updating a card. The owning game is not writable."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"image"})

    name: str | None = Field(default=None, min_length=1)
    type: str | None = None
    rarity: str | None = None
    image: str | None = None
    description: str | None = None
    attributes: dict[str, Any] | None = None
