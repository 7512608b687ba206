from datetime import datetime
from typing import ClassVar

from pydantic import Field

from cardsmith.models.base import CamelModel, PatchModel


class Game(CamelModel):
    """
    A card game whose cards and decks are managed together.

    Attributes:
        id: Server-assigned identifier (e.g., "game_001")
        title: Display title
        description: Free-form description
        icon: Short icon string shown on the dashboard (usually an emoji)
        creator_id: Owner of the game, fixed at creation
        card_count: Number of cards in the game (derived, maintained by the store)
        deck_count: Number of decks in the game (derived, maintained by the store)
        created_at: Creation time (UTC)
        updated_at: Last modification time (UTC)
    """

    id: str
    title: str
    description: str = ""
    icon: str | None = None
    creator_id: str
    card_count: int = 0
    deck_count: int = 0
    created_at: datetime
    updated_at: datetime


class GameCreate(CamelModel):
    """Client payload for creating a game."""

    title: str = Field(min_length=1)
    description: str = ""
    icon: str | None = None


class GameUpdate(PatchModel):
    """Client payload for updating a game. Counts and ownership are not writable."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"icon"})

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    icon: str | None = None
