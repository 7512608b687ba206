"""
In-memory store for games, cards and decks.

The store is the single source of truth for one process. It owns the three
tables and the helpers that keep them consistent:

- game.card_count / game.deck_count equal the live row counts
- every deck entry references an existing card, deck.card_count is the
  sum of its quantities
- no card or deck outlives its game

Helpers are synchronous: a caller that runs them back to back never yields
control with the tables half rewritten.
"""

import logging
import random
import string
from collections.abc import Callable
from datetime import UTC, datetime

from cardsmith.models.card import Card
from cardsmith.models.deck import Deck, total_quantity
from cardsmith.models.game import Game
from cardsmith.store.seed import DEFAULT_SEED, SeedData

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

BASE36_ALPHABET = string.digits + string.ascii_lowercase

ID_SUFFIX_LENGTH = 9


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_base36(value: int) -> str:
    """Render a non-negative integer in base 36 (lowercase)."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value} in base 36")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


class Store:
    """
    Process-local tables plus referential-integrity maintenance.

    Tables are insertion-ordered dicts keyed by id; list endpoints page
    through them in that order.
    """

    def __init__(self, seed: SeedData = DEFAULT_SEED, clock: Clock = utc_now) -> None:
        self._seed = seed
        self._clock = clock
        self.games: dict[str, Game] = {}
        self.cards: dict[str, Card] = {}
        self.decks: dict[str, Deck] = {}
        self.reset()

    def reset(self) -> None:
        """Discard all changes and restore the seed dataset."""
        self.games = {game.id: game.model_copy(deep=True) for game in self._seed.games}
        self.cards = {card.id: card.model_copy(deep=True) for card in self._seed.cards}
        self.decks = {deck.id: deck.model_copy(deep=True) for deck in self._seed.decks}
        logger.info(
            "store_reset",
            extra={
                "games": len(self.games),
                "cards": len(self.cards),
                "decks": len(self.decks),
            },
        )

    def now(self) -> datetime:
        """Current time from the store's clock."""
        return self._clock()

    def generate_id(self, prefix: str) -> str:
        """
        Generate an id of the form ``<prefix>_<base36 ms timestamp>_<random>``.

        Re-draws on the (unlikely) collision with any existing row.
        """
        while True:
            stamp = to_base36(int(self.now().timestamp() * 1000))
            suffix = "".join(random.choices(BASE36_ALPHABET, k=ID_SUFFIX_LENGTH))
            candidate = f"{prefix}_{stamp}_{suffix}"
            if not self._id_taken(candidate):
                return candidate

    def _id_taken(self, entity_id: str) -> bool:
        return entity_id in self.games or entity_id in self.cards or entity_id in self.decks

    # --- Queries ---

    def cards_for_game(self, game_id: str) -> list[Card]:
        return [card for card in self.cards.values() if card.game_id == game_id]

    def decks_for_game(self, game_id: str) -> list[Deck]:
        return [deck for deck in self.decks.values() if deck.game_id == game_id]

    # --- Integrity maintenance ---

    def update_game_card_count(self, game_id: str) -> None:
        """Recompute a game's card count. No-op if the game is gone."""
        game = self.games.get(game_id)
        if game is None:
            return
        self.games[game_id] = game.model_copy(
            update={
                "card_count": len(self.cards_for_game(game_id)),
                "updated_at": self.now(),
            }
        )

    def update_game_deck_count(self, game_id: str) -> None:
        """Recompute a game's deck count. No-op if the game is gone."""
        game = self.games.get(game_id)
        if game is None:
            return
        self.games[game_id] = game.model_copy(
            update={
                "deck_count": len(self.decks_for_game(game_id)),
                "updated_at": self.now(),
            }
        )

    def remove_deleted_card_from_decks(self, card_id: str) -> None:
        """
        Drop a card from every deck that holds it.

        Must run before the card row is removed.
        """
        for deck_id, deck in self.decks.items():
            remaining = [entry for entry in deck.cards if entry.card_id != card_id]
            if len(remaining) == len(deck.cards):
                continue
            self.decks[deck_id] = deck.model_copy(
                update={
                    "cards": remaining,
                    "card_count": total_quantity(remaining),
                    "updated_at": self.now(),
                }
            )
            logger.debug(
                "card_removed_from_deck",
                extra={"card_id": card_id, "deck_id": deck_id},
            )

    def cleanup_deleted_game(self, game_id: str) -> None:
        """
        Remove every card and deck of a game.

        Must run before the game row is removed.
        """
        card_total = len(self.cards)
        deck_total = len(self.decks)
        self.cards = {cid: card for cid, card in self.cards.items() if card.game_id != game_id}
        self.decks = {did: deck for did, deck in self.decks.items() if deck.game_id != game_id}
        logger.info(
            "game_children_removed",
            extra={
                "game_id": game_id,
                "cards_removed": card_total - len(self.cards),
                "decks_removed": deck_total - len(self.decks),
            },
        )

    def check_integrity(self) -> list[str]:
        """
        Report every referential-integrity violation.

        Returns:
            Human-readable violation descriptions; empty when consistent.
        """
        problems: list[str] = []

        for card in self.cards.values():
            if card.game_id not in self.games:
                problems.append(f"card {card.id} references missing game {card.game_id}")

        for deck in self.decks.values():
            if deck.game_id not in self.games:
                problems.append(f"deck {deck.id} references missing game {deck.game_id}")
            for entry in deck.cards:
                if entry.card_id not in self.cards:
                    problems.append(f"deck {deck.id} references missing card {entry.card_id}")
            expected = total_quantity(deck.cards)
            if deck.card_count != expected:
                problems.append(
                    f"deck {deck.id} has card_count {deck.card_count}, expected {expected}"
                )

        for game in self.games.values():
            card_count = len(self.cards_for_game(game.id))
            if game.card_count != card_count:
                problems.append(
                    f"game {game.id} has card_count {game.card_count}, expected {card_count}"
                )
            deck_count = len(self.decks_for_game(game.id))
            if game.deck_count != deck_count:
                problems.append(
                    f"game {game.id} has deck_count {game.deck_count}, expected {deck_count}"
                )

        return problems
