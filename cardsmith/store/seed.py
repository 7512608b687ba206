"""
Seed dataset for the in-memory store.

Three games with a handful of cards and one deck each. Derived counts
(game card/deck counts, deck card counts) agree with the rows below, so a
freshly seeded or reset store passes every integrity check.
"""

from dataclasses import dataclass, field

from cardsmith.models.card import Card
from cardsmith.models.deck import Deck, DeckCard
from cardsmith.models.game import Game


@dataclass(frozen=True)
class SeedData:
    """Initial table contents for a store."""

    games: tuple[Game, ...] = field(default_factory=tuple)
    cards: tuple[Card, ...] = field(default_factory=tuple)
    decks: tuple[Deck, ...] = field(default_factory=tuple)


SEED_GAMES = (
    Game(
        id="game_001",
        title="Fantasy Realms",
        description="A strategic card game set in a medieval fantasy world",
        icon="🧙‍♂️",
        creator_id="user_001",
        card_count=3,
        deck_count=1,
        created_at="2023-01-10T12:00:00Z",
        updated_at="2023-04-15T09:30:00Z",
    ),
    Game(
        id="game_002",
        title="Cyber Wars",
        description="Futuristic combat in a dystopian cyber world",
        icon="🤖",
        creator_id="user_001",
        card_count=2,
        deck_count=1,
        created_at="2023-02-20T15:45:00Z",
        updated_at="2023-05-05T11:20:00Z",
    ),
    Game(
        id="game_003",
        title="Ancient Battles",
        description="Historical warfare from ancient civilizations",
        icon="⚔️",
        creator_id="user_002",
        card_count=2,
        deck_count=1,
        created_at="2023-03-10T09:15:00Z",
        updated_at="2023-03-25T14:30:00Z",
    ),
)

SEED_CARDS = (
    # Fantasy Realms
    Card(
        id="card_001",
        game_id="game_001",
        name="Dragon Knight",
        type="Monster",
        rarity="Rare",
        description="A powerful knight with dragon armor",
        attributes={"attack": 1500, "defense": 1200, "cost": 4},
        created_at="2023-01-15T08:30:00Z",
        updated_at="2023-01-15T08:30:00Z",
    ),
    Card(
        id="card_002",
        game_id="game_001",
        name="Magic Barrier",
        type="Spell",
        rarity="Common",
        description="Protect a creature from the next attack",
        attributes={"cost": 2},
        created_at="2023-01-15T09:15:00Z",
        updated_at="2023-01-15T09:15:00Z",
    ),
    Card(
        id="card_003",
        game_id="game_001",
        name="Shadow Trap",
        type="Trap",
        rarity="Uncommon",
        description="When an opponent attacks, reduce their attack by half",
        attributes={"cost": 3},
        created_at="2023-01-16T11:20:00Z",
        updated_at="2023-01-16T11:20:00Z",
    ),
    # Cyber Wars
    Card(
        id="card_101",
        game_id="game_002",
        name="Cyber Soldier",
        type="Monster",
        rarity="Common",
        description="A basic soldier with cybernetic enhancements",
        attributes={"attack": 1000, "defense": 1000, "cost": 3},
        created_at="2023-02-22T10:30:00Z",
        updated_at="2023-02-22T10:30:00Z",
    ),
    Card(
        id="card_102",
        game_id="game_002",
        name="Firewall",
        type="Spell",
        rarity="Rare",
        description="Prevent all damage to your creatures for one turn",
        attributes={"cost": 4},
        created_at="2023-02-22T14:45:00Z",
        updated_at="2023-02-22T14:45:00Z",
    ),
    # Ancient Battles
    Card(
        id="card_201",
        game_id="game_003",
        name="Roman Legionnaire",
        type="Monster",
        rarity="Common",
        description="Disciplined infantry soldier of the Roman Empire",
        attributes={"attack": 800, "defense": 1200, "cost": 2},
        created_at="2023-03-12T09:45:00Z",
        updated_at="2023-03-12T09:45:00Z",
    ),
    Card(
        id="card_202",
        game_id="game_003",
        name="Cavalry Charge",
        type="Spell",
        rarity="Uncommon",
        description="Double the attack of all your mounted units this turn",
        attributes={"cost": 3},
        created_at="2023-03-12T10:30:00Z",
        updated_at="2023-03-12T10:30:00Z",
    ),
)

SEED_DECKS = (
    Deck(
        id="deck_001",
        game_id="game_001",
        creator_id="user_001",
        name="Dragon Dominance",
        description="A powerful dragon-focused deck",
        cards=[
            DeckCard(card_id="card_001", quantity=3),
            DeckCard(card_id="card_002", quantity=2),
            DeckCard(card_id="card_003", quantity=1),
        ],
        card_count=6,
        is_public=True,
        created_at="2023-02-05T14:20:00Z",
        updated_at="2023-03-10T11:45:00Z",
    ),
    Deck(
        id="deck_002",
        game_id="game_002",
        creator_id="user_001",
        name="Cyber Defense",
        description="A defensive cyber deck",
        cards=[
            DeckCard(card_id="card_101", quantity=4),
            DeckCard(card_id="card_102", quantity=2),
        ],
        card_count=6,
        is_public=True,
        created_at="2023-03-15T09:30:00Z",
        updated_at="2023-03-15T09:30:00Z",
    ),
    Deck(
        id="deck_003",
        game_id="game_003",
        creator_id="user_002",
        name="Roman Legion",
        description="A deck focused on Roman military tactics",
        cards=[
            DeckCard(card_id="card_201", quantity=3),
            DeckCard(card_id="card_202", quantity=2),
        ],
        card_count=5,
        is_public=False,
        created_at="2023-04-10T16:45:00Z",
        updated_at="2023-04-10T16:45:00Z",
    ),
)

DEFAULT_SEED = SeedData(games=SEED_GAMES, cards=SEED_CARDS, decks=SEED_DECKS)
