from cardsmith.parsers.deck_text import (
    DeckTextLine,
    ParsedDeckText,
    format_deck_text,
    parse_deck_text,
)

__all__ = [
    "DeckTextLine",
    "ParsedDeckText",
    "format_deck_text",
    "parse_deck_text",
]
