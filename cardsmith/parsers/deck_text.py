"""
Plain-text deck list format.

Format:
    # <deck name> - <game title>

    <quantity>x <card name> (<card type>)

Example:
    # Dragon Dominance - Fantasy Realms

    3x Dragon Knight (Monster)
    2x Magic Barrier (Spell)

The type suffix is optional when parsing. Lines that match nothing are
skipped.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

# Pattern: "# Dragon Dominance - Fantasy Realms"
HEADER_PATTERN = re.compile(r"^#\s*(.+)$")

# Pattern: "3x Dragon Knight (Monster)" or "3x Dragon Knight" / "3 x Dragon Knight"
# Groups: (quantity, card_name, card_type)
CARD_LINE_PATTERN = re.compile(r"^(\d+)\s*[xX]\s+(.+?)(?:\s+\(([^()]*)\))?$")

TITLE_SEPARATOR = " - "


@dataclass(frozen=True, slots=True)
class DeckTextLine:
    """One card line of a text deck list."""

    quantity: int
    name: str
    type: str | None = None


@dataclass
class ParsedDeckText:
    """Result of parsing a text deck list."""

    name: str | None = None
    game: str | None = None
    cards: list[DeckTextLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.name is None and not self.cards

    def to_import_payload(self) -> dict[str, Any]:
        """Shape the parsed list like a name-keyed JSON import."""
        payload: dict[str, Any] = {
            "cards": [{"name": line.name, "quantity": line.quantity} for line in self.cards],
        }
        if self.name is not None:
            payload["name"] = self.name
        return payload


def format_deck_text(deck_name: str, game_title: str, lines: Iterable[DeckTextLine]) -> str:
    """Render a deck list in the text format."""
    header = f"# {deck_name}{TITLE_SEPARATOR}{game_title}"
    body = "\n".join(_format_card_line(line) for line in lines)
    return f"{header}\n\n{body}"


def _format_card_line(line: DeckTextLine) -> str:
    if line.type is None:
        return f"{line.quantity}x {line.name}"
    return f"{line.quantity}x {line.name} ({line.type})"


def parse_deck_text(text: str) -> ParsedDeckText:
    """
    Parse a text deck list.

    The first header line names the deck; the game title is whatever follows
    the last " - " separator. Card lines with a zero quantity are dropped.
    """
    parsed = ParsedDeckText()
    if not text or not text.strip():
        return parsed

    for raw_line in text.strip().splitlines():
        line = raw_line.strip()
        if not line:
            continue

        header = HEADER_PATTERN.match(line)
        if header:
            if parsed.name is None:
                title = header.group(1).strip()
                name, separator, game = title.rpartition(TITLE_SEPARATOR)
                if separator:
                    parsed.name, parsed.game = name.strip(), game.strip()
                else:
                    parsed.name = title
            continue

        match = CARD_LINE_PATTERN.match(line)
        if match:
            quantity, name, card_type = match.groups()
            if int(quantity) > 0:
                parsed.cards.append(DeckTextLine(int(quantity), name.strip(), card_type))

    return parsed
