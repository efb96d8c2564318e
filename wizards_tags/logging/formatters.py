"""Formatters for game log output."""

from collections.abc import Sequence

from wizards_tags.models.card import Card, CardColor, TagType
from wizards_tags.models.player import Player

# Color codes for log output
COLOR_CODES: dict[CardColor, str] = {
    CardColor.RED: "R",
    CardColor.YELLOW: "Y",
    CardColor.BLUE: "B",
    CardColor.GREEN: "G",
    CardColor.PURPLE: "P",
}

# Tag codes for log output (colors reuse the card codes)
TAG_CODES: dict[TagType, str] = {
    TagType.RED: "R",
    TagType.YELLOW: "Y",
    TagType.BLUE: "B",
    TagType.GREEN: "G",
    TagType.PURPLE: "P",
    TagType.COLORFUL: "C",
    TagType.BLACK: "K",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "R9" for RED-9, "B12" for BLUE-12).
    """
    return f"{COLOR_CODES[card.color]}{card.number}"


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "R9,B7,Y12").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_tags(tags: Sequence[TagType]) -> str:
    """Format tags to a compact string (e.g., "RRBC")."""
    return "".join(TAG_CODES[t] for t in tags)


def format_hands(players: Sequence[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        players: Players in seat order.

    Returns:
        Dict mapping player_id (as string) to formatted hand string.
    """
    return {str(p.player_id): format_cards(p.hand) for p in players}
