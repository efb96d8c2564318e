"""Hand analysis helpers shared by the bot strategies.

All selections are stable: when several cards share the lowest or highest
number, the first one in hand order wins.
"""

from collections.abc import Sequence

from wizards_tags.game.validator import discardable_tags
from wizards_tags.models.card import MAX_NUMBER, Card, CardColor, TagType


def count_by_color(hand: Sequence[Card]) -> dict[CardColor, int]:
    """Count cards per color (every color present, zero if absent)."""
    counts = {color: 0 for color in CardColor}
    for card in hand:
        counts[card.color] += 1
    return counts


def cards_of_color(cards: Sequence[Card], color: CardColor) -> list[Card]:
    return [c for c in cards if c.color == color]


def non_red(cards: Sequence[Card]) -> list[Card]:
    return [c for c in cards if not c.is_red]


def lowest(cards: Sequence[Card]) -> Card:
    """Lowest-numbered card (first one on ties)."""
    return min(cards, key=lambda c: c.number)


def highest(cards: Sequence[Card]) -> Card:
    """Highest-numbered card (first one on ties)."""
    return max(cards, key=lambda c: c.number)


def at_sorted_index(cards: Sequence[Card], divisor: int) -> Card:
    """Card at ``len(cards) // divisor`` after a stable sort by number.

    ``divisor=2`` gives the median card, ``divisor=3`` a low-but-not-lowest one.
    """
    ordered = sorted(cards, key=lambda c: c.number)
    return ordered[len(ordered) // divisor]


def beating(cards: Sequence[Card], number: int) -> list[Card]:
    """Cards with a number strictly above ``number``."""
    return [c for c in cards if c.number > number]


def below(cards: Sequence[Card], number: int) -> list[Card]:
    """Cards with a number strictly below ``number``."""
    return [c for c in cards if c.number < number]


def can_discard_if_win(
    tags: Sequence[TagType],
    lead_card: Card,
    winning_color: CardColor,
) -> bool:
    """Check if winning the trick with a card of ``winning_color`` frees a tag.

    Eligibility only depends on the winning color, so a representative
    card of that color is checked against the discard rule.
    """
    representative = Card(color=winning_color, number=MAX_NUMBER)
    return bool(discardable_tags(tags, lead_card, representative))
