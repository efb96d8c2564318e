"""Medium strategy: simple hand-shape heuristics.

Strategy:
- Bid: claim the tag of every color in hand, sometimes COLORFUL as well.
  With a ragged hand (two or more colors with at most one card) the bot may
  take the Black Wizard role instead.
- Lead: median card
- Follow (Black Wizard): lowest card, trying to lose
- Follow (normal): highest card, trying to win
"""

from collections.abc import Sequence

from wizards_tags.models.card import Card, TagType

from .analyzer import at_sorted_index, count_by_color, highest, lowest
from .base import Bid, PlayContext, Strategy

BLACK_WIZARD_CHANCE = 0.3
COLORFUL_CHANCE = 0.3

# Colors with at most this many cards count as poor
POOR_COLOR_MAX = 1


class HeuristicStrategy(Strategy):
    """Medium bot."""

    def select_bid(self, hand: Sequence[Card], black_wizard_available: bool) -> Bid:
        counts = count_by_color(hand)

        poor_colors = sum(1 for count in counts.values() if count <= POOR_COLOR_MAX)
        if (
            black_wizard_available
            and poor_colors >= 2
            and self.rng.random() < BLACK_WIZARD_CHANCE
        ):
            return Bid(wants_black_wizard=True)

        tags = [TagType.from_card_color(color) for color, count in counts.items() if count > 0]

        if self.rng.random() < COLORFUL_CHANCE:
            tags.append(TagType.COLORFUL)

        return Bid(tags=tuple(tags))

    def select_lead(self, context: PlayContext) -> Card:
        return at_sorted_index(context.playable, 2)

    def select_follow(self, context: PlayContext) -> Card:
        if context.is_black_wizard:
            return lowest(context.playable)
        return highest(context.playable)
