"""Hard strategy: probabilistic bidding and tag-aware card play.

Bidding scales the chance of claiming a color with how much of the hand it
covers. Card play depends on the role:

- A Black Wizard wants to lose tricks, and especially to leave them to
  players who cannot discard anything (each such trick pays its bonus).
- A normal player only wants to win a trick when winning lets it discard
  one of its tags, and does so with the cheapest winning card.
"""

from collections.abc import Sequence

from wizards_tags.game.validator import evaluate_trick_winner
from wizards_tags.models.card import Card, CardColor, TagType

from .analyzer import (
    at_sorted_index,
    beating,
    below,
    can_discard_if_win,
    cards_of_color,
    count_by_color,
    highest,
    lowest,
    non_red,
)
from .base import Bid, PlayContext, Strategy

BLACK_WIZARD_CHANCE = 0.5
MIDDLE_COLOR_CHANCE = 0.4
COLORFUL_CHANCE = 0.4

STRONG_COLOR_MIN = 3
WEAK_COLOR_MAX = 1
RED_TAG_MIN = 4


class AdversarialStrategy(Strategy):
    """Hard bot."""

    def select_bid(self, hand: Sequence[Card], black_wizard_available: bool) -> Bid:
        """Bid in proportion to the hand's color distribution.

        - Few strong colors and many weak ones: Black Wizard with 50% chance.
        - Strong colors (3+ cards): claimed with probability 2 * count / hand size.
        - Middle colors (2-3 cards): claimed with 40% chance if not already chosen.
        - RED with 4+ cards (trumps win tricks): always claimed.
        - With 2+ tags chosen: COLORFUL added with 40% chance.
        - Nothing chosen: the best represented color.
        """
        counts = count_by_color(hand)
        total = len(hand)

        strong = {color: n for color, n in counts.items() if n >= STRONG_COLOR_MIN}
        weak = {color: n for color, n in counts.items() if n <= WEAK_COLOR_MAX}

        if black_wizard_available and len(strong) <= 1 and len(weak) >= 3:
            if self.rng.random() < BLACK_WIZARD_CHANCE:
                return Bid(wants_black_wizard=True)

        tags: list[TagType] = []

        for color, count in strong.items():
            probability = min(1.0, 2.0 * count / total)
            if self.rng.random() < probability:
                tags.append(TagType.from_card_color(color))

        for color, count in counts.items():
            if 2 <= count <= 3:
                tag = TagType.from_card_color(color)
                if self.rng.random() < MIDDLE_COLOR_CHANCE and tag not in tags:
                    tags.append(tag)

        if counts[CardColor.RED] >= RED_TAG_MIN and TagType.RED not in tags:
            tags.append(TagType.RED)

        if len(tags) >= 2 and self.rng.random() < COLORFUL_CHANCE:
            tags.append(TagType.COLORFUL)

        if not tags:
            best_color = max(counts, key=lambda color: counts[color])
            tags.append(TagType.from_card_color(best_color))

        return Bid(tags=tuple(tags))

    def select_lead(self, context: PlayContext) -> Card:
        playable = context.playable

        if context.is_black_wizard:
            # Low but not the lowest, so losing is less obvious
            return at_sorted_index(playable, 3)

        tagged = [
            c
            for c in playable
            if TagType.from_card_color(c.color) in context.tags
            or TagType.COLORFUL in context.tags
        ]
        if tagged:
            return highest(tagged)

        return at_sorted_index(playable, 2)

    def select_follow(self, context: PlayContext) -> Card:
        winner = evaluate_trick_winner(context.trick)
        if winner is None or context.lead_card is None:
            return at_sorted_index(context.playable, 2)

        if context.is_black_wizard:
            return self._follow_as_black_wizard(context, winner.card)
        return self._follow_as_normal(context, winner.card)

    def _follow_as_black_wizard(self, context: PlayContext, winning: Card) -> Card:
        """Try to lose the trick."""
        playable = context.playable
        lead_card = context.lead_card
        reds = cards_of_color(playable, CardColor.RED)

        if winning.is_red:
            if reds:
                losing_reds = below(reds, winning.number)
                if losing_reds:
                    return highest(losing_reds)
                return lowest(reds)
            return lowest(playable)

        if reds:
            others = non_red(playable)
            if others:
                return lowest(others)
            return lowest(reds)

        losing = below(cards_of_color(playable, lead_card.color), winning.number)
        if losing:
            return losing[0]
        return lowest(playable)

    def _follow_as_normal(self, context: PlayContext, winning: Card) -> Card:
        """Win only when winning frees a tag, otherwise dump the lowest card."""
        playable = context.playable
        lead_card = context.lead_card

        can_discard_with_red = can_discard_if_win(context.tags, lead_card, CardColor.RED)
        can_discard_with_lead = can_discard_if_win(context.tags, lead_card, lead_card.color)

        reds = cards_of_color(playable, CardColor.RED)
        same_color = cards_of_color(playable, lead_card.color)

        if winning.is_red:
            if can_discard_with_red and reds:
                winning_reds = beating(reds, winning.number)
                if winning_reds:
                    return lowest(winning_reds)
            return lowest(playable)

        if reds:
            # Holding RED here means void in the lead color, and a RED win
            # frees at least every tag a lead-color win would
            if can_discard_with_red:
                return lowest(reds)

            others = non_red(playable)
            if not others:
                return lowest(reds)
            return lowest(others)

        if can_discard_with_lead and same_color:
            winning_same = beating(same_color, winning.number)
            if winning_same:
                return lowest(winning_same)
        return lowest(playable)
