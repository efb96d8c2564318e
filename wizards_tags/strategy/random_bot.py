"""Easy strategy: uniform random choices."""

from collections.abc import Sequence

from wizards_tags.models.card import COLOR_TAGS, Card

from .base import Bid, PlayContext, Strategy

BLACK_WIZARD_CHANCE = 0.1


class RandomStrategy(Strategy):
    """Random bot.

    - Bid: 1-3 distinct color tags, or the Black Wizard role with a flat 10% chance
    - Play: uniformly among playable cards
    """

    def select_bid(self, hand: Sequence[Card], black_wizard_available: bool) -> Bid:
        if black_wizard_available and self.rng.random() < BLACK_WIZARD_CHANCE:
            return Bid(wants_black_wizard=True)

        tag_count = self.rng.randint(1, 3)
        return Bid(tags=tuple(self.rng.sample(COLOR_TAGS, tag_count)))

    def select_lead(self, context: PlayContext) -> Card:
        return self.rng.choice(context.playable)

    def select_follow(self, context: PlayContext) -> Card:
        return self.rng.choice(context.playable)
