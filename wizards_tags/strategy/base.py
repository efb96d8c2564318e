"""Base strategy class for bot players.

Defines the interface that all bot difficulties must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from wizards_tags.game.validator import playable_cards
from wizards_tags.models.card import Card, TagType
from wizards_tags.models.game_state import PlayedCard
from wizards_tags.utils.random_source import RandomSource


@dataclass(frozen=True)
class Bid:
    """A bidding decision: tags to claim, or the Black Wizard role."""

    tags: tuple[TagType, ...] = ()
    wants_black_wizard: bool = False


@dataclass(frozen=True)
class PlayContext:
    """Everything a strategy may look at when choosing a card.

    Fields:
    - hand: Full hand in hand order
    - playable: Legal cards (subsequence of hand)
    - lead_card: First card of the trick, None when leading
    - trick: Plays so far in the current trick
    - tags: Tags currently held
    - is_black_wizard: True if playing the Black Wizard role
    """

    hand: tuple[Card, ...]
    playable: tuple[Card, ...]
    lead_card: Card | None = None
    trick: tuple[PlayedCard, ...] = field(default_factory=tuple)
    tags: tuple[TagType, ...] = field(default_factory=tuple)
    is_black_wizard: bool = False


class Strategy(ABC):
    """Abstract base class for bot strategies.

    All difficulties inherit from this class and implement bidding,
    leading and following.
    """

    def __init__(self, rng: RandomSource):
        """Initialize strategy.

        Args:
            rng: Random source for probability-gated decisions
        """
        self.rng = rng

    @abstractmethod
    def select_bid(self, hand: Sequence[Card], black_wizard_available: bool) -> Bid:
        """Choose tags to claim, or claim the Black Wizard role.

        Args:
            hand: Bot's hand after the deal
            black_wizard_available: True if nobody holds the Black Wizard role yet

        Returns:
            Bid decision
        """

    @abstractmethod
    def select_lead(self, context: PlayContext) -> Card:
        """Select a card when opening a trick (no lead card yet).

        Args:
            context: Play context, ``context.lead_card`` is None

        Returns:
            Card from ``context.playable``
        """

    @abstractmethod
    def select_follow(self, context: PlayContext) -> Card:
        """Select a card when following the lead card.

        Args:
            context: Play context with a lead card and a non-empty trick

        Returns:
            Card from ``context.playable``
        """

    def select_play(
        self,
        hand: Sequence[Card],
        trick: Sequence[PlayedCard],
        tags: Sequence[TagType],
        is_black_wizard: bool,
    ) -> Card:
        """Select a card to play based on the current trick.

        Dispatches to select_lead or select_follow depending on whether the
        trick already has a lead card.

        Args:
            hand: Bot's hand, in hand order
            trick: Plays so far in the current trick
            tags: Tags currently held
            is_black_wizard: True if playing the Black Wizard role

        Returns:
            Card to play
        """
        lead_card = trick[0].card if trick else None
        context = PlayContext(
            hand=tuple(hand),
            playable=tuple(playable_cards(hand, lead_card)),
            lead_card=lead_card,
            trick=tuple(trick),
            tags=tuple(tags),
            is_black_wizard=is_black_wizard,
        )
        if not context.playable:
            raise ValueError("Cannot select a card from an empty hand")

        if lead_card is None:
            return self.select_lead(context)
        return self.select_follow(context)
