"""Player model."""

from pydantic import BaseModel

from .card import Card, CardColor, TagType


class Player(BaseModel, frozen=True):
    """Player state at the table.

    Snapshots are immutable; the engine replaces a player with
    ``model_copy(update=...)`` whenever its hand, tags or score change.
    """

    player_id: int
    name: str = "Player"
    is_bot: bool = False

    # Round state
    hand: tuple[Card, ...] = ()
    tags: tuple[TagType, ...] = ()  # Multiset, duplicates allowed
    is_black_wizard: bool = False
    black_wizard_bonus: int = 0

    # Scores
    current_round_score: int = 0
    total_score: int = 0

    @property
    def has_bid(self) -> bool:
        """Check if the player has claimed a role this round."""
        return self.is_black_wizard or len(self.tags) > 0

    def has_color(self, color: CardColor) -> bool:
        """Check if the hand holds any card of a color."""
        return any(c.color == color for c in self.hand)

    def has_tag(self, tag: TagType) -> bool:
        """Check if the player holds at least one tag of a type."""
        return tag in self.tags

    def cards_by_color(self, color: CardColor) -> list[Card]:
        """Get all hand cards of a color, in hand order."""
        return [c for c in self.hand if c.color == color]

    def reset_for_new_round(self, hand: tuple[Card, ...]) -> "Player":
        """Return a copy with a fresh hand and cleared round state."""
        return self.model_copy(
            update={
                "hand": hand,
                "tags": (),
                "current_round_score": 0,
                "is_black_wizard": False,
                "black_wizard_bonus": 0,
            }
        )

    def __str__(self) -> str:
        role = " (black wizard)" if self.is_black_wizard else ""
        return f"Player{self.player_id}[{self.name}]{role}"
