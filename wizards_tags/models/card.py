"""Card, color and tag models."""

from enum import Enum

from pydantic import BaseModel, Field


class CardColor(str, Enum):
    """Card color. RED is the permanent trump."""

    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"


MIN_NUMBER = 1
MAX_NUMBER = 15

# Cards dealt to each player per round, keyed by player count
HAND_SIZES = {4: 12, 5: 15}

# Point value of one instance of each tag
TAG_POINTS = {
    "red": -2,
    "yellow": -2,
    "blue": -2,
    "green": -2,
    "purple": -2,
    "colorful": -3,
    "black": -4,
}


class TagType(str, Enum):
    """Claimable tag. BLACK is only ever awarded as a penalty."""

    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    COLORFUL = "colorful"
    BLACK = "black"

    @property
    def points(self) -> int:
        """Score value of a single tag of this type."""
        return TAG_POINTS[self.value]

    @classmethod
    def from_card_color(cls, color: CardColor) -> "TagType":
        """Get the color tag matching a card color."""
        return COLOR_TO_TAG[color]

    @classmethod
    def selectable(cls) -> list["TagType"]:
        """Tags a player may claim during bidding."""
        return [t for t in cls if t != cls.BLACK]


COLOR_TO_TAG: dict[CardColor, TagType] = {
    CardColor.RED: TagType.RED,
    CardColor.YELLOW: TagType.YELLOW,
    CardColor.BLUE: TagType.BLUE,
    CardColor.GREEN: TagType.GREEN,
    CardColor.PURPLE: TagType.PURPLE,
}

# The five color tags, in card color order
COLOR_TAGS: list[TagType] = [COLOR_TO_TAG[c] for c in CardColor]


class Card(BaseModel, frozen=True):
    """Single card representation."""

    color: CardColor
    number: int = Field(ge=MIN_NUMBER, le=MAX_NUMBER)

    @property
    def is_red(self) -> bool:
        """Check if this card is a trump."""
        return self.color == CardColor.RED

    def is_same_color(self, other: "Card") -> bool:
        """Check if another card has the same color."""
        return self.color == other.color

    def __str__(self) -> str:
        return f"{self.color.name}-{self.number}"

    def __repr__(self) -> str:
        return str(self)


def create_full_deck() -> list[Card]:
    """Create the full 75-card deck (5 colors x 15 numbers).

    Returns:
        Cards ordered by color, then number.
    """
    return [
        Card(color=color, number=number)
        for color in CardColor
        for number in range(MIN_NUMBER, MAX_NUMBER + 1)
    ]


def hand_size_for(player_count: int) -> int:
    """Get the number of cards dealt to each player.

    Args:
        player_count: Number of players at the table (4 or 5).

    Returns:
        12 for four players, 15 for five players.

    Raises:
        ValueError: If the player count is not supported.
    """
    try:
        return HAND_SIZES[player_count]
    except KeyError:
        raise ValueError(f"Player count must be 4 or 5, got {player_count}") from None
