"""Game models."""

from .card import (
    COLOR_TAGS,
    Card,
    CardColor,
    TagType,
    create_full_deck,
    hand_size_for,
)
from .game_state import Difficulty, GamePhase, GameState, PlayedCard
from .player import Player

__all__ = [
    "COLOR_TAGS",
    "Card",
    "CardColor",
    "TagType",
    "create_full_deck",
    "hand_size_for",
    "Difficulty",
    "GamePhase",
    "GameState",
    "PlayedCard",
    "Player",
]
