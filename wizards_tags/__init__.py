"""Wizard's Tags: rules engine and bot opponents for a trick-taking card game."""

from wizards_tags.config import Config, load_config
from wizards_tags.game.engine import GameEngine
from wizards_tags.game.scheduler import AsyncioScheduler, ManualScheduler
from wizards_tags.models import (
    Card,
    CardColor,
    Difficulty,
    GamePhase,
    GameState,
    Player,
    TagType,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncioScheduler",
    "Card",
    "CardColor",
    "Config",
    "Difficulty",
    "GameEngine",
    "GamePhase",
    "GameState",
    "ManualScheduler",
    "Player",
    "TagType",
    "load_config",
]
