"""Bot strategies, one per difficulty."""

from wizards_tags.models.game_state import Difficulty
from wizards_tags.strategy.adversarial import AdversarialStrategy
from wizards_tags.strategy.base import Bid, PlayContext, RandomSource, Strategy
from wizards_tags.strategy.heuristic import HeuristicStrategy
from wizards_tags.strategy.random_bot import RandomStrategy

STRATEGIES: dict[Difficulty, type[Strategy]] = {
    Difficulty.EASY: RandomStrategy,
    Difficulty.MEDIUM: HeuristicStrategy,
    Difficulty.HARD: AdversarialStrategy,
}


def create_strategy(difficulty: Difficulty, rng: RandomSource) -> Strategy:
    """Create the strategy for a difficulty level."""
    return STRATEGIES[difficulty](rng)


__all__ = [
    "AdversarialStrategy",
    "Bid",
    "HeuristicStrategy",
    "PlayContext",
    "RandomSource",
    "RandomStrategy",
    "STRATEGIES",
    "Strategy",
    "create_strategy",
]
