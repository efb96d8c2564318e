"""Game rules: validation and scoring.

The engine lives in ``wizards_tags.game.engine`` and is imported from there
(the bot strategies depend on the validator, and the engine on the bots).
"""

from .scoring import apply_round_scores, game_winner, ranking, round_score, tags_score
from .validator import (
    MoveValidator,
    ValidationResult,
    discardable_tags,
    evaluate_trick_winner,
    is_playable,
    needs_black_penalty,
    playable_cards,
)

__all__ = [
    "MoveValidator",
    "ValidationResult",
    "apply_round_scores",
    "discardable_tags",
    "evaluate_trick_winner",
    "game_winner",
    "is_playable",
    "needs_black_penalty",
    "playable_cards",
    "ranking",
    "round_score",
    "tags_score",
]
