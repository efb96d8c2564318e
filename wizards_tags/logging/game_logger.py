"""Game event logger for following a game step by step."""

import json
import logging
from typing import Any

from pydantic import BaseModel

from wizards_tags.models.card import TagType
from wizards_tags.models.game_state import GameState, PlayedCard
from wizards_tags.models.player import Player

from .formatters import format_card, format_cards, format_hands, format_tags

logger = logging.getLogger(__name__)


class GameLogConfig(BaseModel):
    """Configuration for game event logging."""

    enabled: bool = True
    show_hands: bool = False


class GameLogger:
    """Logger for game events.

    Each event is one JSON object emitted as a single INFO record, so a
    game can be followed (or replayed by eye) from the log. Nothing is
    written anywhere except through the standard logging handlers.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, defaults are used.
        """
        self.config = config or GameLogConfig()

    def _write(self, event: dict[str, Any]) -> None:
        """Emit an event.

        Args:
            event: Event dictionary to log as JSON.
        """
        if self.config.enabled:
            logger.info(json.dumps(event, ensure_ascii=False))

    def log_game_start(self, state: GameState) -> None:
        """Log game start with the table composition."""
        self._write({
            "type": "game_start",
            "game": state.game_id,
            "difficulty": state.difficulty.value,
            "players": [
                {"id": p.player_id, "name": p.name, "bot": p.is_bot}
                for p in state.players
            ],
        })

    def log_round_start(self, state: GameState) -> None:
        """Log round start. Hands are included only with ``show_hands``."""
        record: dict[str, Any] = {
            "type": "round_start",
            "game": state.game_id,
            "round": state.current_round,
            "dealer": state.dealer.player_id if state.dealer else None,
        }
        if self.config.show_hands:
            record["hands"] = format_hands(state.players)
        self._write(record)

    def log_bid(self, state: GameState, player: Player) -> None:
        """Log a player's accepted bid."""
        self._write({
            "type": "bid",
            "game": state.game_id,
            "round": state.current_round,
            "player": player.player_id,
            "black_wizard": player.is_black_wizard,
            "tags": format_tags(player.tags),
        })

    def log_play(self, state: GameState, played: PlayedCard) -> None:
        """Log a card play and the trick so far."""
        self._write({
            "type": "play",
            "game": state.game_id,
            "round": state.current_round,
            "trick": state.trick_count + 1,
            "player": played.player_id,
            "card": format_card(played.card),
            "current_trick": format_cards([p.card for p in state.current_trick]),
        })

    def log_trick_result(
        self,
        state: GameState,
        winner_id: int,
        discarded: TagType | None,
    ) -> None:
        """Log how a trick was settled.

        Args:
            state: Snapshot after settling.
            winner_id: Player who won the trick.
            discarded: Tag the winner discarded, or None for a BLACK penalty.
        """
        winner = state.player_by_id(winner_id)
        self._write({
            "type": "trick_result",
            "game": state.game_id,
            "round": state.current_round,
            "trick": state.trick_count,
            "winner": winner_id,
            "discarded": discarded.value if discarded else None,
            "penalty": discarded is None,
            "tags_after": format_tags(winner.tags) if winner else "",
        })

    def log_round_end(self, state: GameState) -> None:
        """Log round scores."""
        self._write({
            "type": "round_end",
            "game": state.game_id,
            "round": state.current_round,
            "round_scores": {str(p.player_id): p.current_round_score for p in state.players},
            "total_scores": {str(p.player_id): p.total_score for p in state.players},
        })

    def log_game_end(self, state: GameState, ranking: list[Player]) -> None:
        """Log game end with the final ranking (best first)."""
        self._write({
            "type": "game_end",
            "game": state.game_id,
            "ranking": [p.player_id for p in ranking],
            "final_scores": {str(p.player_id): p.total_score for p in state.players},
        })
