"""Game state models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from .card import Card, hand_size_for
from .player import Player


class GamePhase(str, Enum):
    """Phase of the game state machine."""

    SETUP = "setup"
    BIDDING = "bidding"  # Players claim tags or the Black Wizard role
    PLAYING = "playing"
    TRICK_RESULT = "trick_result"  # Winner discards a tag or takes a penalty
    ROUND_END = "round_end"
    GAME_END = "game_end"


class Difficulty(str, Enum):
    """Bot difficulty, selected once per game."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PlayedCard(BaseModel, frozen=True):
    """A card in the current trick together with who played it."""

    player_id: int
    card: Card

    def __str__(self) -> str:
        return f"P{self.player_id}:{self.card}"


class GameState(BaseModel, frozen=True):
    """Immutable snapshot of a whole game.

    The engine owns the current snapshot and is the only writer. Every
    transition builds a new snapshot; nothing is mutated in place.
    """

    # Session identity
    game_id: int = 0
    version: int = 0

    # Configuration
    player_count: int = 4
    total_rounds: int = 4
    bot_count: int = 0
    difficulty: Difficulty = Difficulty.HARD

    players: tuple[Player, ...] = ()

    # Round progress
    current_round: int = 1  # 1-based
    dealer_index: int = 0
    game_phase: GamePhase = GamePhase.SETUP

    # Bidding
    bidding_player_index: int = 0
    black_wizard_id: int | None = None

    # Playing
    current_trick: tuple[PlayedCard, ...] = ()
    current_player_index: int = 0
    trick_count: int = 0

    # Trick result
    last_trick_winner_id: int | None = None
    pending_discard_player_id: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_total_rounds(cls, data: Any) -> Any:
        if isinstance(data, dict) and "total_rounds" not in data:
            data = {**data, "total_rounds": data.get("player_count", 4)}
        return data

    @field_validator("player_count")
    @classmethod
    def _check_player_count(cls, value: int) -> int:
        hand_size_for(value)
        return value

    @model_validator(mode="after")
    def _check_round(self) -> "GameState":
        if not 1 <= self.current_round <= self.total_rounds:
            raise ValueError(
                f"current_round {self.current_round} outside 1..{self.total_rounds}"
            )
        return self

    @model_validator(mode="after")
    def _check_trick_bounds(self) -> "GameState":
        if len(self.current_trick) > self.player_count:
            raise ValueError(
                f"Trick holds {len(self.current_trick)} cards for {self.player_count} players"
            )
        if not 0 <= self.trick_count <= self.hand_size:
            raise ValueError(f"trick_count {self.trick_count} outside 0..{self.hand_size}")
        return self

    @property
    def hand_size(self) -> int:
        """Cards dealt per player (12 for 4 players, 15 for 5)."""
        return hand_size_for(self.player_count)

    @property
    def current_player(self) -> Player | None:
        """Player whose turn it is to play a card."""
        return self._player_at(self.current_player_index)

    @property
    def bidding_player(self) -> Player | None:
        """Player whose turn it is to claim a role."""
        return self._player_at(self.bidding_player_index)

    @property
    def dealer(self) -> Player | None:
        return self._player_at(self.dealer_index)

    @property
    def lead_card(self) -> Card | None:
        """First card of the current trick, if any."""
        if not self.current_trick:
            return None
        return self.current_trick[0].card

    def _player_at(self, index: int) -> Player | None:
        if 0 <= index < len(self.players):
            return self.players[index]
        return None

    def player_by_id(self, player_id: int) -> Player | None:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def seat_of(self, player_id: int) -> int:
        """Get the seat index of a player (-1 if unknown)."""
        for index, player in enumerate(self.players):
            if player.player_id == player_id:
                return index
        return -1

    def all_players_bid(self) -> bool:
        """Check if every player is a Black Wizard or holds a tag."""
        return all(p.has_bid for p in self.players)

    def is_trick_complete(self) -> bool:
        return len(self.current_trick) == self.player_count

    def is_round_complete(self) -> bool:
        return self.trick_count >= self.hand_size

    def is_game_over(self) -> bool:
        return self.game_phase == GamePhase.GAME_END

    def replace_player(self, player: Player) -> tuple[Player, ...]:
        """Build a players tuple with one player swapped in by id."""
        return tuple(
            player if p.player_id == player.player_id else p for p in self.players
        )

    def __str__(self) -> str:
        parts = [
            f"Round {self.current_round}/{self.total_rounds}",
            f"[{self.game_phase.name}]",
            f"trick {self.trick_count}/{self.hand_size}",
        ]
        if self.black_wizard_id is not None:
            parts.append(f"black wizard P{self.black_wizard_id}")
        return " ".join(parts)
