"""Game engine for Wizard's Tags."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from pathlib import Path
from typing import Callable

from wizards_tags.config import Config, load_config
from wizards_tags.logging import GameLogConfig, GameLogger
from wizards_tags.models.card import Card, TagType
from wizards_tags.models.game_state import Difficulty, GamePhase, GameState
from wizards_tags.models.player import Player
from wizards_tags.strategy import Strategy, create_strategy
from wizards_tags.utils.logger import setup_logging
from wizards_tags.utils.random_source import RandomSource

from . import transitions
from .scheduler import ManualScheduler, Scheduler
from .scoring import game_winner, ranking

logger = logging.getLogger(__name__)

StateCallback = Callable[[GameState], None]


class GameEngine:
    """Owner of the current game snapshot.

    The engine is the only writer of game state. Callers act through the
    action API (``initialize_game``, ``claim_role``, ``play_card``,
    ``discard_tag``, ``restart_game``) and observe through ``subscribe``.
    Bot turns, trick evaluation and the next round are scheduled callbacks;
    each one re-reads the current snapshot when it fires and does nothing
    if the game has moved on.
    """

    def __init__(
        self,
        config: Config | None = None,
        scheduler: Scheduler | None = None,
        rng: RandomSource | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            scheduler: Scheduler for delayed callbacks (ManualScheduler if not provided)
            rng: Random source for dealing and bots (seeded from config if not provided)
            game_logger: GameLogger instance for game events
        """
        self.config = config or Config()
        self.timing = self.config.timing
        self.scheduler = scheduler or ManualScheduler()
        self.rng = rng or random.Random(self.config.game.seed)
        self.game_logger = game_logger

        self.strategy: Strategy = create_strategy(self.config.game.difficulty, self.rng)
        self._state = GameState(difficulty=self.config.game.difficulty)
        self._subscribers: list[StateCallback] = []

    @classmethod
    def from_config(
        cls,
        config: Config | Path | str | None = None,
        scheduler: Scheduler | None = None,
        rng: RandomSource | None = None,
    ) -> "GameEngine":
        """Create an engine with logging set up from ``config.logging``.

        Args:
            config: Config object, or path to a YAML config file
            scheduler: Scheduler for delayed callbacks
            rng: Random source

        Returns:
            GameEngine with a GameLogger attached
        """
        if not isinstance(config, Config):
            config = load_config(config)

        setup_logging(config.logging.level)
        game_logger = GameLogger(
            GameLogConfig(
                enabled=config.logging.game_events,
                show_hands=config.logging.show_hands,
            )
        )
        return cls(config, scheduler=scheduler, rng=rng, game_logger=game_logger)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        """Current snapshot (read-only)."""
        return self._state

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Register a callback for every new snapshot.

        Args:
            callback: Called with each committed GameState

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _commit(self, new_state: GameState) -> None:
        """Replace the current snapshot and notify subscribers."""
        self._state = new_state.model_copy(update={"version": self._state.version + 1})
        logger.debug(f"State v{self._state.version}: {self._state}")
        for callback in list(self._subscribers):
            callback(self._state)

    # ------------------------------------------------------------------
    # Action API
    # ------------------------------------------------------------------

    def initialize_game(
        self,
        player_count: int | None = None,
        bot_count: int | None = None,
        difficulty: Difficulty | None = None,
    ) -> None:
        """Start a new game and deal the first round.

        Arguments left as None come from ``config.game``.

        Args:
            player_count: 4 or 5
            bot_count: Number of bots, 0 <= bot_count < player_count
            difficulty: Bot difficulty

        Raises:
            ValueError: If player_count or bot_count is out of range
        """
        game = self.config.game
        player_count = game.player_count if player_count is None else player_count
        bot_count = game.bot_count if bot_count is None else bot_count
        difficulty = game.difficulty if difficulty is None else Difficulty(difficulty)

        state = transitions.new_game(
            player_count,
            bot_count,
            difficulty,
            self.rng,
            game_id=self._state.game_id + 1,
        )
        self.strategy = create_strategy(difficulty, self.rng)

        logger.info(
            f"Game {state.game_id} initialized: {player_count} players, "
            f"{bot_count} bots, {difficulty.name}"
        )
        self._commit(state)
        if self.game_logger:
            self.game_logger.log_game_start(self._state)

        self._start_round(transitions.start_round(self._state, self.rng))

    def restart_game(self) -> None:
        """Start over with the same player count, bots and difficulty."""
        state = self._state
        self.initialize_game(state.player_count, state.bot_count, state.difficulty)

    def claim_role(
        self,
        player_id: int,
        tags: Sequence[TagType],
        wants_black_wizard: bool = False,
    ) -> bool:
        """Claim tags or the Black Wizard role for the current bidder.

        Args:
            player_id: Bidding player
            tags: Tags to claim (BLACK is ignored)
            wants_black_wizard: True to claim the Black Wizard role

        Returns:
            True if accepted, False if ignored (state unchanged)
        """
        state = self._state
        new_state = transitions.claim_role(state, player_id, tags, wants_black_wizard)
        if new_state is state:
            return False

        self._commit(new_state)
        if self.game_logger:
            self.game_logger.log_bid(self._state, self._state.player_by_id(player_id))

        if self._state.game_phase == GamePhase.PLAYING:
            logger.info(
                f"Bidding complete, black wizard: {self._state.black_wizard_id}"
            )
            self._schedule_bot_play()
        else:
            self._schedule_bot_bid()
        return True

    def play_card(self, player_id: int, card: Card) -> bool:
        """Play a card for the current player.

        Args:
            player_id: Player whose turn it is
            card: Card from that player's hand

        Returns:
            True if accepted, False if ignored (state unchanged)
        """
        state = self._state
        new_state = transitions.play_card(state, player_id, card)
        if new_state is state:
            return False

        self._commit(new_state)
        if self.game_logger:
            self.game_logger.log_play(self._state, self._state.current_trick[-1])
        logger.debug(f"Player {player_id} played {card}")

        if self._state.is_trick_complete():
            self._schedule_trick_evaluation()
        else:
            self._schedule_bot_play()
        return True

    def discard_tag(self, player_id: int, tag: TagType) -> bool:
        """Discard an eligible tag after winning a trick.

        Normally driven by the engine itself; a front end calls it when
        ``config.game.auto_discard`` is off and a human won the trick.

        Returns:
            True if accepted, False if ignored (state unchanged)
        """
        state = self._state
        new_state = transitions.discard_tag(state, player_id, tag)
        if new_state is state:
            return False

        self._commit(new_state)
        logger.debug(f"Player {player_id} discarded {tag.name}")
        if self.game_logger:
            self.game_logger.log_trick_result(self._state, player_id, tag)
        self._after_trick()
        return True

    def winner(self) -> Player | None:
        """Player with the highest total score once the game has ended."""
        if self._state.game_phase != GamePhase.GAME_END:
            return None
        return game_winner(self._state.players)

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def _start_round(self, state: GameState) -> None:
        self._commit(state)
        logger.info(
            f"Round {state.current_round}/{state.total_rounds} dealt, "
            f"dealer: player {state.dealer.player_id}"
        )
        if self.game_logger:
            self.game_logger.log_round_start(self._state)
        self._schedule_bot_bid()

    def _settle_trick(self) -> None:
        """Enter TRICK_RESULT, then discard a tag or apply the penalty."""
        state = transitions.resolve_trick(self._state)
        if state is self._state:
            return
        self._commit(state)

        winner_id = state.last_trick_winner_id
        winner = state.player_by_id(winner_id)
        options = transitions.trick_discard_options(state)
        logger.debug(f"Trick {state.trick_count + 1} won by player {winner_id}")

        if not options:
            self._commit(transitions.apply_black_penalty(state, winner_id))
            logger.info(f"Player {winner_id} takes a BLACK tag")
            if self.game_logger:
                self.game_logger.log_trick_result(self._state, winner_id, None)
            self._after_trick()
            return

        if winner.is_bot or self.config.game.auto_discard:
            self.discard_tag(winner_id, options[0])
        # Otherwise wait for the human winner to call discard_tag

    def _after_trick(self) -> None:
        state = self._state
        if state.game_phase == GamePhase.ROUND_END:
            self._end_round()
        else:
            self._schedule_bot_play()

    def _end_round(self) -> None:
        state = self._state
        logger.info(
            f"Round {state.current_round} ended: "
            + ", ".join(f"P{p.player_id}={p.current_round_score}" for p in state.players)
        )
        if self.game_logger:
            self.game_logger.log_round_end(state)

        if state.current_round >= state.total_rounds:
            self._commit(transitions.finish_game(state))
            winner = self.winner()
            logger.info(f"Game {state.game_id} over, winner: {winner}")
            if self.game_logger:
                self.game_logger.log_game_end(self._state, ranking(self._state.players))
            return

        self.scheduler.call_later(
            self.timing.round_end_delay,
            self._make_next_round_callback(state),
        )

    # ------------------------------------------------------------------
    # Scheduled callbacks
    # ------------------------------------------------------------------

    def _schedule_bot_bid(self) -> None:
        state = self._state
        bidder = state.bidding_player
        if state.game_phase != GamePhase.BIDDING or bidder is None or not bidder.is_bot:
            return

        game_id, player_id = state.game_id, bidder.player_id

        def run() -> None:
            current = self._state
            if (
                current.game_id != game_id
                or current.game_phase != GamePhase.BIDDING
                or current.bidding_player is None
                or current.bidding_player.player_id != player_id
            ):
                logger.debug(f"Stale bid callback for player {player_id} ignored")
                return

            player = current.bidding_player
            bid = self.strategy.select_bid(player.hand, current.black_wizard_id is None)
            self.claim_role(player_id, bid.tags, bid.wants_black_wizard)

        self.scheduler.call_later(self.timing.bot_bid_delay, run)

    def _schedule_bot_play(self) -> None:
        state = self._state
        player = state.current_player
        if (
            state.game_phase != GamePhase.PLAYING
            or state.is_trick_complete()
            or player is None
            or not player.is_bot
        ):
            return

        game_id, player_id = state.game_id, player.player_id
        round_number, trick_count = state.current_round, state.trick_count

        def run() -> None:
            current = self._state
            if (
                current.game_id != game_id
                or current.game_phase != GamePhase.PLAYING
                or current.current_round != round_number
                or current.trick_count != trick_count
                or current.current_player is None
                or current.current_player.player_id != player_id
            ):
                logger.debug(f"Stale play callback for player {player_id} ignored")
                return

            bot = current.current_player
            card = self.strategy.select_play(
                bot.hand, current.current_trick, bot.tags, bot.is_black_wizard
            )
            self.play_card(player_id, card)

        self.scheduler.call_later(self.timing.bot_play_delay, run)

    def _schedule_trick_evaluation(self) -> None:
        state = self._state
        game_id = state.game_id
        round_number, trick_count = state.current_round, state.trick_count

        def run() -> None:
            current = self._state
            if (
                current.game_id != game_id
                or current.game_phase != GamePhase.PLAYING
                or current.current_round != round_number
                or current.trick_count != trick_count
                or not current.is_trick_complete()
            ):
                logger.debug("Stale trick evaluation ignored")
                return
            self._settle_trick()

        self.scheduler.call_later(self.timing.trick_result_delay, run)

    def _make_next_round_callback(self, state: GameState) -> Callable[[], None]:
        game_id, round_number = state.game_id, state.current_round

        def run() -> None:
            current = self._state
            if (
                current.game_id != game_id
                or current.game_phase != GamePhase.ROUND_END
                or current.current_round != round_number
            ):
                logger.debug("Stale next-round callback ignored")
                return
            self._start_round(transitions.advance_round(current, self.rng))

        return run
