"""Pure state transitions.

Every function takes a snapshot and returns a new one. An action that is
rejected returns the very same snapshot object, so callers can detect a
no-op with ``new_state is state``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from wizards_tags.models.card import Card, TagType, create_full_deck, hand_size_for
from wizards_tags.models.game_state import Difficulty, GamePhase, GameState, PlayedCard
from wizards_tags.models.player import Player
from wizards_tags.utils.random_source import RandomSource

from .scoring import apply_round_scores
from .validator import (
    MoveValidator,
    discardable_tags,
    evaluate_trick_winner,
)

logger = logging.getLogger(__name__)

HUMAN_PLAYER_ID = 0

_validator = MoveValidator()


def new_game(
    player_count: int,
    bot_count: int,
    difficulty: Difficulty,
    rng: RandomSource,
    game_id: int = 1,
) -> GameState:
    """Build the SETUP snapshot for a new game.

    Player 0 is the local human. Players 1..bot_count are bots; any seat
    left over is another human seat.

    Args:
        player_count: 4 or 5
        bot_count: Number of bots, 0 <= bot_count < player_count
        difficulty: Bot difficulty for the whole game
        rng: Random source (picks the first dealer)
        game_id: Session identifier for this game

    Returns:
        Snapshot in SETUP phase

    Raises:
        ValueError: If player_count or bot_count is out of range
    """
    hand_size_for(player_count)
    if not 0 <= bot_count < player_count:
        raise ValueError(
            f"Bot count must be in 0..{player_count - 1}, got {bot_count}"
        )

    players = [Player(player_id=HUMAN_PLAYER_ID, name="You", is_bot=False)]
    for pid in range(1, player_count):
        is_bot = pid <= bot_count
        name = f"Bot {pid}" if is_bot else f"Player {pid}"
        players.append(Player(player_id=pid, name=name, is_bot=is_bot))

    return GameState(
        game_id=game_id,
        player_count=player_count,
        total_rounds=player_count,
        bot_count=bot_count,
        difficulty=difficulty,
        players=tuple(players),
        dealer_index=rng.randint(0, player_count - 1),
        game_phase=GamePhase.SETUP,
    )


def deal(player_count: int, rng: RandomSource) -> list[tuple[Card, ...]]:
    """Shuffle a fresh deck and deal one contiguous share per player."""
    cards = create_full_deck()
    rng.shuffle(cards)

    size = hand_size_for(player_count)
    return [tuple(cards[i * size:(i + 1) * size]) for i in range(player_count)]


def start_round(state: GameState, rng: RandomSource) -> GameState:
    """Deal a new round and open bidding at the dealer."""
    hands = deal(state.player_count, rng)
    players = tuple(
        player.reset_for_new_round(hand) for player, hand in zip(state.players, hands)
    )

    return state.model_copy(
        update={
            "players": players,
            "game_phase": GamePhase.BIDDING,
            "bidding_player_index": state.dealer_index,
            "black_wizard_id": None,
            "current_trick": (),
            "current_player_index": state.dealer_index,
            "trick_count": 0,
            "last_trick_winner_id": None,
            "pending_discard_player_id": None,
        }
    )


def claim_role(
    state: GameState,
    player_id: int,
    tags: Sequence[TagType],
    wants_black_wizard: bool,
) -> GameState:
    """Apply a bid by the current bidder.

    Args:
        state: Current snapshot
        player_id: Bidding player
        tags: Tags to claim (BLACK entries are dropped)
        wants_black_wizard: True to claim the Black Wizard role

    Returns:
        New snapshot, or ``state`` itself if the bid is rejected
    """
    result = _validator.validate_claim(state, player_id, wants_black_wizard)
    if not result.is_valid:
        logger.debug(f"Claim rejected: {result.error_message}")
        return state

    player = state.player_by_id(player_id)
    black_wizard_id = state.black_wizard_id

    if wants_black_wizard:
        player = player.model_copy(update={"is_black_wizard": True, "tags": ()})
        black_wizard_id = player_id
    else:
        claimed = tuple(t for t in tags if t != TagType.BLACK)
        player = player.model_copy(update={"is_black_wizard": False, "tags": claimed})
        if black_wizard_id == player_id:
            black_wizard_id = None

    updated = state.model_copy(
        update={
            "players": state.replace_player(player),
            "black_wizard_id": black_wizard_id,
            "bidding_player_index": (state.bidding_player_index + 1) % state.player_count,
        }
    )

    if updated.all_players_bid():
        return updated.model_copy(
            update={
                "game_phase": GamePhase.PLAYING,
                "current_player_index": state.dealer_index,
            }
        )
    return updated


def play_card(state: GameState, player_id: int, card: Card) -> GameState:
    """Play a card from the current player's hand into the trick.

    The turn passes to the next seat unless the trick is now full, in which
    case the snapshot waits for ``resolve_trick``.

    Returns:
        New snapshot, or ``state`` itself if the play is rejected
    """
    result = _validator.validate_play(state, player_id, card)
    if not result.is_valid:
        logger.debug(f"Play rejected: {result.error_message}")
        return state

    player = state.player_by_id(player_id)
    hand = list(player.hand)
    hand.remove(card)
    player = player.model_copy(update={"hand": tuple(hand)})

    trick = state.current_trick + (PlayedCard(player_id=player_id, card=card),)
    update: dict = {"players": state.replace_player(player), "current_trick": trick}
    if len(trick) < state.player_count:
        update["current_player_index"] = (state.current_player_index + 1) % state.player_count

    return state.model_copy(update=update)


def resolve_trick(state: GameState) -> GameState:
    """Determine the winner of a full trick and enter TRICK_RESULT.

    Returns:
        New snapshot, or ``state`` itself if no full trick is waiting
    """
    if state.game_phase != GamePhase.PLAYING or not state.is_trick_complete():
        logger.debug("No complete trick to resolve")
        return state

    winner = evaluate_trick_winner(state.current_trick)
    return state.model_copy(
        update={
            "game_phase": GamePhase.TRICK_RESULT,
            "last_trick_winner_id": winner.player_id,
            "pending_discard_player_id": winner.player_id,
        }
    )


def trick_discard_options(state: GameState) -> list[TagType]:
    """Tags the pending trick winner may discard (empty means penalty)."""
    winner = evaluate_trick_winner(state.current_trick)
    if winner is None or state.pending_discard_player_id is None:
        return []
    player = state.player_by_id(state.pending_discard_player_id)
    return discardable_tags(player.tags, state.lead_card, winner.card)


def discard_tag(state: GameState, player_id: int, tag: TagType) -> GameState:
    """Remove one instance of an eligible tag from the trick winner.

    Returns:
        Snapshot for the next trick (or the round end), or ``state`` itself
        if the discard is rejected
    """
    result = _validator.validate_discard(state, player_id, tag)
    if not result.is_valid:
        logger.debug(f"Discard rejected: {result.error_message}")
        return state

    player = state.player_by_id(player_id)
    tags = list(player.tags)
    tags.remove(tag)
    player = player.model_copy(update={"tags": tuple(tags)})

    updated = state.model_copy(
        update={"players": state.replace_player(player), "pending_discard_player_id": None}
    )
    return continue_to_next_trick(updated, player_id)


def apply_black_penalty(state: GameState, winner_id: int) -> GameState:
    """Give the trick winner a BLACK tag and pay every other Black Wizard.

    Returns:
        Snapshot for the next trick (or the round end), or ``state`` itself
        if the winner could still discard a tag
    """
    if (
        state.game_phase != GamePhase.TRICK_RESULT
        or state.pending_discard_player_id != winner_id
        or trick_discard_options(state)
    ):
        logger.debug(f"Black penalty not applicable to player {winner_id}")
        return state

    players = []
    for player in state.players:
        if player.player_id == winner_id:
            player = player.model_copy(update={"tags": player.tags + (TagType.BLACK,)})
        elif player.is_black_wizard:
            player = player.model_copy(
                update={"black_wizard_bonus": player.black_wizard_bonus + 1}
            )
        players.append(player)

    updated = state.model_copy(
        update={"players": tuple(players), "pending_discard_player_id": None}
    )
    return continue_to_next_trick(updated, winner_id)


def continue_to_next_trick(state: GameState, leader_id: int) -> GameState:
    """Clear the trick and hand the lead to the trick winner.

    Ends the round once every card has been played.
    """
    updated = state.model_copy(
        update={
            "current_trick": (),
            "trick_count": state.trick_count + 1,
            "current_player_index": state.seat_of(leader_id),
            "game_phase": GamePhase.PLAYING,
        }
    )
    if updated.is_round_complete():
        return end_round(updated)
    return updated


def end_round(state: GameState) -> GameState:
    """Score the round and enter ROUND_END."""
    return state.model_copy(
        update={
            "players": apply_round_scores(state.players),
            "game_phase": GamePhase.ROUND_END,
        }
    )


def finish_game(state: GameState) -> GameState:
    """Enter GAME_END after the last round has been scored."""
    if state.game_phase != GamePhase.ROUND_END or state.current_round < state.total_rounds:
        return state
    return state.model_copy(update={"game_phase": GamePhase.GAME_END})


def advance_round(state: GameState, rng: RandomSource) -> GameState:
    """Rotate the dealer, move to the next round and deal it."""
    if state.game_phase != GamePhase.ROUND_END or state.current_round >= state.total_rounds:
        return state

    rotated = state.model_copy(
        update={
            "current_round": state.current_round + 1,
            "dealer_index": (state.dealer_index + 1) % state.player_count,
        }
    )
    return start_round(rotated, rng)
