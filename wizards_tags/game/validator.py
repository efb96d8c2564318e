"""Rule validation: follow-suit, trick winner and tag discard eligibility."""

from collections.abc import Sequence
from dataclasses import dataclass

from wizards_tags.models.card import Card, TagType
from wizards_tags.models.game_state import GamePhase, GameState, PlayedCard


def playable_cards(hand: Sequence[Card], lead_card: Card | None = None) -> list[Card]:
    """Get the cards a player may legally play.

    Rules:
    1. No lead card yet (first play of the trick): every card is playable.
    2. Hand holds cards of the lead color: only those may be played.
    3. Otherwise every card is playable.

    Args:
        hand: Player's hand, in hand order
        lead_card: First card of the current trick, None when leading

    Returns:
        Playable cards in hand order
    """
    if lead_card is None:
        return list(hand)

    same_color = [c for c in hand if c.color == lead_card.color]
    if same_color:
        return same_color
    return list(hand)


def is_playable(card: Card, hand: Sequence[Card], lead_card: Card | None = None) -> bool:
    """Check if a card is in hand and allowed by the follow-suit rule."""
    if card not in hand:
        return False
    return card in playable_cards(hand, lead_card)


def evaluate_trick_winner(trick: Sequence[PlayedCard]) -> PlayedCard | None:
    """Determine the winning play of a trick.

    Priority:
    1. Highest RED (trump) card, if any was played.
    2. Highest card of the lead color.

    Ties keep the first card in play order.

    Args:
        trick: Plays in play order

    Returns:
        Winning play, or None for an empty trick
    """
    if not trick:
        return None

    lead_color = trick[0].card.color

    red_plays = [p for p in trick if p.card.is_red]
    candidates = red_plays or [p for p in trick if p.card.color == lead_color]

    best = candidates[0]
    for play in candidates[1:]:
        if play.card.number > best.card.number:
            best = play
    return best


def discardable_tags(
    player_tags: Sequence[TagType],
    lead_card: Card,
    winning_card: Card,
) -> list[TagType]:
    """Get the tag types the trick winner is allowed to discard.

    Rules:
    - COLORFUL is always eligible.
    - RED wins, lead not RED: lead color tag or RED tag.
    - RED wins, lead RED: RED tag only.
    - Non-RED wins: tag of the winning color only.

    Each type appears at most once; BLACK is never eligible.

    Args:
        player_tags: Tags held by the winner (multiset)
        lead_card: First card of the trick
        winning_card: Card that won the trick

    Returns:
        Eligible tag types the player actually holds
    """
    held = set(player_tags)
    discardable: list[TagType] = []

    if TagType.COLORFUL in held:
        discardable.append(TagType.COLORFUL)

    if winning_card.is_red and not lead_card.is_red:
        lead_tag = TagType.from_card_color(lead_card.color)
        if lead_tag in held:
            discardable.append(lead_tag)
        if TagType.RED in held:
            discardable.append(TagType.RED)
    elif winning_card.is_red:
        if TagType.RED in held:
            discardable.append(TagType.RED)
    else:
        winning_tag = TagType.from_card_color(winning_card.color)
        if winning_tag in held:
            discardable.append(winning_tag)

    return discardable


def needs_black_penalty(
    player_tags: Sequence[TagType],
    lead_card: Card,
    winning_card: Card,
) -> bool:
    """Check if the trick winner has nothing to discard."""
    return not discardable_tags(player_tags, lead_card, winning_card)


@dataclass
class ValidationResult:
    """Result of action validation."""

    is_valid: bool
    error_message: str = ""


class MoveValidator:
    """Validates player actions against the current game state.

    Rejections are not errors: the engine ignores the action and keeps the
    current snapshot. The message only explains why.
    """

    def validate_claim(
        self,
        state: GameState,
        player_id: int,
        wants_black_wizard: bool,
    ) -> ValidationResult:
        """Validate a bidding action.

        Args:
            state: Current game state
            player_id: Player claiming a role
            wants_black_wizard: True if claiming the Black Wizard role

        Returns:
            ValidationResult
        """
        if state.game_phase != GamePhase.BIDDING:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not in bidding phase: {state.game_phase.name}",
            )

        bidder = state.bidding_player
        if bidder is None or bidder.player_id != player_id:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player {player_id} is not the current bidder",
            )

        if wants_black_wizard and state.black_wizard_id not in (None, player_id):
            return ValidationResult(
                is_valid=False,
                error_message=f"Black Wizard already claimed by player {state.black_wizard_id}",
            )

        return ValidationResult(is_valid=True)

    def validate_play(
        self,
        state: GameState,
        player_id: int,
        card: Card,
    ) -> ValidationResult:
        """Validate a card play.

        Args:
            state: Current game state
            player_id: Player playing the card
            card: Card being played

        Returns:
            ValidationResult
        """
        if state.game_phase != GamePhase.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not in playing phase: {state.game_phase.name}",
            )

        if state.is_trick_complete():
            return ValidationResult(
                is_valid=False,
                error_message="Trick is complete and awaiting evaluation",
            )

        player = state.current_player
        if player is None or player.player_id != player_id:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player {player_id} is not the current player",
            )

        if card not in player.hand:
            return ValidationResult(
                is_valid=False,
                error_message=f"Card {card} not in hand",
            )

        lead_card = state.lead_card
        if not is_playable(card, player.hand, lead_card):
            return ValidationResult(
                is_valid=False,
                error_message=f"Must follow {lead_card.color.name}" if lead_card else "",
            )

        return ValidationResult(is_valid=True)

    def validate_discard(
        self,
        state: GameState,
        player_id: int,
        tag: TagType,
    ) -> ValidationResult:
        """Validate a tag discard by the trick winner.

        Args:
            state: Current game state
            player_id: Player discarding
            tag: Tag type to discard

        Returns:
            ValidationResult
        """
        if state.game_phase != GamePhase.TRICK_RESULT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not in trick result phase: {state.game_phase.name}",
            )

        if state.pending_discard_player_id != player_id:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player {player_id} has no pending discard",
            )

        winner = evaluate_trick_winner(state.current_trick)
        player = state.player_by_id(player_id)
        if winner is None or player is None or state.lead_card is None:
            return ValidationResult(
                is_valid=False,
                error_message="No trick to resolve",
            )

        allowed = discardable_tags(player.tags, state.lead_card, winner.card)
        if tag not in allowed:
            return ValidationResult(
                is_valid=False,
                error_message=f"Tag {tag.name} cannot be discarded for this trick",
            )

        return ValidationResult(is_valid=True)
