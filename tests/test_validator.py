"""Tests for rule validation."""

import pytest

from wizards_tags.game.validator import (
    MoveValidator,
    discardable_tags,
    evaluate_trick_winner,
    is_playable,
    needs_black_penalty,
    playable_cards,
)
from wizards_tags.models.card import Card, CardColor, TagType
from wizards_tags.models.game_state import GamePhase, GameState, PlayedCard
from wizards_tags.models.player import Player


def c(color: CardColor, number: int) -> Card:
    return Card(color=color, number=number)


def trick_of(*cards: Card) -> tuple[PlayedCard, ...]:
    return tuple(PlayedCard(player_id=i, card=card) for i, card in enumerate(cards))


R, Y, B, G, P = CardColor.RED, CardColor.YELLOW, CardColor.BLUE, CardColor.GREEN, CardColor.PURPLE


@pytest.fixture
def validator():
    return MoveValidator()


class TestPlayableCards:
    """Tests for the follow-suit rule."""

    def test_leading_any_card(self):
        """Test every card is playable with no lead card."""
        hand = [c(B, 3), c(R, 9), c(G, 1)]
        assert playable_cards(hand) == hand

    def test_must_follow_lead_color(self):
        """Test only lead-color cards are playable when held."""
        hand = [c(B, 3), c(R, 9), c(B, 11), c(G, 1)]
        assert playable_cards(hand, c(B, 7)) == [c(B, 3), c(B, 11)]

    def test_void_in_lead_color(self):
        """Test every card is playable without the lead color."""
        hand = [c(Y, 3), c(R, 9)]
        assert playable_cards(hand, c(B, 7)) == hand

    def test_red_lead_must_follow_red(self):
        """Test a RED lead is followed like any other color."""
        hand = [c(Y, 3), c(R, 9)]
        assert playable_cards(hand, c(R, 2)) == [c(R, 9)]

    def test_is_playable(self):
        """Test single-card checks."""
        hand = [c(B, 3), c(R, 9)]
        assert is_playable(c(B, 3), hand, c(B, 7))
        assert not is_playable(c(R, 9), hand, c(B, 7))
        assert not is_playable(c(G, 5), hand)


class TestTrickWinner:
    """Tests for trick winner evaluation."""

    def test_empty_trick(self):
        """Test an empty trick has no winner."""
        assert evaluate_trick_winner(()) is None

    def test_trump_beats_lead_color(self):
        """Test a RED card beats a higher lead-color card."""
        trick = trick_of(c(B, 7), c(B, 3), c(R, 9), c(R, 2))
        winner = evaluate_trick_winner(trick)
        assert winner.card == c(R, 9)
        assert winner.player_id == 2

    def test_highest_lead_color_wins(self):
        """Test off-color cards are ignored without trumps."""
        trick = trick_of(c(B, 7), c(B, 3), c(Y, 12), c(G, 15))
        winner = evaluate_trick_winner(trick)
        assert winner.card == c(B, 7)
        assert winner.player_id == 0

    def test_red_lead(self):
        """Test highest RED wins a RED lead."""
        trick = trick_of(c(R, 4), c(R, 13), c(B, 15), c(R, 1))
        assert evaluate_trick_winner(trick).player_id == 1

    def test_tie_keeps_first(self):
        """Test equal cards resolve to the first played."""
        trick = (
            PlayedCard(player_id=3, card=c(B, 9)),
            PlayedCard(player_id=0, card=c(B, 9)),
        )
        assert evaluate_trick_winner(trick).player_id == 3


class TestDiscardableTags:
    """Tests for tag discard eligibility."""

    def test_colorful_always_eligible(self):
        """Test COLORFUL can be discarded for any trick."""
        tags = [TagType.COLORFUL]
        assert discardable_tags(tags, c(B, 2), c(B, 10)) == [TagType.COLORFUL]
        assert discardable_tags(tags, c(B, 2), c(R, 10)) == [TagType.COLORFUL]

    def test_red_wins_off_color_lead(self):
        """Test lead color tag and RED tag are both eligible."""
        tags = [TagType.RED, TagType.BLUE, TagType.COLORFUL, TagType.GREEN]
        result = discardable_tags(tags, c(B, 2), c(R, 10))
        assert result == [TagType.COLORFUL, TagType.BLUE, TagType.RED]

    def test_red_wins_red_lead(self):
        """Test only RED is eligible when RED was led."""
        tags = [TagType.BLUE, TagType.RED]
        assert discardable_tags(tags, c(R, 2), c(R, 10)) == [TagType.RED]

    def test_lead_color_wins(self):
        """Test the winning color tag is eligible."""
        tags = [TagType.RED, TagType.BLUE, TagType.BLUE]
        assert discardable_tags(tags, c(B, 2), c(B, 10)) == [TagType.BLUE]

    def test_black_never_eligible(self):
        """Test BLACK tags can never be discarded."""
        tags = [TagType.BLACK, TagType.BLACK]
        assert discardable_tags(tags, c(R, 2), c(R, 10)) == []

    def test_black_penalty_scenario(self):
        """Test YELLOW holder winning with RED on a BLUE lead gets a penalty."""
        tags = [TagType.YELLOW]
        assert discardable_tags(tags, c(B, 2), c(R, 10)) == []
        assert needs_black_penalty(tags, c(B, 2), c(R, 10))

    def test_no_penalty_when_discard_possible(self):
        """Test penalty is not needed with an eligible tag."""
        assert not needs_black_penalty([TagType.BLUE], c(B, 2), c(B, 10))


def bidding_state() -> GameState:
    players = tuple(Player(player_id=i) for i in range(4))
    return GameState(
        players=players,
        game_phase=GamePhase.BIDDING,
        bidding_player_index=1,
    )


def playing_state() -> GameState:
    hands = [
        (c(B, 3), c(R, 9)),
        (c(Y, 1), c(G, 2)),
        (c(P, 5), c(P, 6)),
        (c(B, 11), c(G, 12)),
    ]
    players = tuple(Player(player_id=i, hand=hand) for i, hand in enumerate(hands))
    return GameState(
        players=players,
        game_phase=GamePhase.PLAYING,
        current_player_index=0,
    )


class TestMoveValidator:
    """Tests for MoveValidator class."""

    def test_claim_valid(self, validator):
        """Test the current bidder may claim."""
        assert validator.validate_claim(bidding_state(), 1, False).is_valid

    def test_claim_wrong_bidder(self, validator):
        """Test other players cannot claim."""
        result = validator.validate_claim(bidding_state(), 2, False)
        assert not result.is_valid
        assert "not the current bidder" in result.error_message

    def test_claim_wrong_phase(self, validator):
        """Test claims outside bidding are rejected."""
        state = bidding_state().model_copy(update={"game_phase": GamePhase.PLAYING})
        assert not validator.validate_claim(state, 1, False).is_valid

    def test_black_wizard_taken(self, validator):
        """Test a second Black Wizard claim is rejected."""
        state = bidding_state().model_copy(update={"black_wizard_id": 0})
        result = validator.validate_claim(state, 1, True)
        assert not result.is_valid
        assert "already claimed" in result.error_message
        assert validator.validate_claim(state, 1, False).is_valid

    def test_play_valid(self, validator):
        """Test a legal lead."""
        assert validator.validate_play(playing_state(), 0, c(R, 9)).is_valid

    def test_play_wrong_turn(self, validator):
        """Test playing out of turn."""
        result = validator.validate_play(playing_state(), 1, c(Y, 1))
        assert not result.is_valid
        assert "not the current player" in result.error_message

    def test_play_card_not_in_hand(self, validator):
        """Test playing a card the player does not hold."""
        result = validator.validate_play(playing_state(), 0, c(G, 15))
        assert not result.is_valid
        assert "not in hand" in result.error_message

    def test_play_must_follow(self, validator):
        """Test follow-suit violation."""
        state = playing_state().model_copy(
            update={
                "current_trick": (PlayedCard(player_id=2, card=c(B, 7)),),
                "current_player_index": 0,
            }
        )
        result = validator.validate_play(state, 0, c(R, 9))
        assert not result.is_valid
        assert "Must follow BLUE" in result.error_message
        assert validator.validate_play(state, 0, c(B, 3)).is_valid

    def test_discard_requires_trick_result(self, validator):
        """Test discards outside TRICK_RESULT are rejected."""
        assert not validator.validate_discard(playing_state(), 0, TagType.RED).is_valid

    def test_discard_eligibility(self, validator):
        """Test discard checks the pending winner and the tag."""
        players = (
            Player(player_id=0, tags=(TagType.BLUE, TagType.YELLOW)),
            Player(player_id=1),
            Player(player_id=2),
            Player(player_id=3),
        )
        state = GameState(
            players=players,
            game_phase=GamePhase.TRICK_RESULT,
            current_trick=trick_of(c(B, 7), c(B, 3), c(Y, 12), c(G, 15)),
            pending_discard_player_id=0,
        )

        assert validator.validate_discard(state, 0, TagType.BLUE).is_valid
        assert not validator.validate_discard(state, 0, TagType.YELLOW).is_valid
        assert not validator.validate_discard(state, 1, TagType.BLUE).is_valid
