"""Tests for scoring."""

from wizards_tags.game.scoring import (
    apply_round_scores,
    game_winner,
    ranking,
    round_score,
    tags_score,
)
from wizards_tags.models.card import TagType
from wizards_tags.models.player import Player


class TestRoundScore:
    """Tests for per-round scoring."""

    def test_no_tags(self):
        """Test a player without tags scores zero."""
        assert round_score(Player(player_id=0)) == 0

    def test_tag_points(self):
        """Test every tag instance counts, duplicates included."""
        player = Player(
            player_id=0,
            tags=(TagType.RED, TagType.RED, TagType.COLORFUL, TagType.BLACK),
        )
        assert tags_score(player) == -2 - 2 - 3 - 4
        assert round_score(player) == -11

    def test_black_wizard_bonus(self):
        """Test the Black Wizard scores its bonus plus any BLACK tags."""
        player = Player(
            player_id=0,
            is_black_wizard=True,
            tags=(TagType.BLACK,),
            black_wizard_bonus=3,
        )
        assert round_score(player) == -1


class TestApplyRoundScores:
    """Tests for accumulating scores."""

    def test_accumulates_total(self):
        """Test round score is recorded and added to the total."""
        players = (
            Player(player_id=0, tags=(TagType.BLUE,), total_score=-5),
            Player(player_id=1, is_black_wizard=True, black_wizard_bonus=2),
        )

        scored = apply_round_scores(players)

        assert scored[0].current_round_score == -2
        assert scored[0].total_score == -7
        assert scored[1].current_round_score == 2
        assert scored[1].total_score == 2
        # Inputs untouched
        assert players[0].total_score == -5


class TestWinner:
    """Tests for winner and ranking."""

    def test_game_winner_first_maximum(self):
        """Test ties go to the earliest seat."""
        players = [
            Player(player_id=0, total_score=-8),
            Player(player_id=1, total_score=-2),
            Player(player_id=2, total_score=-2),
        ]
        assert game_winner(players).player_id == 1

    def test_game_winner_empty(self):
        """Test no players means no winner."""
        assert game_winner([]) is None

    def test_ranking(self):
        """Test ranking is best first and stable on ties."""
        players = [
            Player(player_id=0, total_score=-8),
            Player(player_id=1, total_score=-2),
            Player(player_id=2, total_score=0),
            Player(player_id=3, total_score=-2),
        ]
        assert [p.player_id for p in ranking(players)] == [2, 1, 3, 0]
