"""Round and game scoring."""

from collections.abc import Sequence

from wizards_tags.models.player import Player


def tags_score(player: Player) -> int:
    """Sum of point values of every tag instance held."""
    return sum(tag.points for tag in player.tags)


def round_score(player: Player) -> int:
    """Round score: tag points plus Black Wizard bonus.

    A Black Wizard holds no claimed tags, so it scores its bonus plus any
    BLACK penalties it collected by winning tricks.
    """
    return tags_score(player) + player.black_wizard_bonus


def apply_round_scores(players: Sequence[Player]) -> tuple[Player, ...]:
    """Record each player's round score and add it to the total.

    Scores may be negative and are never clamped.

    Args:
        players: Players at the end of a round

    Returns:
        Updated players, in the same order
    """
    updated = []
    for player in players:
        score = round_score(player)
        updated.append(
            player.model_copy(
                update={
                    "current_round_score": score,
                    "total_score": player.total_score + score,
                }
            )
        )
    return tuple(updated)


def ranking(players: Sequence[Player]) -> list[Player]:
    """Players ordered by total score, best first (stable on seat order)."""
    return sorted(players, key=lambda p: p.total_score, reverse=True)


def game_winner(players: Sequence[Player]) -> Player | None:
    """First player with the highest total score."""
    if not players:
        return None
    best = players[0]
    for player in players[1:]:
        if player.total_score > best.total_score:
            best = player
    return best
