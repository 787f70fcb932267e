"""Score reconciliation between the result string and per-player goal stats."""

import logging
from typing import Optional

from ..models.game import Game, MatchResult, Outcome


logger = logging.getLogger(__name__)


def parse_score(score: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a "<team>-<opponent>" result string.

    Args:
        score: The result string as entered, e.g. "2-1" or " 3 - 0 ".

    Returns:
        (team_goals, opponent_goals), or None if the string is missing or
        malformed.
    """
    if not score:
        return None

    parts = score.split("-")
    if len(parts) != 2:
        return None

    try:
        team_goals = int(parts[0].strip())
        opponent_goals = int(parts[1].strip())
    except ValueError:
        return None

    if team_goals < 0 or opponent_goals < 0:
        return None
    return team_goals, opponent_goals


def stats_goals(game: Game) -> int:
    """Sum of goals recorded against individual players in a game."""
    return sum(stat.goals for stat in game.stats)


def determine_outcome(team_goals: int, opponent_goals: int, recorded: bool) -> Outcome:
    """
    Decide the outcome of a game from its reconciled goal counts.

    Args:
        team_goals: Goals scored by the club.
        opponent_goals: Goals conceded.
        recorded: Whether a well-formed result string was entered.

    Returns:
        The outcome. Without a recorded result the game is undecided.
    """
    if not recorded:
        return Outcome.UNDECIDED
    if team_goals > opponent_goals:
        return Outcome.WIN
    if team_goals < opponent_goals:
        return Outcome.LOSS
    return Outcome.DRAW


def reconcile_score(game: Game) -> MatchResult:
    """
    Produce the canonical score and outcome of one game.

    The result string is authoritative for the opponent's goals. For the
    club's goals the itemised player stats win whenever they hold any goals,
    otherwise the result string is used. The two sources are never added
    together.

    Args:
        game: The game with its stats.

    Returns:
        MatchResult with reconciled goals and outcome.
    """
    from_stats = stats_goals(game)
    parsed = parse_score(game.score)

    if parsed is None:
        if game.score:
            logger.warning("Ignoring malformed score %r for game %s", game.score, game.id)
        score_team_goals, score_opponent_goals = 0, 0
    else:
        score_team_goals, score_opponent_goals = parsed

    team_goals = from_stats if from_stats > 0 else score_team_goals
    opponent_goals = score_opponent_goals

    if parsed is not None and from_stats > 0 and from_stats != score_team_goals:
        logger.debug(
            "Game %s: stats record %d goals, score string says %d; using stats",
            game.id,
            from_stats,
            score_team_goals,
        )

    return MatchResult(
        team_goals=team_goals,
        opponent_goals=opponent_goals,
        outcome=determine_outcome(team_goals, opponent_goals, parsed is not None),
    )
