"""Season aggregation: team record and player leaderboards."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..models.game import Game, MatchResult, Outcome
from ..models.player import Player
from .filters import scope_to_team
from .minutes import compute_minutes
from .score import reconcile_score


logger = logging.getLogger(__name__)


TOP_PERFORMERS_LIMIT = 5
UNKNOWN_PLAYER_NAME = "Unknown"

# Metrics a compact leaderboard may rank by
COMPACT_METRICS = ("goals", "assists", "games", "minutes", "yellow", "red")


class LeaderboardMode(Enum):
    """Granularity of a leaderboard."""

    COMPACT = "compact"
    FULL = "full"


@dataclass
class TeamStats:
    """
    Season record of a team.

    Attributes:
        games: Games that count towards the record.
        wins: Games won.
        losses: Games lost.
        draws: Games drawn.
        goals_for: Goals scored.
        goals_against: Goals conceded.
        goal_difference: goals_for minus goals_against.
    """

    games: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0


@dataclass
class LeaderboardEntry:
    """One player's season totals in a leaderboard."""

    player_id: str
    name: str
    goals: int = 0
    assists: int = 0
    games: int = 0
    minutes: int = 0
    yellow: int = 0
    red: int = 0


@dataclass
class PlayerTotals:
    """
    Season totals for a single player.

    Attributes:
        player_id: The player's unique identifier.
        games: Games with a stat line.
        minutes: Minutes played.
        goals: Goals scored.
        assists: Assists made.
        average_rating: Mean coach rating over rated games, None if unrated.
    """

    player_id: str
    games: int = 0
    minutes: int = 0
    goals: int = 0
    assists: int = 0
    average_rating: Optional[float] = None


def _counts_as_game(game: Game, result: MatchResult) -> bool:
    """Check if a game belongs in the games-played total."""
    if result.is_decided:
        return True
    return game.has_stats or result.team_goals > 0 or result.opponent_goals > 0


def compute_team_stats(games: list[Game], team_id: Optional[str] = None) -> TeamStats:
    """
    Fold a list of games into a team's season record.

    Goals are taken from the reconciled score of every game. Undecided games
    still add the goals their stats carry, but only count as a game played
    when they carry stats or goals.

    Args:
        games: Games to aggregate.
        team_id: Restrict to one team's games.

    Returns:
        TeamStats for the games.
    """
    stats = TeamStats()

    for game in scope_to_team(games, team_id):
        result = reconcile_score(game)
        stats.goals_for += result.team_goals
        stats.goals_against += result.opponent_goals

        if _counts_as_game(game, result):
            stats.games += 1

        if result.outcome == Outcome.WIN:
            stats.wins += 1
        elif result.outcome == Outcome.LOSS:
            stats.losses += 1
        elif result.outcome == Outcome.DRAW:
            stats.draws += 1

    stats.goal_difference = stats.goals_for - stats.goals_against
    logger.debug(
        "Team record over %d games: %d-%d-%d",
        stats.games,
        stats.wins,
        stats.draws,
        stats.losses,
    )
    return stats


def _accumulate(
    games: list[Game],
    players: list[Player],
    include_inactive: bool,
    recalculate: bool,
) -> list[LeaderboardEntry]:
    """Build one entry per player, in order of first appearance."""
    roster_names = {p.id: p.name for p in players}
    entries: dict[str, LeaderboardEntry] = {}

    if include_inactive:
        for player in players:
            entries[player.id] = LeaderboardEntry(
                player_id=player.id, name=player.name or UNKNOWN_PLAYER_NAME
            )

    for game in games:
        for stat in game.stats:
            if not stat.player_id:
                logger.warning("Skipping stat without player id in game %s", game.id)
                continue

            entry = entries.get(stat.player_id)
            if entry is None:
                name = roster_names.get(stat.player_id) or stat.player_name or UNKNOWN_PLAYER_NAME
                entry = LeaderboardEntry(player_id=stat.player_id, name=name)
                entries[stat.player_id] = entry
            elif entry.name in ("", UNKNOWN_PLAYER_NAME) and stat.player_name:
                entry.name = stat.player_name

            entry.games += 1
            entry.goals += stat.goals
            entry.assists += stat.assists
            entry.minutes += (
                compute_minutes(stat, game.duration) if recalculate else stat.minutes
            )
            entry.yellow += stat.yellow_cards
            entry.red += stat.red_cards

    return list(entries.values())


def rank_full(entries: list[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Order entries by goals, then assists, then games, all descending."""
    return sorted(entries, key=lambda e: (-e.goals, -e.assists, -e.games))


def rank_compact(entries: list[LeaderboardEntry], metric: str = "goals") -> list[LeaderboardEntry]:
    """Order entries by a single metric, descending; ties keep their order."""
    if metric not in COMPACT_METRICS:
        raise ValueError(f"Unknown leaderboard metric: {metric}")
    return sorted(entries, key=lambda e: getattr(e, metric), reverse=True)


def compute_leaderboard(
    games: list[Game],
    players: list[Player],
    mode: Union[LeaderboardMode, str] = LeaderboardMode.FULL,
    limit: Optional[int] = None,
    metric: str = "goals",
    include_inactive: bool = False,
    recalculate_minutes: bool = False,
    team_id: Optional[str] = None,
) -> list[LeaderboardEntry]:
    """
    Rank players over a set of games.

    The compact view ranks by a single metric (goals unless told otherwise)
    and is meant for small widgets; equal values keep the order in which
    players first appeared. The full view is the season table, ranked by
    goals, then assists, then games played.

    Args:
        games: Games to aggregate.
        players: Roster used to resolve display names.
        mode: "compact" or "full".
        limit: Maximum entries to return. Compact mode defaults to
            TOP_PERFORMERS_LIMIT, full mode to no limit.
        metric: Metric for compact ranking.
        include_inactive: Also list roster players without a stat line.
        recalculate_minutes: Derive minutes from the substitution ledgers
            instead of the stored figure.
        team_id: Restrict to one team's games and players.

    Returns:
        Ranked LeaderboardEntry list.
    """
    mode = LeaderboardMode(mode)
    entries = _accumulate(
        scope_to_team(games, team_id),
        scope_to_team(players, team_id),
        include_inactive,
        recalculate_minutes,
    )

    if mode == LeaderboardMode.COMPACT:
        ranked = rank_compact(entries, metric)
        if limit is None:
            limit = TOP_PERFORMERS_LIMIT
    else:
        ranked = rank_full(entries)

    return ranked if limit is None else ranked[:limit]


def compute_player_totals(player_id: str, games: list[Game]) -> PlayerTotals:
    """
    Season totals for one player across a set of games.

    Args:
        player_id: The player to total.
        games: Games to look through.

    Returns:
        PlayerTotals; a player without stat lines gets all zeros.
    """
    totals = PlayerTotals(player_id=player_id)
    ratings: list[int] = []

    for game in games:
        stat = game.get_stat(player_id)
        if stat is None:
            continue
        totals.games += 1
        totals.minutes += stat.minutes
        totals.goals += stat.goals
        totals.assists += stat.assists
        if stat.rating is not None:
            ratings.append(stat.rating)

    if ratings:
        totals.average_rating = sum(ratings) / len(ratings)
    return totals
