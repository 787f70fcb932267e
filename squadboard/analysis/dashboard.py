"""Dashboard read-model composed from the season aggregates."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..models.game import Game
from ..models.player import Player
from ..models.training import TrainingSession
from .aggregator import (
    TOP_PERFORMERS_LIMIT,
    LeaderboardEntry,
    LeaderboardMode,
    TeamStats,
    compute_leaderboard,
    compute_team_stats,
)
from .attendance import compute_attendance_rate
from .filters import scope_to_team


logger = logging.getLogger(__name__)


RECENT_ITEMS_LIMIT = 5


@dataclass
class InjuryNotice:
    """
    An injured player as listed on the dashboard.

    Attributes:
        player_id: The player's unique identifier.
        name: Player's display name.
        type: Injury type, or the free-text description of a flagged injury.
        start_date: When the injury started, if recorded.
    """

    player_id: str
    name: str
    type: str
    start_date: Optional[date] = None


@dataclass
class DashboardSummary:
    """
    Everything the dashboard shows, computed from players, games and trainings.

    Attributes:
        total_players: Players in scope.
        total_games: Games in scope, regardless of result.
        total_goals: Goals scored over all games.
        team_stats: Win/draw/loss record and goal difference.
        top_scorers: Compact leaderboard by goals.
        top_assists: Compact leaderboard by assists.
        average_attendance: Average training attendance percentage.
        active_injuries: Players currently injured.
        active_illnesses: Players currently ill.
        recent_injuries: Latest injury notices.
        recent_games: Most recent games, newest first.
    """

    total_players: int = 0
    total_games: int = 0
    total_goals: int = 0
    team_stats: TeamStats = field(default_factory=TeamStats)
    top_scorers: list[LeaderboardEntry] = field(default_factory=list)
    top_assists: list[LeaderboardEntry] = field(default_factory=list)
    average_attendance: int = 0
    active_injuries: int = 0
    active_illnesses: int = 0
    recent_injuries: list[InjuryNotice] = field(default_factory=list)
    recent_games: list[Game] = field(default_factory=list)

    @property
    def wins(self) -> int:
        return self.team_stats.wins

    @property
    def losses(self) -> int:
        return self.team_stats.losses

    @property
    def draws(self) -> int:
        return self.team_stats.draws

    @property
    def goals_against(self) -> int:
        return self.team_stats.goals_against

    @property
    def goal_difference(self) -> int:
        return self.team_stats.goal_difference


def empty_dashboard_summary() -> DashboardSummary:
    """All-zero summary shown when the data could not be loaded."""
    return DashboardSummary()


def injury_notice(player: Player) -> Optional[InjuryNotice]:
    """
    Build the dashboard notice for an injured player.

    An active injury record takes precedence over the roster flag.

    Args:
        player: The player to check.

    Returns:
        InjuryNotice, or None if the player is fit.
    """
    records = player.active_injuries
    if records:
        latest = records[0]
        return InjuryNotice(
            player_id=player.id,
            name=player.name,
            type=latest.type,
            start_date=latest.start_date,
        )
    if player.is_injured:
        return InjuryNotice(
            player_id=player.id,
            name=player.name,
            type=player.injury_description or "Injury",
        )
    return None


def count_unavailable(players: list[Player]) -> tuple[int, int]:
    """
    Count injured and ill players.

    Args:
        players: Players to scan.

    Returns:
        (injured, ill) counts.
    """
    injured = sum(1 for p in players if p.injured)
    ill = sum(1 for p in players if p.sick)
    return injured, ill


def recent_games(games: list[Game], limit: int = RECENT_ITEMS_LIMIT) -> list[Game]:
    """Most recent games, newest first."""
    return sorted(games, key=lambda g: g.date, reverse=True)[:limit]


def compute_dashboard_summary(
    players: list[Player],
    games: list[Game],
    trainings: list[TrainingSession],
    team_id: Optional[str] = None,
) -> DashboardSummary:
    """
    Compose the dashboard read-model.

    Args:
        players: Roster.
        games: Games with their stats.
        trainings: Training sessions with attendance.
        team_id: Restrict everything to one team.

    Returns:
        DashboardSummary for the inputs.
    """
    players = scope_to_team(players, team_id)
    games = scope_to_team(games, team_id)
    trainings = scope_to_team(trainings, team_id)

    team_stats = compute_team_stats(games)
    injured, ill = count_unavailable(players)
    notices = [n for n in (injury_notice(p) for p in players) if n is not None]

    summary = DashboardSummary(
        total_players=len(players),
        total_games=len(games),
        total_goals=team_stats.goals_for,
        team_stats=team_stats,
        top_scorers=compute_leaderboard(
            games, players, LeaderboardMode.COMPACT, limit=TOP_PERFORMERS_LIMIT
        ),
        top_assists=compute_leaderboard(
            games,
            players,
            LeaderboardMode.COMPACT,
            limit=TOP_PERFORMERS_LIMIT,
            metric="assists",
        ),
        average_attendance=compute_attendance_rate(trainings),
        active_injuries=injured,
        active_illnesses=ill,
        recent_injuries=notices[:RECENT_ITEMS_LIMIT],
        recent_games=recent_games(games),
    )
    logger.info(
        "Dashboard summary: %d players, %d games, %d goals",
        summary.total_players,
        summary.total_games,
        summary.total_goals,
    )
    return summary
