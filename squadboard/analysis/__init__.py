"""Analysis modules for match time accounting and season statistics."""

from .ledger import (
    InvalidIntervalError,
    SubstitutionLedger,
    append_entry,
    build_ledger,
    normalize_ledger,
)
from .minutes import compute_minutes, minutes_from_ledger, recalculate_minutes
from .score import parse_score, reconcile_score
from .aggregator import (
    TOP_PERFORMERS_LIMIT,
    LeaderboardEntry,
    LeaderboardMode,
    PlayerTotals,
    TeamStats,
    compute_leaderboard,
    compute_player_totals,
    compute_team_stats,
)
from .attendance import compute_attendance_rate, compute_player_attendance_rate
from .dashboard import (
    DashboardSummary,
    InjuryNotice,
    compute_dashboard_summary,
    empty_dashboard_summary,
)
from .filters import (
    Period,
    filter_games_by_competition,
    filter_games_by_period,
    scope_to_team,
    search_entries,
)

__all__ = [
    # Ledger
    "InvalidIntervalError",
    "SubstitutionLedger",
    "append_entry",
    "build_ledger",
    "normalize_ledger",
    # Minutes
    "compute_minutes",
    "minutes_from_ledger",
    "recalculate_minutes",
    # Score
    "parse_score",
    "reconcile_score",
    # Aggregator
    "TOP_PERFORMERS_LIMIT",
    "LeaderboardEntry",
    "LeaderboardMode",
    "PlayerTotals",
    "TeamStats",
    "compute_leaderboard",
    "compute_player_totals",
    "compute_team_stats",
    # Attendance
    "compute_attendance_rate",
    "compute_player_attendance_rate",
    # Dashboard
    "DashboardSummary",
    "InjuryNotice",
    "compute_dashboard_summary",
    "empty_dashboard_summary",
    # Filters
    "Period",
    "filter_games_by_competition",
    "filter_games_by_period",
    "scope_to_team",
    "search_entries",
]
