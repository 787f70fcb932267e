"""Filters that narrow games and leaderboards before aggregation."""

from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional, Protocol, TypeVar, Union

from ..models.game import Game


class Period(Enum):
    """Time windows offered by the statistics screen."""

    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"


class TeamScoped(Protocol):
    """Anything that may belong to one of the club's teams."""

    team_id: Optional[str]


class Named(Protocol):
    """Anything with a display name."""

    name: str


T = TypeVar("T", bound=TeamScoped)
N = TypeVar("N", bound=Named)


def scope_to_team(items: Iterable[T], team_id: Optional[str]) -> list[T]:
    """
    Keep only the items belonging to a team.

    Args:
        items: Players, games or training sessions.
        team_id: Team to keep, or None to keep everything.

    Returns:
        The matching items, in their original order.
    """
    if team_id is None:
        return list(items)
    return [item for item in items if item.team_id == team_id]


def _months_back(today: date, months: int) -> date:
    """Same day of month ``months`` earlier, clamped to the month's length."""
    year = today.year
    month = today.month - months
    while month < 1:
        month += 12
        year -= 1
    day = today.day
    while True:
        try:
            return date(year, month, day)
        except ValueError:
            day -= 1


def period_start(period: Period, today: date) -> Optional[date]:
    """
    First date included in a rolling period.

    Args:
        period: One of week, month or year.
        today: Reference date.

    Returns:
        The start date, or None for periods without a rolling start.
    """
    if period == Period.WEEK:
        return today - timedelta(days=7)
    if period == Period.MONTH:
        return _months_back(today, 1)
    if period == Period.YEAR:
        return _months_back(today, 12)
    return None


def filter_games_by_period(
    games: list[Game],
    period: Union[Period, str] = Period.ALL,
    today: Optional[date] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> list[Game]:
    """
    Keep games played within a time window.

    Rolling periods include games on or after the start date. A custom
    period includes both boundary dates and keeps everything when either
    boundary is missing.

    Args:
        games: Games to filter.
        period: Window to apply.
        today: Reference date for rolling windows (defaults to today).
        date_from: First day of a custom window.
        date_to: Last day of a custom window.

    Returns:
        Games inside the window, in their original order.
    """
    period = Period(period)
    if period == Period.ALL:
        return list(games)

    if period == Period.CUSTOM:
        if date_from is None or date_to is None:
            return list(games)
        return [g for g in games if date_from <= g.date <= date_to]

    start = period_start(period, today or date.today())
    return [g for g in games if g.date >= start]


def filter_games_by_competition(games: list[Game], competition: Optional[str]) -> list[Game]:
    """
    Keep games whose competition label contains the given text.

    Args:
        games: Games to filter.
        competition: Case-insensitive text to look for; None, empty or
            "all" keeps every game.

    Returns:
        Matching games, in their original order.
    """
    if not competition or competition.lower() == "all":
        return list(games)
    needle = competition.lower()
    return [g for g in games if g.competition and needle in g.competition.lower()]


def search_entries(entries: list[N], query: Optional[str]) -> list[N]:
    """
    Keep entries whose name contains the query, ignoring case.

    Args:
        entries: Leaderboard entries or players.
        query: Search text; blank keeps everything.

    Returns:
        Matching entries, in their original order.
    """
    if not query or not query.strip():
        return list(entries)
    needle = query.strip().lower()
    return [e for e in entries if needle in e.name.lower()]
