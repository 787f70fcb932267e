"""Statistics page: filtered team record and full season table."""

from datetime import date
from typing import Optional

import streamlit as st

from ...analysis import (
    LeaderboardMode,
    Period,
    compute_leaderboard,
    compute_team_stats,
    filter_games_by_competition,
    filter_games_by_period,
    search_entries,
)
from ...models import Game
from ..components import format_goal_difference, render_season_table
from ..state import get_dashboard_state


PERIOD_LABELS = {
    Period.ALL: "All time",
    Period.WEEK: "Last week",
    Period.MONTH: "Last month",
    Period.YEAR: "Last year",
    Period.CUSTOM: "Custom range",
}

COMPETITION_OPTIONS = ["all", "league", "cup", "friendly", "tournament"]


def _filter_games(
    games: list[Game],
    period: Period,
    competition: str,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    today: Optional[date] = None,
) -> list[Game]:
    """
    Apply the period and competition filters.

    Args:
        games: All loaded games.
        period: Time window.
        competition: Competition label filter.
        date_from: Start of a custom window.
        date_to: End of a custom window.
        today: Reference date for rolling windows.

    Returns:
        Filtered games.
    """
    games = filter_games_by_period(games, period, today=today, date_from=date_from, date_to=date_to)
    return filter_games_by_competition(games, competition)


def render() -> None:
    """Render the statistics page."""
    st.title("Team Statistics")
    st.caption("Team and player performance over the selected period")

    state = get_dashboard_state()
    if not state.ok:
        st.error(f"Could not load team data: {state.error}")

    col1, col2 = st.columns(2)
    with col1:
        period = st.selectbox(
            "Period",
            list(PERIOD_LABELS.keys()),
            format_func=lambda p: PERIOD_LABELS[p],
        )
    with col2:
        competition = st.selectbox("Competition", COMPETITION_OPTIONS, format_func=str.title)

    date_from = date_to = None
    if period == Period.CUSTOM:
        col1, col2 = st.columns(2)
        with col1:
            date_from = st.date_input("From", value=None)
        with col2:
            date_to = st.date_input("To", value=None)

    games = _filter_games(state.data.games, period, competition, date_from, date_to)
    team_stats = compute_team_stats(games)

    cols = st.columns(6)
    for col, (label, value) in zip(
        cols,
        [
            ("Games", team_stats.games),
            ("Wins", team_stats.wins),
            ("Draws", team_stats.draws),
            ("Losses", team_stats.losses),
            ("Goals", f"{team_stats.goals_for}-{team_stats.goals_against}"),
            ("Goal difference", format_goal_difference(team_stats.goal_difference)),
        ],
    ):
        with col:
            st.metric(label=label, value=value)

    st.divider()
    st.subheader("Player statistics")
    query = st.text_input("Search player", placeholder="Name...")

    entries = compute_leaderboard(
        games,
        state.data.players,
        LeaderboardMode.FULL,
        include_inactive=True,
    )
    render_season_table(
        search_entries(entries, query),
        empty_text="No players match the search." if query else None,
    )
