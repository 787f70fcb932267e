"""Season snapshot cards for the dashboard."""

import streamlit as st

from ...analysis import DashboardSummary, TeamStats


def format_record(stats: TeamStats) -> str:
    """
    Format a team record as W-D-L.

    Args:
        stats: The team's season record.

    Returns:
        e.g. "5W 2D 1L".
    """
    return f"{stats.wins}W {stats.draws}D {stats.losses}L"


def format_goal_difference(goal_difference: int) -> str:
    """Goal difference with an explicit sign for positive values."""
    return f"+{goal_difference}" if goal_difference > 0 else str(goal_difference)


def render_summary_cards(summary: DashboardSummary) -> None:
    """
    Render the headline numbers of the dashboard.

    Args:
        summary: The dashboard summary to display.
    """
    cols = st.columns(4)

    with cols[0]:
        st.metric(label="Players", value=summary.total_players)

    with cols[1]:
        st.metric(
            label="Games",
            value=summary.total_games,
            delta=format_record(summary.team_stats),
            delta_color="off",
        )

    with cols[2]:
        st.metric(
            label="Goals",
            value=summary.total_goals,
            delta=f"{format_goal_difference(summary.goal_difference)} GD",
            delta_color="normal" if summary.goal_difference >= 0 else "inverse",
        )

    with cols[3]:
        st.metric(label="Attendance", value=f"{summary.average_attendance}%")
        st.progress(min(summary.average_attendance / 100, 1.0))

    col1, col2 = st.columns(2)
    with col1:
        st.metric(label="Active injuries", value=summary.active_injuries)
    with col2:
        st.metric(label="Active illnesses", value=summary.active_illnesses)
