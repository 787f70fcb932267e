"""Dashboard page: season snapshot, top performers and injuries."""

import streamlit as st

from ...analysis import DashboardSummary, InjuryNotice, reconcile_score
from ...models import Game, Outcome
from ..components import render_summary_cards, render_top_list
from ..state import get_dashboard_state


OUTCOME_LABELS = {
    Outcome.WIN: "W",
    Outcome.LOSS: "L",
    Outcome.DRAW: "D",
    Outcome.UNDECIDED: "-",
}


def _game_label(game: Game) -> str:
    """One-line description of a game with its reconciled result."""
    result = reconcile_score(game)
    if result.outcome == Outcome.UNDECIDED and not game.has_stats:
        score = "not played"
    else:
        score = f"{result.team_goals}-{result.opponent_goals}"
    return f"{game.date:%d %b} vs {game.opponent}: {score} ({OUTCOME_LABELS[result.outcome]})"


def _injury_label(notice: InjuryNotice) -> str:
    """One-line description of an injury notice."""
    since = f" since {notice.start_date:%d %b}" if notice.start_date else ""
    return f"{notice.name}: {notice.type}{since}"


def _render_lists(summary: DashboardSummary) -> None:
    col1, col2 = st.columns(2)
    with col1:
        render_top_list("Top scorers", summary.top_scorers, "goals")
    with col2:
        render_top_list("Top assists", summary.top_assists, "assists")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Recent games")
        if not summary.recent_games:
            st.caption("No games yet.")
        for game in summary.recent_games:
            st.markdown(_game_label(game))
    with col2:
        st.subheader("Injuries")
        if not summary.recent_injuries:
            st.caption("Everyone is fit.")
        for notice in summary.recent_injuries:
            st.markdown(_injury_label(notice))


def render() -> None:
    """Render the dashboard page."""
    st.title("Dashboard")

    refresh = st.button("Refresh")
    state = get_dashboard_state(refresh=refresh)

    if not state.ok:
        st.error(f"Could not load team data: {state.error}")
        if st.button("Retry"):
            state = get_dashboard_state(refresh=True)

    render_summary_cards(state.summary)
    st.divider()
    _render_lists(state.summary)
