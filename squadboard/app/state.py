"""Session state shared by the dashboard pages."""

from typing import Optional

import streamlit as st

from ..analysis import compute_dashboard_summary
from ..services import (
    DashboardLoader,
    DashboardState,
    TeamDataClient,
    create_sample_team_data,
)


def _init_session_state() -> None:
    """Initialize session state variables."""
    if "loader" not in st.session_state:
        st.session_state.loader = DashboardLoader(TeamDataClient())
    if "team_id" not in st.session_state:
        st.session_state.team_id = ""
    if "use_sample" not in st.session_state:
        st.session_state.use_sample = False
    if "dashboard_state" not in st.session_state:
        st.session_state.dashboard_state = None


def sample_state() -> DashboardState:
    """Dashboard state built from the bundled sample data."""
    data = create_sample_team_data()
    return DashboardState(
        summary=compute_dashboard_summary(data.players, data.games, data.trainings),
        data=data,
    )


def select_team(team_id: str) -> None:
    """
    Switch the selected team.

    Loads still running for the previous team are discarded.
    """
    if team_id != st.session_state.team_id:
        st.session_state.loader.cancel()
        st.session_state.team_id = team_id
        st.session_state.dashboard_state = None


def get_dashboard_state(refresh: bool = False) -> DashboardState:
    """
    Current dashboard state, loading it if needed.

    Args:
        refresh: Reload from the data service, bypassing the cache.

    Returns:
        The state to render.
    """
    _init_session_state()

    if st.session_state.use_sample:
        return sample_state()

    state: Optional[DashboardState] = st.session_state.dashboard_state
    if state is None or refresh:
        team_id = st.session_state.team_id or None
        with st.spinner("Loading team data..."):
            loaded = st.session_state.loader.load(team_id, refresh=refresh)
        if loaded is not None:
            st.session_state.dashboard_state = loaded
            state = loaded

    return state or DashboardState()


def render_team_selector() -> None:
    """Sidebar controls for the team scope and data source."""
    _init_session_state()
    team_id = st.sidebar.text_input("Team ID", value=st.session_state.team_id)
    select_team(team_id.strip())
    st.session_state.use_sample = st.sidebar.checkbox(
        "Use sample data", value=st.session_state.use_sample
    )
