"""Main Streamlit application entry point."""

import logging
import sys
from pathlib import Path

# Add project root to path for direct execution
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from squadboard.app.pages import dashboard, statistics
from squadboard.app.state import render_team_selector

# Navigation
PAGES = {
    "Dashboard": dashboard,
    "Statistics": statistics,
}


def main() -> None:
    """Run the main application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    st.set_page_config(
        page_title="SquadBoard - Club Dashboard",
        page_icon="⚽",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.sidebar.title("SquadBoard")
    st.sidebar.markdown("*Youth football club dashboard*")
    st.sidebar.divider()

    # Page selection
    page_name = st.sidebar.radio("Navigation", list(PAGES.keys()), label_visibility="collapsed")
    st.sidebar.divider()
    render_team_selector()

    # Run selected page
    page = PAGES[page_name]
    page.render()


if __name__ == "__main__":
    main()
