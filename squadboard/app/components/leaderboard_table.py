"""Leaderboard tables for top performers and the season table."""

from typing import Optional

import streamlit as st

from ...analysis import LeaderboardEntry


FULL_COLUMNS = ("name", "games", "goals", "assists", "minutes", "yellow", "red")


def leaderboard_rows(
    entries: list[LeaderboardEntry],
    columns: tuple[str, ...] = FULL_COLUMNS,
) -> list[dict]:
    """
    Turn leaderboard entries into table rows with a rank column.

    Args:
        entries: Ranked entries.
        columns: Entry attributes to include, in order.

    Returns:
        One dict per entry, keyed by column name plus "rank".
    """
    return [
        {"rank": position, **{column: getattr(entry, column) for column in columns}}
        for position, entry in enumerate(entries, start=1)
    ]


def render_top_list(title: str, entries: list[LeaderboardEntry], metric: str) -> None:
    """
    Render a compact top-N list.

    Args:
        title: Heading for the list.
        entries: Compact leaderboard entries.
        metric: Entry attribute shown next to each name.
    """
    st.subheader(title)
    if not entries:
        st.caption("No statistics recorded yet.")
        return

    for position, entry in enumerate(entries, start=1):
        cols = st.columns([1, 4, 1])
        with cols[0]:
            st.markdown(f"**{position}.**")
        with cols[1]:
            st.markdown(entry.name)
        with cols[2]:
            st.markdown(f"**{getattr(entry, metric)}**")


def render_season_table(entries: list[LeaderboardEntry], empty_text: Optional[str] = None) -> None:
    """
    Render the full season table.

    Args:
        entries: Full leaderboard entries.
        empty_text: Message when there is nothing to show.
    """
    if not entries:
        st.info(empty_text or "No players to display.")
        return

    st.dataframe(leaderboard_rows(entries), hide_index=True, use_container_width=True)
