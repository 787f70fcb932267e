"""Reusable UI components for the SquadBoard application."""

from .leaderboard_table import leaderboard_rows, render_season_table, render_top_list
from .summary_cards import format_goal_difference, format_record, render_summary_cards

__all__ = [
    "format_goal_difference",
    "format_record",
    "leaderboard_rows",
    "render_season_table",
    "render_summary_cards",
    "render_top_list",
]
