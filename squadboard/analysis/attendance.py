"""Training attendance rates."""

import math
from typing import Optional

from ..models.training import TrainingSession
from .filters import scope_to_team


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def session_attendance_percent(session: TrainingSession) -> Optional[float]:
    """
    Percentage of registered players present at one session.

    Args:
        session: The training session.

    Returns:
        Percentage between 0 and 100, or None if attendance was not taken.
    """
    if not session.has_attendance:
        return None
    return session.attended_count / len(session.attendance) * 100


def compute_attendance_rate(
    trainings: list[TrainingSession],
    team_id: Optional[str] = None,
) -> int:
    """
    Average attendance across training sessions.

    Sessions without any attendance records are left out entirely rather
    than counted as 0%.

    Args:
        trainings: Sessions to average over.
        team_id: Restrict to one team's sessions.

    Returns:
        Average percentage rounded to the nearest integer, 0 if no session
        had attendance taken.
    """
    percents = [
        percent
        for percent in (session_attendance_percent(s) for s in scope_to_team(trainings, team_id))
        if percent is not None
    ]
    if not percents:
        return 0
    return round_half_up(sum(percents) / len(percents))


def compute_player_attendance_rate(
    player_id: str,
    trainings: list[TrainingSession],
) -> Optional[int]:
    """
    Share of sessions a player attended, over sessions they were registered for.

    Args:
        player_id: The player to look up.
        trainings: Sessions to look through.

    Returns:
        Percentage rounded to the nearest integer, or None if the player
        never appears in an attendance register.
    """
    registered = 0
    attended = 0
    for session in trainings:
        for record in session.attendance:
            if record.player_id != player_id:
                continue
            registered += 1
            if record.attended:
                attended += 1

    if registered == 0:
        return None
    return round_half_up(attended / registered * 100)
