"""Minutes-played calculation from lineup and substitution data."""

import logging
from typing import Optional

from ..models.game import Game, GameStat, SubstitutionEntry
from .ledger import normalize_ledger


logger = logging.getLogger(__name__)


def _segment(start: int, end: Optional[int], duration: int) -> int:
    """Minutes between ``start`` and ``end`` (or full time), never negative."""
    stop = end if end is not None else duration
    return max(0, stop - start)


def minutes_from_ledger(
    entries: list[SubstitutionEntry],
    started: bool,
    duration: int,
) -> int:
    """
    Total minutes played given a normalized ledger.

    A starter plays from kick-off until the first entry's ``out_minute``
    (or the final whistle), then every later entry adds the time between
    coming back on and going off again (or the final whistle). A substitute
    only plays the intervals recorded in the ledger. Malformed intervals
    contribute nothing.

    Args:
        entries: Normalized substitution entries, in order.
        started: Whether the player was in the starting XI.
        duration: Length of the match in minutes.

    Returns:
        Minutes played, never negative.
    """
    minutes = 0

    if started:
        if entries and entries[0].out_minute is not None:
            minutes += max(0, entries[0].out_minute)
        else:
            minutes += duration
        remaining = entries[1:]
    else:
        remaining = entries

    for entry in remaining:
        if entry.in_minute is None:
            continue
        minutes += _segment(entry.in_minute, entry.out_minute, duration)

    return max(0, minutes)


def compute_minutes(stat: GameStat, duration: int) -> int:
    """
    Calculate the minutes a player was on the pitch in one game.

    Legacy single-substitution fields are folded into the ledger first, so
    both data shapes give the same figure.

    Args:
        stat: The player's stat line.
        duration: Length of the match in minutes.

    Returns:
        Minutes played, never negative. Never raises.
    """
    entries = normalize_ledger(stat)
    minutes = minutes_from_ledger(entries, stat.started, duration)
    logger.debug(
        "Player %s in game %s: %d minutes from %d entries",
        stat.player_id,
        stat.game_id,
        minutes,
        len(entries),
    )
    return minutes


def recalculate_minutes(game: Game) -> dict[str, int]:
    """
    Recalculate minutes for every player with a stat line in a game.

    Args:
        game: The game with its stats.

    Returns:
        Mapping of player ID to minutes played.
    """
    return {stat.player_id: compute_minutes(stat, game.duration) for stat in game.stats}
