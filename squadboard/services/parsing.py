"""Parsing of team data service JSON into models.

The data service returns loosely typed records: numbers may arrive as
strings, substitutions may be a JSON-encoded string, and older stat lines
only carry the single-substitution fields. Everything is coerced here so the
analysis code only ever sees well-typed models.
"""

import json
import logging
from datetime import date, datetime
from typing import Any, Optional

from ..models import (
    DEFAULT_GAME_DURATION,
    AttendanceRecord,
    Game,
    GameStat,
    IllnessRecord,
    InjuryRecord,
    Player,
    SubstitutionEntry,
    TrainingSession,
)
from .base import ParseError


logger = logging.getLogger(__name__)


def parse_date(value: Any) -> date:
    """
    Parse an ISO date or datetime string.

    Args:
        value: e.g. "2025-03-08" or "2025-03-08T10:30:00.000Z".

    Returns:
        date object.

    Raises:
        ParseError: If the value is not a recognisable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        raise ParseError(f"Invalid date: {value!r}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ParseError(f"Invalid date: {value!r}")


def _optional_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    try:
        return parse_date(value)
    except ParseError:
        return None


def to_count(value: Any, field_name: str = "value") -> int:
    """
    Coerce a counting stat to a non-negative integer.

    Missing, non-numeric and negative values become 0.
    """
    if value is None or value == "":
        return 0
    try:
        number = int(float(value))
    except (TypeError, ValueError):
        logger.warning("Coercing non-numeric %s %r to 0", field_name, value)
        return 0
    if number < 0:
        logger.warning("Coercing negative %s %r to 0", field_name, value)
        return 0
    return number


def to_minute(value: Any) -> Optional[int]:
    """Coerce a match minute, returning None when absent or unreadable."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        logger.warning("Ignoring unreadable minute %r", value)
        return None


def to_rating(value: Any) -> Optional[int]:
    """Coerce a 1-5 rating, returning None when absent or out of range."""
    if value is None or value == "":
        return None
    try:
        rating = int(float(value))
    except (TypeError, ValueError):
        return None
    return rating if 1 <= rating <= 5 else None


def to_bool(value: Any) -> bool:
    """Coerce JSON booleans and their common string spellings."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def to_text(value: Any) -> Optional[str]:
    """Coerce a text field; numbers become strings, anything else None."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def parse_substitutions(raw: Any) -> list[SubstitutionEntry]:
    """
    Parse a substitution list.

    Args:
        raw: A list of {inMinute, outMinute, replacedBy} objects, the same
            list JSON-encoded as a string, or None.

    Returns:
        Entries in their stored order; unreadable input gives an empty list.
    """
    if raw in (None, ""):
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring undecodable substitutions %r", raw)
            return []
    if not isinstance(raw, list):
        logger.warning("Ignoring substitutions of type %s", type(raw).__name__)
        return []

    entries = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        entries.append(
            SubstitutionEntry(
                in_minute=to_minute(item.get("inMinute")),
                out_minute=to_minute(item.get("outMinute")),
                replaced_by=to_text(item.get("replacedBy")),
            )
        )
    return entries


def parse_game_stat(data: dict, game_id: str) -> GameStat:
    """
    Parse one player's stat line.

    Args:
        data: Stat record from the service.
        game_id: Game the stat belongs to, used when the record omits it.

    Returns:
        GameStat.

    Raises:
        ParseError: If the record has no player id.
    """
    player_id = data.get("playerId")
    if not player_id:
        raise ParseError(f"Stat without playerId in game {game_id}")

    player = data.get("player")
    if not isinstance(player, dict):
        player = {}
    return GameStat(
        player_id=str(player_id),
        game_id=str(data.get("gameId") or game_id),
        player_name=to_text(player.get("name")) or to_text(data.get("playerName")),
        minutes=to_count(data.get("minutes"), "minutes"),
        goals=to_count(data.get("goals"), "goals"),
        assists=to_count(data.get("assists"), "assists"),
        yellow_cards=to_count(data.get("yellowCards"), "yellowCards"),
        red_cards=to_count(data.get("redCards"), "redCards"),
        rating=to_rating(data.get("rating")),
        started=to_bool(data.get("started")),
        substitutions=parse_substitutions(data.get("substitutions")),
        substitution_minute=to_minute(data.get("substitutionMinute")),
        substitution_in_minute=to_minute(data.get("substitutionInMinute")),
    )


def parse_game(data: dict) -> Game:
    """
    Parse a game with its embedded stats.

    Stat lines without a player id are skipped, as are repeated lines for
    the same player (the first one wins).

    Raises:
        ParseError: If the game has no id or no readable date.
    """
    game_id = data.get("id")
    if not game_id:
        raise ParseError("Game without id")
    game_id = str(game_id)

    stats: list[GameStat] = []
    seen: set[str] = set()
    for raw_stat in _as_list(data.get("stats")):
        if not isinstance(raw_stat, dict):
            logger.warning("Skipping non-object stat in game %s", game_id)
            continue
        try:
            stat = parse_game_stat(raw_stat, game_id)
        except ParseError as e:
            logger.warning("Skipping stat: %s", e)
            continue
        if stat.player_id in seen:
            logger.warning("Skipping duplicate stat for %s in game %s", stat.player_id, game_id)
            continue
        seen.add(stat.player_id)
        stats.append(stat)

    duration = to_count(data.get("duration"), "duration") or DEFAULT_GAME_DURATION
    opponent_club = data.get("opponentClub")
    if not isinstance(opponent_club, dict):
        opponent_club = {}
    opponent = to_text(data.get("opponent")) or to_text(opponent_club.get("name")) or ""

    return Game(
        id=game_id,
        date=parse_date(data.get("date")),
        opponent=opponent,
        score=to_text(data.get("score")),
        duration=duration,
        stats=stats,
        competition=to_text(data.get("competition")),
        venue=to_text(data.get("venue")),
        team_id=to_text(data.get("teamId")),
    )


def _parse_records(raw: Any, record_cls: type) -> list:
    records = []
    for item in _as_list(raw):
        if not isinstance(item, dict):
            continue
        record_type = to_text(item.get("type"))
        if not record_type:
            continue
        records.append(
            record_cls(
                type=record_type,
                start_date=_optional_date(item.get("startDate")),
                status=to_text(item.get("status")) or "ACTIVE",
                description=to_text(item.get("description")),
            )
        )
    return records


def parse_player(data: dict) -> Player:
    """
    Parse a roster player.

    Raises:
        ParseError: If the player has no id.
    """
    player_id = data.get("id")
    if not player_id:
        raise ParseError("Player without id")

    jersey = data.get("jerseyNumber")
    return Player(
        id=str(player_id),
        name=to_text(data.get("name")) or "",
        position=to_text(data.get("position")) or "",
        jersey_number=to_count(jersey, "jerseyNumber") if jersey is not None else None,
        team_id=to_text(data.get("teamId")) or to_text(data.get("primaryTeamId")),
        is_injured=to_bool(data.get("isInjured")),
        injury_description=to_text(data.get("injuryDescription")),
        is_sick=to_bool(data.get("isSick")),
        illness_description=to_text(data.get("illnessDescription")),
        injuries=_parse_records(data.get("injuries"), InjuryRecord),
        illnesses=_parse_records(data.get("illnesses"), IllnessRecord),
    )


def parse_training(data: dict) -> TrainingSession:
    """
    Parse a training session with its attendance register.

    Raises:
        ParseError: If the session has no id or no readable date.
    """
    session_id = data.get("id")
    if not session_id:
        raise ParseError("Training session without id")

    attendance = [
        AttendanceRecord(player_id=str(item["playerId"]), attended=to_bool(item.get("attended")))
        for item in _as_list(data.get("attendance"))
        if isinstance(item, dict) and item.get("playerId")
    ]
    return TrainingSession(
        id=str(session_id),
        date=parse_date(data.get("date")),
        attendance=attendance,
        team_id=to_text(data.get("teamId")),
    )


def parse_many(raw: Any, parser: Any, label: str) -> list:
    """
    Parse a list of records, skipping the ones that cannot be parsed.

    Args:
        raw: Decoded JSON list.
        parser: One of the parse_* functions.
        label: Record kind for log messages.

    Returns:
        Parsed models, in order.

    Raises:
        ParseError: If the payload is not a list at all.
    """
    if not isinstance(raw, list):
        raise ParseError(f"Expected a list of {label}, got {type(raw).__name__}")

    parsed = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object %s record", label)
            continue
        try:
            parsed.append(parser(item))
        except (ParseError, ValueError) as e:
            logger.warning("Skipping %s record: %s", label, e)
    return parsed
