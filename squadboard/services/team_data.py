"""Client for the external team data service."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..analysis.ledger import InvalidIntervalError, build_ledger
from ..analysis.minutes import recalculate_minutes
from ..models import Game, GameStat, Player, TrainingSession
from .base import API_BASE_URL, BaseClient, DataServiceError
from .parsing import parse_game, parse_many, parse_player, parse_training


logger = logging.getLogger(__name__)


@dataclass
class TeamData:
    """The three collections the dashboard is computed from."""

    players: list[Player] = field(default_factory=list)
    games: list[Game] = field(default_factory=list)
    trainings: list[TrainingSession] = field(default_factory=list)


@dataclass
class SaveReport:
    """
    Outcome of writing recalculated minutes back to the service.

    Attributes:
        saved: Player IDs whose stat line was saved.
        failed: Player ID to error message for the ones that were not.
    """

    saved: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Check if every save succeeded."""
        return not self.failed


def stat_payload(stat: GameStat, minutes: int) -> dict:
    """
    Body for saving one player's stat line.

    Args:
        stat: The stat line.
        minutes: Recalculated minutes to store.

    Returns:
        JSON-serialisable payload in the service's field names.
    """
    substitutions = [
        {
            key: value
            for key, value in (
                ("inMinute", entry.in_minute),
                ("outMinute", entry.out_minute),
                ("replacedBy", entry.replaced_by),
            )
            if value is not None
        }
        for entry in stat.substitutions
    ]
    return {
        "playerId": stat.player_id,
        "minutes": minutes,
        "goals": stat.goals,
        "assists": stat.assists,
        "yellowCards": stat.yellow_cards,
        "redCards": stat.red_cards,
        "rating": stat.rating,
        "started": stat.started,
        "substitutionMinute": stat.substitution_minute,
        "substitutionInMinute": stat.substitution_in_minute,
        "substitutions": json.dumps(substitutions) if substitutions else None,
    }


class TeamDataClient(BaseClient):
    """
    Fetches players, games and trainings for one team.

    Every collection is requested with an explicit ``team_id`` so the
    caller decides the scope, never ambient state.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        cache_dir: Optional[Path] = None,
        cache_ttl_minutes: int = 5,
        timeout_seconds: float = 15.0,
        max_workers: int = 3,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Root URL of the team data service.
            cache_dir: Directory for caching responses.
            cache_ttl_minutes: Cache time-to-live in minutes.
            timeout_seconds: Per-request timeout.
            max_workers: Threads used by fetch_all.
        """
        super().__init__(
            base_url=base_url,
            cache_dir=cache_dir,
            cache_ttl_minutes=cache_ttl_minutes,
            timeout_seconds=timeout_seconds,
        )
        self.max_workers = max_workers

    @staticmethod
    def _params(team_id: Optional[str]) -> dict:
        return {"teamId": team_id} if team_id else {}

    def fetch_players(self, team_id: Optional[str] = None, use_cache: bool = True) -> list[Player]:
        """
        Fetch the roster.

        Raises:
            FetchError: If the request fails.
            ParseError: If the response is not a list.
        """
        data = self.get_json("players", params=self._params(team_id), use_cache=use_cache)
        return parse_many(data, parse_player, "player")

    def fetch_games(self, team_id: Optional[str] = None, use_cache: bool = True) -> list[Game]:
        """
        Fetch games with their embedded player stats.

        Raises:
            FetchError: If the request fails.
            ParseError: If the response is not a list.
        """
        data = self.get_json("games", params=self._params(team_id), use_cache=use_cache)
        return parse_many(data, parse_game, "game")

    def fetch_trainings(
        self, team_id: Optional[str] = None, use_cache: bool = True
    ) -> list[TrainingSession]:
        """
        Fetch training sessions with their attendance registers.

        Raises:
            FetchError: If the request fails.
            ParseError: If the response is not a list.
        """
        data = self.get_json("trainings", params=self._params(team_id), use_cache=use_cache)
        return parse_many(data, parse_training, "training")

    def fetch_all(self, team_id: Optional[str] = None, use_cache: bool = True) -> TeamData:
        """
        Fetch all three collections concurrently.

        Args:
            team_id: Team to fetch for.
            use_cache: Whether to use cached data if available.

        Returns:
            TeamData with players, games and trainings.

        Raises:
            DataServiceError: If any of the three requests fails.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            players = pool.submit(self.fetch_players, team_id, use_cache)
            games = pool.submit(self.fetch_games, team_id, use_cache)
            trainings = pool.submit(self.fetch_trainings, team_id, use_cache)
            data = TeamData(
                players=players.result(),
                games=games.result(),
                trainings=trainings.result(),
            )

        logger.info(
            "Fetched %d players, %d games, %d trainings for team %s",
            len(data.players),
            len(data.games),
            len(data.trainings),
            team_id or "(all)",
        )
        return data

    def save_stat(self, game_id: str, stat: GameStat, minutes: int) -> None:
        """
        Save one player's stat line with the given minutes.

        Raises:
            FetchError: If the request fails.
        """
        self.post_json(f"games/{game_id}/stats", stat_payload(stat, minutes))

    def save_minutes(self, game: Game) -> SaveReport:
        """
        Recalculate every player's minutes and write them back.

        Each player is saved with its own request. A stat line whose
        substitutions break the ledger rules is not sent; it is recorded as
        failed like a rejected request, and the remaining players are still
        saved.

        Args:
            game: The game whose stats to save.

        Returns:
            SaveReport listing saved and failed players.
        """
        report = SaveReport()
        minutes = recalculate_minutes(game)

        for stat in game.stats:
            try:
                build_ledger(stat, game.duration)
                self.save_stat(game.id, stat, minutes[stat.player_id])
            except (DataServiceError, InvalidIntervalError) as e:
                logger.error("Failed to save stats for %s in game %s: %s", stat.player_id, game.id, e)
                report.failed[stat.player_id] = str(e)
            else:
                report.saved.append(stat.player_id)

        return report
