"""Access to the external team data service."""

from .base import (
    API_BASE_URL,
    CACHE_DIR,
    BaseClient,
    DataServiceError,
    FetchError,
    ParseError,
)
from .parsing import (
    parse_game,
    parse_game_stat,
    parse_player,
    parse_substitutions,
    parse_training,
)
from .team_data import SaveReport, TeamData, TeamDataClient
from .loader import DashboardLoader, DashboardState
from .sample import (
    SAMPLE_TEAM_ID,
    create_sample_games,
    create_sample_players,
    create_sample_team_data,
    create_sample_trainings,
)

__all__ = [
    # Base
    "API_BASE_URL",
    "CACHE_DIR",
    "BaseClient",
    "DataServiceError",
    "FetchError",
    "ParseError",
    # Parsing
    "parse_game",
    "parse_game_stat",
    "parse_player",
    "parse_substitutions",
    "parse_training",
    # Client
    "SaveReport",
    "TeamData",
    "TeamDataClient",
    # Loader
    "DashboardLoader",
    "DashboardState",
    # Sample data
    "SAMPLE_TEAM_ID",
    "create_sample_games",
    "create_sample_players",
    "create_sample_team_data",
    "create_sample_trainings",
]
