"""Data models for the squad dashboard."""

from .player import IllnessRecord, InjuryRecord, Player
from .game import (
    DEFAULT_GAME_DURATION,
    Game,
    GameStat,
    MatchResult,
    Outcome,
    SubstitutionEntry,
)
from .training import AttendanceRecord, TrainingSession

__all__ = [
    # Player
    "IllnessRecord",
    "InjuryRecord",
    "Player",
    # Game
    "DEFAULT_GAME_DURATION",
    "Game",
    "GameStat",
    "MatchResult",
    "Outcome",
    "SubstitutionEntry",
    # Training
    "AttendanceRecord",
    "TrainingSession",
]
