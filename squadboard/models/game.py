"""Game, lineup and match statistics data models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


DEFAULT_GAME_DURATION = 90


class Outcome(Enum):
    """Result of a match from the club's point of view."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"
    UNDECIDED = "undecided"


@dataclass
class SubstitutionEntry:
    """
    One on/off-field interval in a player's ledger.

    A starter's first entry usually only carries ``out_minute``; a
    substitute's entries carry ``in_minute`` and, if taken off again,
    ``out_minute``.
    """

    in_minute: Optional[int] = None
    out_minute: Optional[int] = None
    replaced_by: Optional[str] = None


@dataclass
class GameStat:
    """
    Statistics for a single player in a single game.

    All counting fields default to 0. ``substitution_minute`` and
    ``substitution_in_minute`` hold the older single-substitution shape and
    are folded into ``substitutions`` before minutes are calculated.
    """

    player_id: str
    game_id: str
    player_name: Optional[str] = None
    minutes: int = 0
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    rating: Optional[int] = None
    started: bool = False
    substitutions: list[SubstitutionEntry] = field(default_factory=list)

    # Legacy single-substitution fields
    substitution_minute: Optional[int] = None
    substitution_in_minute: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate stats are non-negative and the rating is in range."""
        for field_name in ("minutes", "goals", "assists", "yellow_cards", "red_cards"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} cannot be negative")
        if self.rating is not None and not 1 <= self.rating <= 5:
            raise ValueError("rating must be between 1 and 5")


@dataclass
class Game:
    """
    Represents a match played by one of the club's teams.

    Attributes:
        id: Unique identifier for the game.
        date: Match date.
        opponent: Opponent name.
        score: Free-text result "<team>-<opponent>", None until entered.
        duration: Length of the match in minutes.
        stats: Per-player statistics, at most one per player.
        competition: Competition label (league, cup, friendly...).
        venue: Where the game was played.
        team_id: The club team that played.
    """

    id: str
    date: date
    opponent: str
    score: Optional[str] = None
    duration: int = DEFAULT_GAME_DURATION
    stats: list[GameStat] = field(default_factory=list)
    competition: Optional[str] = None
    venue: Optional[str] = None
    team_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate game data."""
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        seen: set[str] = set()
        for stat in self.stats:
            if stat.player_id in seen:
                raise ValueError(
                    f"duplicate stat for player {stat.player_id} in game {self.id}"
                )
            seen.add(stat.player_id)

    @property
    def has_stats(self) -> bool:
        """Check if any player statistics were recorded."""
        return bool(self.stats)

    def get_stat(self, player_id: str) -> Optional[GameStat]:
        """Get a player's stat line for this game."""
        return next((s for s in self.stats if s.player_id == player_id), None)


@dataclass
class MatchResult:
    """
    Canonical score of one game after reconciliation.

    Attributes:
        team_goals: Goals scored by the club.
        opponent_goals: Goals conceded.
        outcome: Win, loss, draw or undecided.
    """

    team_goals: int
    opponent_goals: int
    outcome: Outcome

    @property
    def is_decided(self) -> bool:
        """Check if the game counts towards the win/draw/loss record."""
        return self.outcome != Outcome.UNDECIDED
