"""Player data model for the squad dashboard."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


ACTIVE_STATUS = "ACTIVE"


@dataclass
class InjuryRecord:
    """
    A medical record for an injury.

    Attributes:
        type: Kind of injury (e.g. "Hamstring").
        start_date: Date the injury started, if known.
        status: Record status, "ACTIVE" until the player recovers.
        description: Optional free-text notes.
    """

    type: str
    start_date: Optional[date] = None
    status: str = ACTIVE_STATUS
    description: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Check if the injury is still ongoing."""
        return self.status.upper() == ACTIVE_STATUS


@dataclass
class IllnessRecord:
    """A medical record for an illness."""

    type: str
    start_date: Optional[date] = None
    status: str = ACTIVE_STATUS
    description: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Check if the illness is still ongoing."""
        return self.status.upper() == ACTIVE_STATUS


@dataclass
class Player:
    """
    Represents a player on the club roster.

    Attributes:
        id: Unique identifier for the player.
        name: Player's display name.
        position: Playing position as entered by the coach.
        jersey_number: Shirt number, if assigned.
        team_id: Team the player primarily belongs to.
        is_injured: Quick flag set from the roster screen.
        injury_description: Free text accompanying the injury flag.
        is_sick: Quick flag set from the roster screen.
        illness_description: Free text accompanying the sickness flag.
        injuries: Injury records delivered with the player.
        illnesses: Illness records delivered with the player.
    """

    id: str
    name: str
    position: str = ""
    jersey_number: Optional[int] = None
    team_id: Optional[str] = None
    is_injured: bool = False
    injury_description: Optional[str] = None
    is_sick: bool = False
    illness_description: Optional[str] = None
    injuries: list[InjuryRecord] = field(default_factory=list)
    illnesses: list[IllnessRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate player data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if self.jersey_number is not None and self.jersey_number < 0:
            raise ValueError("jersey_number cannot be negative")

    @property
    def active_injuries(self) -> list[InjuryRecord]:
        """Injury records that are still active."""
        return [i for i in self.injuries if i.is_active]

    @property
    def active_illnesses(self) -> list[IllnessRecord]:
        """Illness records that are still active."""
        return [i for i in self.illnesses if i.is_active]

    @property
    def injured(self) -> bool:
        """Check if the player is unavailable through injury."""
        return bool(self.active_injuries) or self.is_injured

    @property
    def sick(self) -> bool:
        """Check if the player is unavailable through illness."""
        return bool(self.active_illnesses) or self.is_sick
