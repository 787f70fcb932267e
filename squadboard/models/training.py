"""Training session and attendance data models."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class AttendanceRecord:
    """Whether a player turned up to a training session."""

    player_id: str
    attended: bool = False


@dataclass
class TrainingSession:
    """
    A training session with its attendance register.

    Attributes:
        id: Unique identifier for the session.
        date: Session date.
        attendance: One record per registered player.
        team_id: The club team that trained.
    """

    id: str
    date: date
    attendance: list[AttendanceRecord] = field(default_factory=list)
    team_id: Optional[str] = None

    @property
    def has_attendance(self) -> bool:
        """Check if attendance was taken for this session."""
        return bool(self.attendance)

    @property
    def attended_count(self) -> int:
        """Number of players marked present."""
        return sum(1 for record in self.attendance if record.attended)
