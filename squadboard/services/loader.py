"""Dashboard loading with fallback and stale-result discarding."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from ..analysis.dashboard import (
    DashboardSummary,
    compute_dashboard_summary,
    empty_dashboard_summary,
)
from .base import DataServiceError
from .team_data import TeamData, TeamDataClient


logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    """
    What a dashboard view renders after a load.

    Attributes:
        summary: The computed summary, all zeros when loading failed.
        data: The fetched collections, empty when loading failed.
        error: Message for the failure banner, None on success.
    """

    summary: DashboardSummary = field(default_factory=empty_dashboard_summary)
    data: TeamData = field(default_factory=TeamData)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardLoader:
    """
    Loads team data and computes the dashboard for a view.

    Every load is tagged with a generation number. Calling ``cancel`` (the
    view went away, or the selected team changed) makes any load that is
    still in flight return None instead of its result.
    """

    def __init__(self, client: TeamDataClient) -> None:
        self.client = client
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def cancel(self) -> None:
        """Discard the results of every load currently in flight."""
        with self._lock:
            self._generation += 1

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def load(self, team_id: Optional[str] = None, refresh: bool = False) -> Optional[DashboardState]:
        """
        Fetch data and compute the dashboard summary.

        Args:
            team_id: Team to load.
            refresh: Bypass the response cache (used by retry).

        Returns:
            DashboardState, with the empty summary and an error message if
            the data service failed; None if the load was cancelled while
            in flight.
        """
        generation = self.generation

        try:
            data = self.client.fetch_all(team_id, use_cache=not refresh)
        except DataServiceError as e:
            logger.error("Failed to load dashboard data for team %s: %s", team_id, e)
            state = DashboardState(error=str(e) or "Failed to load dashboard data")
        else:
            state = DashboardState(
                summary=compute_dashboard_summary(data.players, data.games, data.trainings),
                data=data,
            )

        if not self._is_current(generation):
            logger.debug("Discarding stale dashboard load for team %s", team_id)
            return None
        return state
