"""Orchestration of API fetches and network analysis."""

import logging

from ..config import Settings
from .analysis import fewest_stops, find_transfer_stations, most_stops
from .client import MBTAClient
from .graph import RouteStopIndex, build_route_stop_index
from .models import AggregateReport, Route, Trip
from .trip import find_trip

logger = logging.getLogger(__name__)


class SubwayService:
    """Answers questions about the subway network.

    Every call fetches fresh data and builds a new index; nothing is cached
    between calls.
    """

    def __init__(self, client: MBTAClient, max_workers: int = 8):
        """Initialize the service.

        Args:
            client: API client
            max_workers: Concurrent stop requests when building the network
        """
        self.client = client
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SubwayService":
        """Create a service from settings, loading them from the environment if omitted."""
        settings = settings or Settings.from_env()
        return cls(MBTAClient(settings), max_workers=settings.max_workers)

    def subway_routes(self) -> list[Route]:
        """Fetch the light rail and heavy rail routes."""
        return self.client.get_subway_routes()

    def build_index(self) -> RouteStopIndex:
        """Fetch subway routes and their stops and build the route/stop index."""
        routes = self.subway_routes()
        return build_route_stop_index(
            routes, self.client.get_route_stops, max_workers=self.max_workers
        )

    def aggregate(self) -> AggregateReport:
        """Compute the most/fewest stop routes and the transfer stations."""
        index = self.build_index()
        return AggregateReport(
            most_stops=most_stops(index),
            fewest_stops=fewest_stops(index),
            transfer_stations=find_transfer_stations(index),
        )

    def plan_trip(self, start: str, end: str) -> Trip:
        """Find a minimum-transfer trip between two stop names or IDs."""
        index = self.build_index()
        logger.info(f"Planning trip from {start} to {end}")
        return find_trip(index, find_transfer_stations(index), start, end)
