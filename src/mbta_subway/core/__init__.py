"""Core subway network functionality."""

from .analysis import fewest_stops, find_transfer_stations, most_stops
from .client import MBTAClient
from .exceptions import (
    InternalError,
    RemoteError,
    TransitInfoError,
    ValidationError,
)
from .graph import RouteStopIndex, build_route_stop_index
from .models import (
    AggregateReport,
    LineStopCount,
    Route,
    Stop,
    TransferStation,
    Trip,
    TripStep,
)
from .service import SubwayService
from .trip import find_trip

__all__ = [
    "AggregateReport",
    "LineStopCount",
    "Route",
    "RouteStopIndex",
    "Stop",
    "TransferStation",
    "Trip",
    "TripStep",
    "MBTAClient",
    "SubwayService",
    "build_route_stop_index",
    "find_transfer_stations",
    "most_stops",
    "fewest_stops",
    "find_trip",
    "TransitInfoError",
    "RemoteError",
    "ValidationError",
    "InternalError",
]
