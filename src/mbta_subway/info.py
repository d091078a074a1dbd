"""Human-readable answers about the MBTA subway."""

from .core.exceptions import TransitInfoError
from .core.models import AggregateReport, Route, Trip
from .core.service import SubwayService


def format_error(error: TransitInfoError) -> str:
    """Format an error the same way for every answer."""
    return f"An error occurred with status code {error.code}: {error.message}"


def format_route_names(routes: list[Route]) -> str:
    return ", ".join(route.long_name for route in routes)


def format_aggregate(report: AggregateReport) -> str:
    """Most stops, fewest stops, then one line per transfer station."""
    lines = [
        f"The route with the most stops is {report.most_stops.name} "
        f"with {report.most_stops.stop_count} stops.",
        f"The route with the fewest stops is {report.fewest_stops.name} "
        f"with {report.fewest_stops.stop_count} stops.",
        "The following stops connect two or more subway routes:",
    ]
    lines.extend(
        f" - {station.name}, which services the following lines: {', '.join(station.routes)}"
        for station in report.transfer_stations
    )
    return "\n".join(lines)


def format_trip(trip: Trip) -> str:
    """Intro line, then one line per line ridden."""
    if not trip.segments:
        return (
            f"{trip.origin} and {trip.destination} are the same stop, "
            "no travel is needed."
        )
    lines = [
        f"To get from {trip.origin} to {trip.destination}, take the following lines:"
    ]
    lines.extend(
        f" - {line} from {from_stop} to {to_stop}"
        for line, from_stop, to_stop in trip.segments
    )
    return "\n".join(lines)


class MBTAInfo:
    """Answers simple questions about the subway as text.

    Errors raised while answering are rendered as an error line instead of
    being raised.
    """

    def __init__(self, service: SubwayService | None = None):
        self.service = service or SubwayService.from_settings()

    def subway_route_names(self) -> str:
        """Long names of every subway route, comma separated."""
        try:
            return format_route_names(self.service.subway_routes())
        except TransitInfoError as e:
            return format_error(e)

    def aggregate_info(self) -> str:
        """Most/fewest stop routes and the transfer stations with their lines."""
        try:
            return format_aggregate(self.service.aggregate())
        except TransitInfoError as e:
            return format_error(e)

    def trip_summary(self, start: str, end: str) -> str:
        """Lines to ride between two stops, given by name or ID."""
        try:
            return format_trip(self.service.plan_trip(start, end))
        except TransitInfoError as e:
            return format_error(e)
