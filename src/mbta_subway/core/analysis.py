"""Transfer station detection and stop count statistics."""

import operator
from collections.abc import Callable

from .graph import RouteStopIndex
from .models import LineStopCount, TransferStation


def find_transfer_stations(index: RouteStopIndex) -> list[TransferStation]:
    """Find stop names served by more than one route.

    Stops are joined by their normalized name rather than their ID, so two
    platforms reporting the same name count as one station. Stations are
    returned in the order their names are first seen.
    """
    # normalized name -> (display name, route long names in first-seen order)
    served_by: dict[str, tuple[str, list[str]]] = {}

    for route, stops in index.items():
        for stop in stops:
            _name, routes = served_by.setdefault(stop.key, (stop.name, []))
            if route.long_name not in routes:
                routes.append(route.long_name)

    return [
        TransferStation(name=name, routes=tuple(routes))
        for name, routes in served_by.values()
        if len(routes) > 1
    ]


def most_stops(index: RouteStopIndex) -> LineStopCount:
    """Route(s) serving the most stops; ties are joined into one name."""
    return _extreme_stop_count(index, operator.gt)


def fewest_stops(index: RouteStopIndex) -> LineStopCount:
    """Route(s) serving the fewest stops; ties are joined into one name."""
    return _extreme_stop_count(index, operator.lt)


def _extreme_stop_count(
    index: RouteStopIndex, better: Callable[[int, int], bool]
) -> LineStopCount:
    extreme: LineStopCount | None = None

    for route, stops in index.items():
        count = len(stops)
        if extreme is None or better(count, extreme.stop_count):
            extreme = LineStopCount(name=route.long_name, stop_count=count)
        elif count == extreme.stop_count:
            extreme = LineStopCount(
                name=f"{extreme.name}, {route.long_name}", stop_count=count
            )

    return extreme or LineStopCount()
