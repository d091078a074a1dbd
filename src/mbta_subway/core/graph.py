"""Route to stop association for the subway network."""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from .models import Route, Stop

logger = logging.getLogger(__name__)


class RouteStopIndex:
    """Read-only mapping from route ID to the ordered stops served by that route.

    Routes are kept in insertion order alongside an ID to Route lookup table.
    A route with no stops is legal and simply contributes no edges.
    """

    def __init__(self, entries: Iterable[tuple[Route, Sequence[Stop]]] = ()):
        self._routes: dict[str, Route] = {}
        self._stops: dict[str, tuple[Stop, ...]] = {}

        for route, stops in entries:
            if route.id not in self._routes:
                self._routes[route.id] = route
                self._stops[route.id] = ()
            # Ordered set, keyed by stop ID
            merged = {stop.id: stop for stop in self._stops[route.id]}
            for stop in stops:
                merged.setdefault(stop.id, stop)
            self._stops[route.id] = tuple(merged.values())

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes.values())

    def stops_for(self, route: Route | str) -> tuple[Stop, ...]:
        """Ordered stops served by a route (or route ID)."""
        route_id = route.id if isinstance(route, Route) else route
        return self._stops[route_id]

    def items(self) -> Iterator[tuple[Route, tuple[Stop, ...]]]:
        """Iterate (route, stops) pairs in insertion order."""
        for route_id, route in self._routes.items():
            yield route, self._stops[route_id]

    def stops(self) -> Iterator[Stop]:
        """Iterate every (route, stop) occurrence's stop, route by route."""
        for _route, stops in self.items():
            yield from stops

    def find_stop(self, query: str) -> Stop | None:
        """Find a stop by exact ID, falling back to a case-insensitive name match.

        An ID match anywhere in the index wins over a name match.
        """
        for stop in self.stops():
            if stop.id == query:
                return stop
        for stop in self.stops():
            if stop.matches(query):
                return stop
        return None

    def routes_serving(self, stop: Stop) -> list[Route]:
        """Routes with a stop sharing ``stop``'s name."""
        return [
            route
            for route, stops in self.items()
            if any(candidate.key == stop.key for candidate in stops)
        ]

    def __contains__(self, route: object) -> bool:
        if isinstance(route, Route):
            return route.id in self._routes
        return route in self._routes

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteStopIndex({len(self)} routes)"


def build_route_stop_index(
    routes: Sequence[Route],
    fetch_stops: Callable[[Route], Sequence[Stop]],
    max_workers: int = 8,
) -> RouteStopIndex:
    """Fetch every route's stops concurrently and build the index.

    One fetch is issued per route. All of them must succeed: the first failure
    cancels the fetches that have not started yet and is re-raised.

    Args:
        routes: Routes to include, in the order they should be indexed
        fetch_stops: Callable returning the ordered stops for a route
        max_workers: Maximum number of concurrent fetches

    Returns:
        RouteStopIndex covering every route in ``routes``
    """
    if not routes:
        return RouteStopIndex()

    logger.info(f"Fetching stops for {len(routes)} routes")

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(routes)))) as executor:
        futures = [executor.submit(fetch_stops, route) for route in routes]
        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                for other in futures:
                    other.cancel()
                raise error

    index = RouteStopIndex(
        (route, future.result()) for route, future in zip(routes, futures)
    )
    logger.debug(f"Built {index!r}")
    return index
