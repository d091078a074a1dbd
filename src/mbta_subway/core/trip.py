"""Minimum-transfer trip finding.

Only stops where a choice of line can change matter to the search: the start,
the end and every transfer station. Two of those nodes are adjacent when one
line serves both, and riding that line costs one hop however many stops lie
in between. A breadth-first search over this reduced graph therefore finds a
trip with the fewest line boardings, not the fewest stops or the shortest
travel time.

When several trips need the same number of boardings, the one returned
follows the order in which transfer stations were discovered.
"""

import logging
from collections import deque
from dataclasses import dataclass

from .exceptions import InternalError, ValidationError
from .graph import RouteStopIndex
from .models import Stop, TransferStation, Trip, TripStep, normalize_stop_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Node:
    """A search node: a stop name and the lines serving it."""

    key: str
    name: str
    lines: tuple[str, ...]


def find_trip(
    index: RouteStopIndex,
    transfer_stations: list[TransferStation],
    start: str,
    end: str,
) -> Trip:
    """Find a trip between two stops using as few lines as possible.

    Args:
        index: Route to stop association of the network
        transfer_stations: Transfer stations found in ``index``
        start: Starting stop name (case-insensitive) or ID
        end: Ending stop name (case-insensitive) or ID

    Returns:
        Trip starting at ``start`` and ending at ``end``

    Raises:
        ValidationError: If a stop cannot be found or no trip exists
        InternalError: If a stop is not served by any line
    """
    start_stop = index.find_stop(start)
    if start_stop is None:
        raise ValidationError(f"Starting stop {start} could not be found.")
    end_stop = index.find_stop(end)
    if end_stop is None:
        raise ValidationError(f"Ending stop {end} could not be found.")

    transfers = {
        normalize_stop_name(station.name): station for station in transfer_stations
    }
    start_node = _node_for(start_stop, index, transfers)
    end_node = _node_for(end_stop, index, transfers)

    # Unvisited nodes, in discovery order
    remaining = [end_node] + [
        _Node(key, station.name, station.routes)
        for key, station in transfers.items()
        if key not in (start_node.key, end_node.key)
    ]

    # node key -> (previous node, line ridden from it)
    parents: dict[str, tuple[_Node, str]] = {}
    queue = deque([start_node])

    while queue:
        current = queue.popleft()

        if current.key == end_node.key:
            trip = _reconstruct(current, start_node, parents)
            logger.debug(
                f"Found trip from {start_stop.name} to {end_stop.name} "
                f"with {len(trip.segments)} lines"
            )
            return trip

        for line in current.lines:
            discovered = [node for node in remaining if line in node.lines]
            if not discovered:
                continue
            remaining = [node for node in remaining if line not in node.lines]
            for node in discovered:
                parents[node.key] = (current, line)
                queue.append(node)

    raise ValidationError(
        f"No trip could be found from {start_stop.name} to {end_stop.name}."
    )


def _node_for(
    stop: Stop, index: RouteStopIndex, transfers: dict[str, TransferStation]
) -> _Node:
    """Build the search node for a stop, attributing it to its line(s)."""
    station = transfers.get(stop.key)
    if station is not None:
        return _Node(stop.key, stop.name, station.routes)

    routes = index.routes_serving(stop)
    if routes:
        return _Node(stop.key, stop.name, (routes[0].long_name,))

    raise InternalError(f"Stop {stop.name} is not served by any line.")


def _reconstruct(
    end_node: _Node, start_node: _Node, parents: dict[str, tuple[_Node, str]]
) -> Trip:
    """Follow parent links back to the start and return the trip in travel order."""
    steps = [TripStep(stop=end_node.name, line="")]
    key = end_node.key
    while key != start_node.key:
        previous, line = parents[key]
        steps.append(TripStep(stop=previous.name, line=line))
        key = previous.key
    steps.reverse()
    return Trip(steps=tuple(steps))
