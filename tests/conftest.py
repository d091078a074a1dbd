"""Test configuration and fixtures."""

import pytest

from mbta_subway.core.graph import RouteStopIndex
from mbta_subway.core.models import Route, Stop

# route id -> (long name, type, [(stop id, stop name), ...])
SAMPLE_NETWORK = {
    "Red": (
        "Red Line",
        1,
        [
            ("place-alfcl", "Alewife"),
            ("place-knncl", "Kendall/MIT"),
            ("place-pktrm", "Park Street"),
            ("place-dwnxg", "Downtown Crossing"),
            ("place-asmnl", "Ashmont"),
        ],
    ),
    "Mattapan": (
        "Mattapan Trolley",
        0,
        [("place-asmnl", "Ashmont"), ("place-matt", "Mattapan")],
    ),
    "Orange": (
        "Orange Line",
        1,
        [
            ("place-rugg", "Ruggles"),
            ("place-dwnxg", "Downtown Crossing"),
            ("place-state", "State"),
            ("place-haecl", "Haymarket"),
        ],
    ),
    "Blue": (
        "Blue Line",
        1,
        [
            ("place-gover", "Government Center"),
            ("place-state", "State"),
            ("place-wondl", "Wonderland"),
        ],
    ),
    "Green-E": (
        "Green Line E",
        0,
        [
            ("place-nuniv", "Northeastern University"),
            ("place-coecl", "Copley"),
            ("place-pktrm", "Park Street"),
            ("place-gover", "Government Center"),
            ("place-haecl", "Haymarket"),
        ],
    ),
    "Green-D": (
        "Green Line D",
        0,
        [
            ("place-river", "Riverside"),
            ("place-kencl", "Kenmore"),
            ("place-coecl", "Copley"),
            ("place-pktrm", "Park Street"),
            ("place-gover", "Government Center"),
        ],
    ),
}


def route_resource(route_id: str, long_name: str, route_type: int) -> dict:
    """A route as returned by /routes."""
    return {
        "type": "route",
        "id": route_id,
        "attributes": {
            "long_name": long_name,
            "short_name": "",
            "type": route_type,
            "color": "DA291C",
        },
        "links": {"self": f"/routes/{route_id}"},
    }


def stop_resource(stop_id: str, name: str) -> dict:
    """A stop as returned by /stops."""
    return {
        "type": "stop",
        "id": stop_id,
        "attributes": {"name": name, "location_type": 1},
    }


@pytest.fixture
def routes_payload():
    """JSON:API payload for /routes, including a bus route."""
    data = [
        route_resource(route_id, long_name, route_type)
        for route_id, (long_name, route_type, _stops) in SAMPLE_NETWORK.items()
    ]
    data.append(route_resource("741", "Logan Airport Terminals - South Station", 3))
    return {"data": data, "jsonapi": {"version": "1.0"}}


@pytest.fixture
def stops_payloads():
    """JSON:API payloads for /stops keyed by route ID."""
    return {
        route_id: {
            "data": [stop_resource(stop_id, name) for stop_id, name in stops],
            "jsonapi": {"version": "1.0"},
        }
        for route_id, (_long_name, _route_type, stops) in SAMPLE_NETWORK.items()
    }


@pytest.fixture
def forbidden_payload():
    """The error envelope the MBTA API returns for a rejected key."""
    return {"errors": [{"status": "403", "code": "forbidden."}]}


@pytest.fixture
def sample_index():
    """Route/stop index of the sample network."""
    return RouteStopIndex(
        (
            Route(id=route_id, long_name=long_name, type=route_type),
            [Stop(id=stop_id, name=name) for stop_id, name in stops],
        )
        for route_id, (long_name, route_type, stops) in SAMPLE_NETWORK.items()
    )
