"""Unit tests for minimum-transfer trip finding."""

import itertools

import pytest

from mbta_subway.core.analysis import find_transfer_stations
from mbta_subway.core.exceptions import InternalError, ValidationError
from mbta_subway.core.graph import RouteStopIndex
from mbta_subway.core.models import Route, Stop, TripStep
from mbta_subway.core.trip import _node_for, find_trip


def _trip(index, start, end):
    return find_trip(index, find_transfer_stations(index), start, end)


class TestFindTrip:
    """Test find_trip on the sample network."""

    def test_two_line_trip(self):
        """Test the Red Line / Green Line E example."""
        index = RouteStopIndex(
            [
                (
                    Route(id="Red", long_name="Red Line", type=1),
                    [
                        Stop(id="place-pktrm", name="Park Street"),
                        Stop(id="place-knncl", name="Kendall/MIT"),
                    ],
                ),
                (
                    Route(id="Green-E", long_name="Green Line E", type=0),
                    [
                        Stop(id="place-nuniv", name="Northeastern University"),
                        Stop(id="place-pktrm", name="Park Street"),
                    ],
                ),
            ]
        )

        trip = _trip(index, "Northeastern University", "Kendall/MIT")

        assert list(trip.steps) == [
            TripStep(stop="Northeastern University", line="Green Line E"),
            TripStep(stop="Park Street", line="Red Line"),
            TripStep(stop="Kendall/MIT", line=""),
        ]

    def test_sample_network_trip(self, sample_index):
        trip = _trip(sample_index, "Northeastern University", "Kendall/MIT")

        assert trip.segments == [
            ("Green Line E", "Northeastern University", "Park Street"),
            ("Red Line", "Park Street", "Kendall/MIT"),
        ]

    def test_names_and_ids_give_same_trip(self, sample_index):
        by_name = _trip(sample_index, "Ruggles", "downtown crossing")
        by_id = _trip(sample_index, "place-rugg", "place-dwnxg")

        assert by_name == by_id
        assert by_id.segments == [("Orange Line", "Ruggles", "Downtown Crossing")]

    def test_trip_from_transfer_station(self, sample_index):
        trip = _trip(sample_index, "State", "Wonderland")
        assert trip.segments == [("Blue Line", "State", "Wonderland")]

    def test_trip_to_transfer_station(self, sample_index):
        trip = _trip(sample_index, "Alewife", "Copley")
        assert trip.segments == [
            ("Red Line", "Alewife", "Park Street"),
            ("Green Line E", "Park Street", "Copley"),
        ]

    def test_ties_follow_discovery_order(self, sample_index):
        """Test Mattapan to Wonderland, which has several four-line trips."""
        trip = _trip(sample_index, "Mattapan", "Wonderland")

        assert [step.stop for step in trip.steps] == [
            "Mattapan",
            "Ashmont",
            "Park Street",
            "Government Center",
            "Wonderland",
        ]
        assert [step.line for step in trip.steps] == [
            "Mattapan Trolley",
            "Red Line",
            "Green Line E",
            "Blue Line",
            "",
        ]

    def test_same_start_and_end(self, sample_index):
        trip = _trip(sample_index, "Park Street", "PARK STREET")
        assert list(trip.steps) == [TripStep(stop="Park Street", line="")]

    def test_same_non_transfer_stop(self, sample_index):
        trip = _trip(sample_index, "place-rugg", "Ruggles")
        assert len(trip.steps) == 1

    def test_trip_starts_and_ends_at_requested_stops(self, sample_index):
        stop_names = sorted({stop.name for stop in sample_index.stops()})

        for start, end in itertools.product(stop_names, repeat=2):
            trip = _trip(sample_index, start, end)
            assert trip.origin == start
            assert trip.destination == end
            assert trip.steps[-1].line == ""
            assert all(step.line for step in trip.steps[:-1])

    def test_unknown_start(self, sample_index):
        with pytest.raises(ValidationError) as exc_info:
            _trip(sample_index, "place-Downtown", "State")

        assert exc_info.value.code == 400
        assert exc_info.value.message == (
            "Starting stop place-Downtown could not be found."
        )

    def test_unknown_end(self, sample_index):
        with pytest.raises(ValidationError) as exc_info:
            _trip(sample_index, "Downtown Crossing", "Stte")

        assert exc_info.value.code == 400
        assert exc_info.value.message == "Ending stop Stte could not be found."


class TestDisconnectedNetwork:
    """Test trips on a network with two separate parts."""

    @pytest.fixture
    def index(self):
        return RouteStopIndex(
            [
                (
                    Route(id="Red", long_name="Red Line", type=1),
                    [Stop(id="a", name="Alewife"), Stop(id="b", name="Braintree")],
                ),
                (
                    Route(id="Mattapan", long_name="Mattapan Trolley", type=0),
                    [Stop(id="b2", name="Braintree"), Stop(id="c", name="Cedar Grove")],
                ),
                (
                    Route(id="Blue", long_name="Blue Line", type=1),
                    [Stop(id="d", name="Bowdoin"), Stop(id="e", name="Wonderland")],
                ),
            ]
        )

    def test_no_path(self, index):
        with pytest.raises(ValidationError) as exc_info:
            _trip(index, "Alewife", "Wonderland")

        assert exc_info.value.code == 400
        assert "No trip could be found from Alewife to Wonderland" in str(exc_info.value)

    def test_existence_is_symmetric(self, index):
        names = ["Alewife", "Braintree", "Cedar Grove", "Bowdoin", "Wonderland"]

        def exists(start, end):
            try:
                _trip(index, start, end)
            except ValidationError:
                return False
            return True

        for start, end in itertools.combinations(names, 2):
            assert exists(start, end) == exists(end, start)

        assert exists("Alewife", "Cedar Grove")
        assert not exists("Cedar Grove", "Bowdoin")

    def test_transfer_by_name_across_ids(self, index):
        trip = _trip(index, "Alewife", "Cedar Grove")
        assert trip.segments == [
            ("Red Line", "Alewife", "Braintree"),
            ("Mattapan Trolley", "Braintree", "Cedar Grove"),
        ]


class TestLineAttribution:
    """Test attributing stops to lines."""

    def test_stop_without_line_is_internal_error(self, sample_index):
        transfers = {
            station.name.upper(): station
            for station in find_transfer_stations(sample_index)
        }

        with pytest.raises(InternalError) as exc_info:
            _node_for(Stop(id="place-bbsta", name="Back Bay"), sample_index, transfers)

        assert exc_info.value.code == 500

    def test_transfer_station_uses_all_its_lines(self, sample_index):
        transfers = {
            station.name.upper(): station
            for station in find_transfer_stations(sample_index)
        }

        node = _node_for(sample_index.find_stop("State"), sample_index, transfers)
        assert node.lines == ("Orange Line", "Blue Line")

    def test_plain_stop_uses_its_first_line(self, sample_index):
        node = _node_for(sample_index.find_stop("Wonderland"), sample_index, {})
        assert node.lines == ("Blue Line",)
