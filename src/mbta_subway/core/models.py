"""Data models for MBTA subway info."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Light rail (0) and heavy rail (1) make up the subway
SUBWAY_ROUTE_TYPES = (0, 1)


class Route(BaseModel):
    """Represents a transit line."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable MBTA route ID (e.g. 'Red')")
    long_name: str = Field(..., description="Display name (e.g. 'Red Line')")
    type: int = Field(..., description="Service type, 0 light rail, 1 heavy rail")
    short_name: str | None = Field(None, description="Short name (e.g. 'E')")
    color: str | None = Field(None, description="Hex color without '#'")

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Route":
        """Build a route from a JSON:API resource object."""
        attributes = resource.get("attributes") or {}
        return cls(
            id=resource["id"],
            long_name=attributes.get("long_name") or "",
            type=attributes.get("type", -1),
            short_name=attributes.get("short_name") or None,
            color=attributes.get("color") or None,
        )

    @property
    def is_subway(self) -> bool:
        return self.type in SUBWAY_ROUTE_TYPES

    def __str__(self) -> str:
        return self.long_name


class Stop(BaseModel):
    """Represents a station served by one or more routes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable MBTA stop ID (e.g. 'place-pktrm')")
    name: str = Field(..., description="Display name (e.g. 'Park Street')")

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> "Stop":
        """Build a stop from a JSON:API resource object."""
        attributes = resource.get("attributes") or {}
        return cls(id=resource["id"], name=attributes.get("name") or "")

    @property
    def key(self) -> str:
        """Name used to join stops across routes."""
        return normalize_stop_name(self.name)

    def matches(self, query: str) -> bool:
        """Check whether a user-supplied name or ID refers to this stop."""
        return self.id == query or self.key == normalize_stop_name(query)

    def __str__(self) -> str:
        return self.name


class TransferStation(BaseModel):
    """A stop name served by more than one route."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Stop name")
    routes: tuple[str, ...] = Field(
        default_factory=tuple, description="Long names of the routes serving it"
    )

    def __str__(self) -> str:
        return f"{self.name} ({', '.join(self.routes)})"


class LineStopCount(BaseModel):
    """A route name (or comma-joined tied names) and its number of stops."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Route long name, tied names joined by ', '")
    stop_count: int = Field(0, description="Number of stops")

    @property
    def names(self) -> list[str]:
        return self.name.split(", ") if self.name else []

    def __str__(self) -> str:
        return f"{self.name} ({self.stop_count} stops)"


class TripStep(BaseModel):
    """Board `line` at `stop`; exit at the next step's stop."""

    model_config = ConfigDict(frozen=True)

    stop: str = Field(..., description="Stop name")
    line: str = Field("", description="Line boarded here, empty at the destination")


class Trip(BaseModel):
    """A minimum-transfer trip between two stops."""

    model_config = ConfigDict(frozen=True)

    steps: tuple[TripStep, ...] = Field(..., min_length=1)

    @property
    def origin(self) -> str:
        return self.steps[0].stop

    @property
    def destination(self) -> str:
        return self.steps[-1].stop

    @property
    def segments(self) -> list[tuple[str, str, str]]:
        """List of (line, from stop, to stop) for each ride."""
        return [
            (step.line, step.stop, following.stop)
            for step, following in zip(self.steps, self.steps[1:])
        ]

    @property
    def transfer_count(self) -> int:
        return max(len(self.steps) - 2, 0)

    def __str__(self) -> str:
        return f"{self.origin} → {self.destination} ({len(self.segments)} lines)"


class AggregateReport(BaseModel):
    """Most/fewest stop statistics and transfer stations for a network."""

    model_config = ConfigDict(frozen=True)

    most_stops: LineStopCount
    fewest_stops: LineStopCount
    transfer_stations: list[TransferStation] = Field(default_factory=list)


def normalize_stop_name(name: str) -> str:
    """Normalize a stop name for case-insensitive matching."""
    return name.strip().upper()
