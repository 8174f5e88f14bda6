"""Immutable domain models for the NearMe map utilities.

All models are frozen dataclasses with slots. They carry no behavior
beyond validation and small derived properties, and none of them is
mutated once built: every value lives only as long as the call that
produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Optional, Tuple


class TransportType(Enum):
    """Travel mode used when asking a routing service for directions."""

    WALKING = auto()
    AUTOMOBILE = auto()


class ResultType(Flag):
    """Kinds of results a local search may return."""

    ADDRESS = auto()
    POINT_OF_INTEREST = auto()


class DialOutcome(Enum):
    """What happened when a phone call was requested.

    ATTEMPTED: the dial target was handed to the opener.
    INCAPABLE: the device reported it cannot place calls.
    INVALID_INPUT: no valid dial target could be built.
    """

    ATTEMPTED = auto()
    INCAPABLE = auto()
    INVALID_INPUT = auto()


class LengthUnit(Enum):
    """Length units, valued by their size in meters."""

    METERS = 1.0
    KILOMETERS = 1000.0
    FEET = 0.3048
    MILES = 1609.344

    @property
    def symbol(self) -> str:
        return _LENGTH_SYMBOLS[self]


_LENGTH_SYMBOLS = {
    LengthUnit.METERS: "m",
    LengthUnit.KILOMETERS: "km",
    LengthUnit.FEET: "ft",
    LengthUnit.MILES: "mi",
}


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """A single fixed point on the globe.

    Attributes:
        latitude: Degrees north, in [-90, 90]
        longitude: Degrees east, in [-180, 180]
        altitude: Meters above sea level, if known
        horizontal_accuracy: Radius of uncertainty in meters, if known
    """

    latitude: float
    longitude: float
    altitude: Optional[float] = None
    horizontal_accuracy: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    @property
    def lat_lon(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class MapItem:
    """A named point on the map, such as a place returned by a search.

    Attributes:
        name: Display name of the place
        location: Coordinates of the place
        phone_number: Contact number, when the provider knows one
        url: Website of the place, when known
        category: Provider category (e.g. 'restaurant', 'museum')
        address: Human-readable address
    """

    name: str
    location: GeoLocation
    phone_number: Optional[str] = None
    url: Optional[str] = None
    category: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CoordinateSpan:
    """Height and width of a map region, in degrees."""

    latitude_delta: float
    longitude_delta: float

    def __post_init__(self) -> None:
        if self.latitude_delta < 0 or self.longitude_delta < 0:
            raise ValueError(
                "Span deltas must be non-negative, got "
                f"({self.latitude_delta}, {self.longitude_delta})"
            )


@dataclass(frozen=True, slots=True)
class CoordinateRegion:
    """The area of the map currently visible to the user.

    Attributes:
        center: Center point of the region
        span: Height and width of the region around the center
    """

    center: GeoLocation
    span: CoordinateSpan

    @property
    def south_west(self) -> Tuple[float, float]:
        return (
            max(-90.0, self.center.latitude - self.span.latitude_delta / 2),
            max(-180.0, self.center.longitude - self.span.longitude_delta / 2),
        )

    @property
    def north_east(self) -> Tuple[float, float]:
        return (
            min(90.0, self.center.latitude + self.span.latitude_delta / 2),
            min(180.0, self.center.longitude + self.span.longitude_delta / 2),
        )

    def contains(self, location: GeoLocation) -> bool:
        """Check whether a point falls inside the region's bounding box."""
        south, west = self.south_west
        north, east = self.north_east
        return south <= location.latitude <= north and west <= location.longitude <= east


@dataclass(frozen=True, slots=True)
class Measurement:
    """A length paired with its unit."""

    value: float
    unit: LengthUnit = LengthUnit.METERS

    def converted(self, unit: LengthUnit) -> Measurement:
        """Return the same length expressed in another unit."""
        if unit is self.unit:
            return self
        return Measurement(value=self.value * self.unit.value / unit.value, unit=unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"


@dataclass(frozen=True, slots=True)
class RouteStep:
    """One maneuver along a route."""

    instructions: str
    distance_meters: float


@dataclass(frozen=True, slots=True)
class Route:
    """A path between two map items, as returned by a routing service.

    Attributes:
        name: Short description, usually the main roads taken
        distance_meters: Total length of the route
        expected_travel_time_seconds: Estimated travel time
        transport_type: Travel mode the route was computed for
        polyline: Ordered points tracing the route
        steps: Turn-by-turn maneuvers
    """

    name: str
    distance_meters: float
    expected_travel_time_seconds: float
    transport_type: TransportType
    polyline: Tuple[GeoLocation, ...] = field(default_factory=tuple)
    steps: Tuple[RouteStep, ...] = field(default_factory=tuple)

    @property
    def distance(self) -> Measurement:
        return Measurement(self.distance_meters, LengthUnit.METERS)


@dataclass(frozen=True, slots=True)
class DirectionsRequest:
    """Request for routes between two map items."""

    source: MapItem
    destination: MapItem
    transport_type: TransportType = TransportType.WALKING


@dataclass(frozen=True, slots=True)
class LocalSearchRequest:
    """Natural-language search bounded to a map region."""

    natural_language_query: str
    region: CoordinateRegion
    result_types: ResultType = ResultType.POINT_OF_INTEREST
