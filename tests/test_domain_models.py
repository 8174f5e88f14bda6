"""Tests for the domain models and errors."""

import pytest

from nearme.domain.errors import DirectionsError, NearMeError, SearchError
from nearme.domain.models import (
    CoordinateRegion,
    CoordinateSpan,
    GeoLocation,
    LengthUnit,
    Measurement,
    ResultType,
    Route,
    TransportType,
)


@pytest.mark.parametrize(
    "lat, lon",
    [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)],
)
def test_geolocation_rejects_out_of_range(lat, lon):
    with pytest.raises(ValueError):
        GeoLocation(lat, lon)


def test_geolocation_is_immutable():
    location = GeoLocation(48.8566, 2.3522)
    with pytest.raises(AttributeError):
        location.latitude = 0.0  # type: ignore[misc]


def test_span_rejects_negative_delta():
    with pytest.raises(ValueError):
        CoordinateSpan(latitude_delta=-0.1, longitude_delta=0.1)


class TestCoordinateRegion:
    @pytest.fixture
    def region(self):
        return CoordinateRegion(
            center=GeoLocation(37.7749, -122.4194),
            span=CoordinateSpan(latitude_delta=0.2, longitude_delta=0.4),
        )

    def test_bounding_box(self, region):
        south, west = region.south_west
        north, east = region.north_east

        assert south == pytest.approx(37.6749)
        assert north == pytest.approx(37.8749)
        assert west == pytest.approx(-122.6194)
        assert east == pytest.approx(-122.2194)

    def test_bounding_box_is_clamped(self):
        region = CoordinateRegion(
            center=GeoLocation(89.9, 179.9),
            span=CoordinateSpan(latitude_delta=1.0, longitude_delta=1.0),
        )

        assert region.north_east == (90.0, 180.0)

    def test_contains(self, region):
        assert region.contains(GeoLocation(37.78, -122.41))
        assert not region.contains(GeoLocation(40.7128, -74.0060))

    def test_equality_compares_every_field(self, region):
        shifted = CoordinateRegion(
            center=GeoLocation(37.7749, -122.0),
            span=region.span,
        )

        assert region == CoordinateRegion(region.center, region.span)
        assert region != shifted


class TestMeasurement:
    def test_defaults_to_meters(self):
        assert Measurement(12.0).unit == LengthUnit.METERS

    def test_converted_to_kilometers(self):
        result = Measurement(1500.0).converted(LengthUnit.KILOMETERS)

        assert result.unit == LengthUnit.KILOMETERS
        assert result.value == pytest.approx(1.5)

    def test_converted_miles_to_meters(self):
        result = Measurement(1.0, LengthUnit.MILES).converted(LengthUnit.METERS)

        assert result.value == pytest.approx(1609.344)

    def test_converted_to_same_unit_returns_self(self):
        measurement = Measurement(3.0)
        assert measurement.converted(LengthUnit.METERS) is measurement

    def test_str(self):
        assert str(Measurement(5.0)) == "5.0 m"


def test_route_distance_measurement():
    route = Route(
        name="Market St",
        distance_meters=820.0,
        expected_travel_time_seconds=600.0,
        transport_type=TransportType.WALKING,
    )

    assert route.distance == Measurement(820.0, LengthUnit.METERS)
    assert route.polyline == ()
    assert route.steps == ()


def test_result_type_flags_combine():
    both = ResultType.ADDRESS | ResultType.POINT_OF_INTEREST

    assert ResultType.POINT_OF_INTEREST & both
    assert not ResultType.ADDRESS & ResultType.POINT_OF_INTEREST


class TestErrors:
    def test_str_includes_cause(self):
        error = SearchError("Nominatim search failed", cause=TimeoutError("slow"))

        assert str(error) == "Nominatim search failed: slow"

    def test_str_without_cause(self):
        assert str(DirectionsError("No route")) == "No route"

    def test_errors_share_a_base(self):
        error = DirectionsError("boom", source="A", destination="B")

        assert isinstance(error, NearMeError)
        assert isinstance(error, Exception)
        assert error.source == "A"
