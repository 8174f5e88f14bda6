"""Tests for the distance service and geopy adapter."""

from unittest.mock import MagicMock

import pytest

from nearme.adapters.distance import GeopyDistanceAdapter
from nearme.config import DistanceConfig
from nearme.domain.models import GeoLocation, LengthUnit
from nearme.services.distance import DistanceService

SAN_FRANCISCO = GeoLocation(37.7749, -122.4194)
NEARBY = GeoLocation(37.7849, -122.4294)


@pytest.fixture
def service():
    return DistanceService(GeopyDistanceAdapter(DistanceConfig()))


def test_san_francisco_pair_is_about_1_4_km(service):
    result = service.calculate_distance(SAN_FRANCISCO, NEARBY)

    assert result.unit == LengthUnit.METERS
    assert 1300 <= result.value <= 1500


def test_same_point_is_zero(service):
    result = service.calculate_distance(SAN_FRANCISCO, SAN_FRANCISCO)

    assert result.value == 0
    assert result.unit == LengthUnit.METERS


def test_altitude_is_ignored(service):
    high = GeoLocation(37.7749, -122.4194, altitude=300.0, horizontal_accuracy=5.0)

    assert service.calculate_distance(SAN_FRANCISCO, high).value == 0


def test_is_deterministic_and_symmetric(service):
    first = service.calculate_distance(SAN_FRANCISCO, NEARBY)
    second = service.calculate_distance(SAN_FRANCISCO, NEARBY)
    reverse = service.calculate_distance(NEARBY, SAN_FRANCISCO)

    assert first == second
    assert reverse.value == pytest.approx(first.value)


def test_great_circle_method_is_close_to_geodesic():
    geodesic = GeopyDistanceAdapter(DistanceConfig(method="geodesic"))
    great_circle = GeopyDistanceAdapter(DistanceConfig(method="great_circle"))

    a = geodesic.distance_meters(SAN_FRANCISCO, NEARBY)
    b = great_circle.distance_meters(SAN_FRANCISCO, NEARBY)

    assert b == pytest.approx(a, rel=0.01)


def test_service_wraps_primitive_value_in_meters():
    calculator = MagicMock()
    calculator.distance_meters.return_value = 42.5
    service = DistanceService(calculator)

    result = service.calculate_distance(SAN_FRANCISCO, NEARBY)

    assert result.value == 42.5
    assert result.unit == LengthUnit.METERS
    calculator.distance_meters.assert_called_once_with(SAN_FRANCISCO, NEARBY)
