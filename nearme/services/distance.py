"""Distance service."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import GeoLocation, LengthUnit, Measurement
from ..ports.distance import GeoDistancePort


@dataclass
class DistanceService:
    """Wrap the geo-distance primitive's result in a meters Measurement."""

    calculator: GeoDistancePort

    def calculate_distance(self, source: GeoLocation, destination: GeoLocation) -> Measurement:
        meters = self.calculator.distance_meters(source, destination)
        return Measurement(value=meters, unit=LengthUnit.METERS)
