"""Geo-distance adapter built on geopy.distance."""

from __future__ import annotations

from dataclasses import dataclass, field

from geopy.distance import geodesic, great_circle

from ...config import DistanceConfig, get_config
from ...domain.models import GeoLocation


@dataclass
class GeopyDistanceAdapter:
    """Straight-line distance between two points.

    Uses the WGS-84 geodesic by default, or the spherical great-circle
    formula when configured. Altitude is ignored, so two points at the
    same latitude/longitude are always 0 m apart.

    Attributes:
        config: Distance configuration
    """

    config: DistanceConfig = field(default_factory=lambda: get_config().distance)

    def distance_meters(self, a: GeoLocation, b: GeoLocation) -> float:
        if self.config.method == "great_circle":
            return great_circle(a.lat_lon, b.lat_lon).meters
        return geodesic(a.lat_lon, b.lat_lon).meters
