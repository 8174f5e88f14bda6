"""Distance port - Abstraction for the geo-distance primitive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation


class GeoDistancePort(Protocol):
    """Port computing the straight-line distance between two points.

    Implementation: adapters/distance/geopy_adapter.py
    """

    def distance_meters(self, a: GeoLocation, b: GeoLocation) -> float:
        """Distance between two points, in meters (never negative)."""
        ...
