"""Distance adapters - Implementations of GeoDistancePort.

Available implementations:
- GeopyDistanceAdapter: geodesic or great-circle distance via geopy
"""

from .geopy_adapter import GeopyDistanceAdapter

__all__ = ["GeopyDistanceAdapter"]
