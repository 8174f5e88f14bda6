"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DirectionsError,
    NearMeError,
    SearchError,
)
from .models import (
    CoordinateRegion,
    CoordinateSpan,
    DialOutcome,
    DirectionsRequest,
    GeoLocation,
    LengthUnit,
    LocalSearchRequest,
    MapItem,
    Measurement,
    ResultType,
    Route,
    RouteStep,
    TransportType,
)

__all__ = [
    # Models
    "GeoLocation",
    "MapItem",
    "CoordinateSpan",
    "CoordinateRegion",
    "TransportType",
    "DirectionsRequest",
    "Route",
    "RouteStep",
    "LengthUnit",
    "Measurement",
    "ResultType",
    "LocalSearchRequest",
    "DialOutcome",
    # Errors
    "NearMeError",
    "DirectionsError",
    "SearchError",
    "ConfigurationError",
]
