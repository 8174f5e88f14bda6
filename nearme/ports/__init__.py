"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the services and the external
systems they drive: the host URL handler, routing and search
providers, and the geo-distance primitive. Services depend on these
protocols only, so every provider can be replaced by a fake in tests.
"""

from .dialer import DialCapabilityPort, DialOpenerPort
from .distance import GeoDistancePort
from .routing import RoutingClientPort
from .search import LocalSearchClientPort

__all__ = [
    # Dialer
    "DialCapabilityPort",
    "DialOpenerPort",
    # Routing
    "RoutingClientPort",
    # Search
    "LocalSearchClientPort",
    # Distance
    "GeoDistancePort",
]
