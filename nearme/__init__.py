"""Top-level package for the NearMe map utilities.

Thin adapters between an application and the location services it
relies on: a phone dialer, a routing service, a geo-distance
primitive and a local point-of-interest search. The services live in
``nearme.services``; the free functions below are the usual entry
points.
"""

from .map_utilities import (
    calculate_directions,
    calculate_distance,
    make_call,
    perform_search,
)

__all__ = [
    "make_call",
    "calculate_directions",
    "calculate_distance",
    "perform_search",
]
