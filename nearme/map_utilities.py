"""Map utility functions.

Module-level entry points for the four map operations. Each one
resolves its service from the process-wide container (or the one
passed in) and delegates to it:

- make_call: open the system dialer for a phone number
- calculate_directions: best walking route between two map items
- calculate_distance: straight-line distance in meters
- perform_search: points of interest inside the visible region
"""

from __future__ import annotations

from typing import List, Optional

from .container import Container, get_container
from .domain.models import (
    CoordinateRegion,
    DialOutcome,
    GeoLocation,
    MapItem,
    Measurement,
    Route,
)
from .services import DialerService, DirectionsService, DistanceService, SearchService


def make_call(phone: str, container: Optional[Container] = None) -> DialOutcome:
    """Open the system dialer for a phone number, if the device can call."""
    service: DialerService = (container or get_container()).resolve(DialerService)
    return service.make_call(phone)


async def calculate_directions(
    source: MapItem,
    destination: MapItem,
    container: Optional[Container] = None,
) -> Optional[Route]:
    """Return the best route between two map items, or None on any failure."""
    service: DirectionsService = (container or get_container()).resolve(DirectionsService)
    return await service.calculate_directions(source, destination)


def calculate_distance(
    source: GeoLocation,
    destination: GeoLocation,
    container: Optional[Container] = None,
) -> Measurement:
    service: DistanceService = (container or get_container()).resolve(DistanceService)
    return service.calculate_distance(source, destination)


async def perform_search(
    search_term: str,
    visible_region: Optional[CoordinateRegion],
    container: Optional[Container] = None,
) -> List[MapItem]:
    """Search points of interest in the visible region.

    Returns an empty list when no region is given. Search failures
    are raised to the caller.
    """
    service: SearchService = (container or get_container()).resolve(SearchService)
    return await service.perform_search(search_term, visible_region)
