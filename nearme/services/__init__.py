"""Services layer - The map utility operations.

Each service wraps one port and implements one operation on top of it.

Available services:
- DialerService: place a phone call
- DirectionsService: best route between two map items
- DistanceService: straight-line distance between two points
- SearchService: points of interest inside a visible region
- RoutePlannerService: multi-stop routes and stop ordering
"""

from .dialer import DialerService, build_dial_target
from .directions import DirectionsService
from .distance import DistanceService
from .route_planner import RoutePlannerService
from .search import SearchService

__all__ = [
    "DialerService",
    "DirectionsService",
    "DistanceService",
    "SearchService",
    "RoutePlannerService",
    "build_dial_target",
]
