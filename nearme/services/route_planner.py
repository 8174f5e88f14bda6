"""Route planner service - multi-stop trips built from single routes.

This service composes DirectionsService and DistanceService:
1. Split an ordered list of stops into consecutive segments
2. Resolve each segment to a route, one after another
3. Optionally reorder stops by nearest neighbour before routing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..domain.models import MapItem, Route
from .directions import DirectionsService
from .distance import DistanceService


@dataclass
class RoutePlannerService:
    """Plan routes through several stops.

    Attributes:
        directions: Resolves a single segment to a route
        distance: Measures straight-line distance between stops
    """

    directions: DirectionsService
    distance: DistanceService

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def calculate_route(
        self,
        items: Sequence[MapItem],
        is_loop: bool = False,
    ) -> List[Route]:
        """Compute one route per consecutive pair of stops.

        Args:
            items: Stops in visiting order.
            is_loop: Also route from the last stop back to the first.

        Returns:
            Routes for the segments that could be resolved, in order.
            Segments without a route are skipped.
        """
        segments = self.segments(items, is_loop)
        routes: List[Route] = []

        for source, destination in segments:
            route = await self.directions.calculate_directions(source, destination)
            if route is None:
                self._logger.info(
                    "Skipping segment without route",
                    extra={"source": source.name, "destination": destination.name},
                )
                continue
            routes.append(route)

        self._logger.info(
            "Route planned",
            extra={"segments": len(segments), "routes": len(routes)},
        )
        return routes

    @staticmethod
    def segments(
        items: Sequence[MapItem],
        is_loop: bool = False,
    ) -> List[Tuple[MapItem, MapItem]]:
        """Pair up consecutive stops: A->B, B->C, and C->A when looping."""
        if len(items) < 2:
            return []

        pairs = list(zip(items[:-1], items[1:]))
        if is_loop:
            pairs.append((items[-1], items[0]))
        return pairs

    def optimize_order(self, items: Sequence[MapItem]) -> List[MapItem]:
        """Reorder stops greedily by nearest neighbour.

        The first stop stays first. Each following stop is the closest
        one not visited yet; ties keep the original order.

        Args:
            items: Stops to reorder.

        Returns:
            A new list with the same stops in visiting order.
        """
        if len(items) <= 2:
            return list(items)

        unvisited = list(items[1:])
        ordered = [items[0]]

        while unvisited:
            current = ordered[-1]
            nearest_index = min(
                range(len(unvisited)),
                key=lambda i: self.distance.calculate_distance(
                    current.location, unvisited[i].location
                ).value,
            )
            ordered.append(unvisited.pop(nearest_index))

        return ordered
