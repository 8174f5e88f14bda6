"""Directions service - best route between two map items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import DirectionsRequest, MapItem, Route, TransportType
from ..ports.routing import RoutingClientPort


@dataclass
class DirectionsService:
    """Ask a routing client for directions and keep only the best route.

    Every failure, whatever its cause, is reported as "no route": the
    caller gets None and never sees the underlying error.

    Attributes:
        routing_client: Provider of candidate routes
        transport_type: Travel mode for every request
    """

    routing_client: RoutingClientPort
    # TODO: confirm with product whether directions should be driving instead.
    transport_type: TransportType = TransportType.WALKING

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def calculate_directions(
        self,
        source: MapItem,
        destination: MapItem,
    ) -> Optional[Route]:
        """Compute the first candidate route from source to destination.

        Args:
            source: Where the route starts.
            destination: Where the route ends.

        Returns:
            The first route the provider returned, or None if there is
            none or the request failed.
        """
        request = DirectionsRequest(
            source=source,
            destination=destination,
            transport_type=self.transport_type,
        )

        try:
            routes = await self.routing_client.calculate(request)
        except Exception as e:
            self._logger.debug(
                "Directions failed, reporting no route",
                extra={
                    "source": source.name,
                    "destination": destination.name,
                    "error": str(e),
                },
            )
            return None

        if not routes:
            return None
        return routes[0]
