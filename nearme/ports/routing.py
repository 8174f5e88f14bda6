"""Routing port - Abstraction for directions between two places.

This protocol defines the contract for routing services, allowing
different providers (OSRM, a platform SDK, a test double) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DirectionsRequest, Route


class RoutingClientPort(Protocol):
    """Port for routing services.

    Implementation: adapters/routing/osrm_adapter.py
    """

    async def calculate(self, request: DirectionsRequest) -> Sequence[Route]:
        """Compute candidate routes for a directions request.

        Args:
            request: Origin, destination and travel mode.

        Returns:
            Candidate routes, best first. Empty if no route exists.

        Raises:
            DirectionsError: If the service could not be reached or failed.
        """
        ...
