"""OSRM routing adapter.

Talks to an OSRM server over HTTP and returns normalized routes:
- (lat, lon) to OSRM's "lon,lat;lon,lat" coordinate format
- travel mode to OSRM profile
- JSON response to Route domain models
- transport and service failures to DirectionsError

It does not retry, cache or pick between routes; that is left to the
caller.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import requests

from ...config import RoutingConfig, get_config
from ...domain.errors import ConfigurationError, DirectionsError
from ...domain.models import (
    DirectionsRequest,
    GeoLocation,
    Route,
    RouteStep,
    TransportType,
)


@dataclass
class OSRMRoutingAdapter:
    """Routing adapter for the OSRM /route service.

    This adapter implements RoutingClientPort. The blocking HTTP call
    runs in a worker thread so awaiting it does not stall the loop.

    Attributes:
        config: Routing configuration
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.base_url:
            raise ConfigurationError(
                "OSRM base URL not set",
                setting_name="NEARME_ROUTING_BASE_URL",
                expected_type="http(s) URL",
            )

    async def calculate(self, request: DirectionsRequest) -> Sequence[Route]:
        """Compute candidate routes between the request's endpoints.

        Args:
            request: Origin, destination and travel mode.

        Returns:
            Routes in the order OSRM ranked them; empty if OSRM found none.

        Raises:
            DirectionsError: On transport errors or any other OSRM error code.
        """
        return await asyncio.to_thread(self._fetch_routes, request)

    def profile_for(self, transport_type: TransportType) -> str:
        if transport_type is TransportType.AUTOMOBILE:
            return self.config.driving_profile
        return self.config.walking_profile

    def route_url(self, request: DirectionsRequest) -> str:
        coordinates = format_coordinates(
            [request.source.location, request.destination.location]
        )
        profile = self.profile_for(request.transport_type)
        return f"{self.config.base_url.rstrip('/')}/route/v1/{profile}/{coordinates}"

    def _fetch_routes(self, request: DirectionsRequest) -> List[Route]:
        url = self.route_url(request)
        self._logger.debug(
            "Requesting directions",
            extra={
                "source": request.source.name,
                "destination": request.destination.name,
                "transport_type": request.transport_type.name,
            },
        )

        try:
            response = requests.get(
                url,
                params={
                    "alternatives": "true",
                    "steps": "true",
                    "overview": "full",
                    "geometries": "geojson",
                },
                timeout=self.config.timeout_seconds,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise DirectionsError(
                "OSRM request failed",
                cause=e,
                transport_type=request.transport_type.name,
                source=request.source.name,
                destination=request.destination.name,
            ) from e

        code = data.get("code")
        if code == "NoRoute":
            self._logger.debug(
                "OSRM found no route",
                extra={"source": request.source.name, "destination": request.destination.name},
            )
            return []
        if code != "Ok":
            raise DirectionsError(
                f"OSRM error: {data.get('message', code or 'Unknown error')}",
                transport_type=request.transport_type.name,
                source=request.source.name,
                destination=request.destination.name,
            )

        routes = [
            parse_route(raw, request.transport_type) for raw in data.get("routes", [])
        ]
        self._logger.debug("OSRM returned routes", extra={"count": len(routes)})
        return routes


def format_coordinates(locations: Sequence[GeoLocation]) -> str:
    """Convert locations to OSRM format 'lon,lat;lon,lat;...'."""
    return ";".join(f"{loc.longitude},{loc.latitude}" for loc in locations)


def parse_route(raw: Dict[str, Any], transport_type: TransportType) -> Route:
    """Build a Route from one element of OSRM's ``routes`` array."""
    legs = raw.get("legs") or []

    steps: List[RouteStep] = []
    for leg in legs:
        for step in leg.get("steps") or []:
            steps.append(
                RouteStep(
                    instructions=describe_step(step),
                    distance_meters=float(step.get("distance", 0.0)),
                )
            )

    coordinates = (raw.get("geometry") or {}).get("coordinates") or []
    polyline = tuple(GeoLocation(latitude=lat, longitude=lon) for lon, lat in coordinates)

    name = ", ".join(leg["summary"] for leg in legs if leg.get("summary"))

    return Route(
        name=name,
        distance_meters=float(raw.get("distance", 0.0)),
        expected_travel_time_seconds=float(raw.get("duration", 0.0)),
        transport_type=transport_type,
        polyline=polyline,
        steps=tuple(steps),
    )


def describe_step(step: Dict[str, Any]) -> str:
    """Turn an OSRM maneuver into a short instruction like 'turn left onto Main St'."""
    maneuver = step.get("maneuver") or {}
    words = [maneuver.get("type", ""), maneuver.get("modifier", "")]
    instruction = " ".join(w for w in words if w)
    road = step.get("name")
    if road:
        instruction = f"{instruction} onto {road}" if instruction else road
    return instruction
