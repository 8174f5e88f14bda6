"""Nominatim local search adapter.

Runs free-text searches against OpenStreetMap's Nominatim, bounded to
the caller's visible region, with:
- Configuration injection
- Rate limiting (Nominatim's usage policy allows one request per second)
- Result-type filtering on the OSM class of each hit
- Provider failures raised as SearchError, never swallowed
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from geopy.exc import GeocoderRateLimited, GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import SearchConfig, get_config
from ...domain.errors import SearchError
from ...domain.models import (
    GeoLocation,
    LocalSearchRequest,
    MapItem,
    ResultType,
)

# OSM top-level classes that describe a venue rather than an address.
POINT_OF_INTEREST_CLASSES = frozenset(
    {
        "amenity",
        "club",
        "craft",
        "emergency",
        "healthcare",
        "historic",
        "leisure",
        "office",
        "shop",
        "sport",
        "tourism",
    }
)


@dataclass
class NominatimSearchAdapter:
    """Local search adapter backed by Nominatim.

    This adapter implements LocalSearchClientPort.

    Attributes:
        config: Search configuration
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)

    _geolocator: Optional[Nominatim] = field(default=None, repr=False)
    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_geocoder(self) -> Any:
        """Get or initialize the rate-limited geocode function."""
        if self._geocode_fn is not None:
            return self._geocode_fn

        self._logger.debug(
            "Initializing Nominatim search",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        self._geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )

        self._geocode_fn = RateLimiter(
            self._geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=0,
            swallow_exceptions=False,
        )

        return self._geocode_fn

    async def search(self, request: LocalSearchRequest) -> Sequence[MapItem]:
        """Search for places matching the query inside the request region.

        Args:
            request: Query text, region and wanted result types.

        Returns:
            Matching map items, in Nominatim's ranking order.

        Raises:
            SearchError: If Nominatim failed or could not be reached.
        """
        return await asyncio.to_thread(self._search_blocking, request)

    def _search_blocking(self, request: LocalSearchRequest) -> List[MapItem]:
        query = request.natural_language_query
        try:
            geocode_fn = self._get_geocoder()
            locations = geocode_fn(
                query,
                exactly_one=False,
                limit=self.config.max_results,
                viewbox=[request.region.south_west, request.region.north_east],
                bounded=True,
                addressdetails=True,
                extratags=True,
                language=self.config.language,
            )
        except GeopyError as e:
            self._logger.warning(
                "Search service error",
                extra={"query": query, "error": str(e)},
            )
            raise SearchError(
                "Nominatim search failed",
                cause=e,
                query=query,
                is_rate_limited=isinstance(e, GeocoderRateLimited),
            ) from e

        if not locations:
            self._logger.debug("Search returned no result", extra={"query": query})
            return []

        items = [
            to_map_item(location.raw, location.address, location.latitude, location.longitude)
            for location in locations
            if matches_result_types(location.raw, request.result_types)
        ]
        self._logger.debug(
            "Search success",
            extra={"query": query, "results": len(items)},
        )
        return items


def result_type_of(raw: dict) -> ResultType:
    """Classify a Nominatim hit as a point of interest or an address."""
    osm_class = raw.get("class") or raw.get("category")
    if osm_class in POINT_OF_INTEREST_CLASSES:
        return ResultType.POINT_OF_INTEREST
    return ResultType.ADDRESS


def matches_result_types(raw: dict, wanted: ResultType) -> bool:
    return bool(result_type_of(raw) & wanted)


def to_map_item(raw: dict, address: str, latitude: float, longitude: float) -> MapItem:
    """Build a MapItem from a Nominatim result."""
    extratags = raw.get("extratags") or {}
    name = raw.get("name") or (address or "").split(",")[0].strip()

    return MapItem(
        name=str(name),
        location=GeoLocation(latitude=float(latitude), longitude=float(longitude)),
        phone_number=extratags.get("phone") or extratags.get("contact:phone"),
        url=extratags.get("website") or extratags.get("contact:website"),
        category=raw.get("type"),
        address=address or None,
    )
