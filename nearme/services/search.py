"""Search service - points of interest inside the visible map region."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import CoordinateRegion, LocalSearchRequest, MapItem, ResultType
from ..ports.search import LocalSearchClientPort


@dataclass
class SearchService:
    """Run point-of-interest searches scoped to a map region.

    Unlike DirectionsService, failures of the search client are not
    caught here: they reach the caller unchanged.

    Attributes:
        search_client: Provider of local search results
    """

    search_client: LocalSearchClientPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def perform_search(
        self,
        search_term: str,
        visible_region: Optional[CoordinateRegion],
    ) -> List[MapItem]:
        """Search for points of interest matching a free-text term.

        Args:
            search_term: What to look for (e.g., 'coffee').
            visible_region: The region the map currently shows. Without
                one there is nothing to search in.

        Returns:
            Matching map items in provider order; empty if no region was given.

        Raises:
            Exception: Whatever the search client raised.
        """
        if visible_region is None:
            self._logger.debug("No visible region, skipping search")
            return []

        request = LocalSearchRequest(
            natural_language_query=search_term,
            region=visible_region,
            result_types=ResultType.POINT_OF_INTEREST,
        )
        items = await self.search_client.search(request)
        return list(items)
