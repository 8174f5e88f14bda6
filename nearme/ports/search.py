"""Search port - Abstraction for local point-of-interest search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import LocalSearchRequest, MapItem


class LocalSearchClientPort(Protocol):
    """Port for local search services.

    Implementation: adapters/search/nominatim_adapter.py

    A local search turns a free-text query into places located
    inside a bounding region. Ranking is left to the provider.
    """

    async def search(self, request: LocalSearchRequest) -> Sequence[MapItem]:
        """Run a natural-language search inside a region.

        Args:
            request: Query text, region and wanted result types.

        Returns:
            Matching map items in provider order.

        Raises:
            SearchError: If the provider failed.
        """
        ...
