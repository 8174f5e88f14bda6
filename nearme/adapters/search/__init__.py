"""Search adapters - Implementations of LocalSearchClientPort.

Available implementations:
- NominatimSearchAdapter: OpenStreetMap Nominatim search
"""

from .nominatim_adapter import NominatimSearchAdapter

__all__ = ["NominatimSearchAdapter"]
