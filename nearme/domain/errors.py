"""Typed domain errors for the NearMe map utilities.

Adapters raise these instead of leaking client-library exceptions. The
services decide what reaches the caller: directions failures are turned
into an absent route, search failures propagate as they are.

All errors inherit from NearMeError and can optionally wrap the
underlying exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NearMeError(Exception):
    """Base error for the map utilities.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DirectionsError(NearMeError):
    """The routing service failed to compute directions.

    Attributes:
        transport_type: Travel mode that was requested
        source: Name of the origin map item
        destination: Name of the destination map item
    """

    transport_type: str = ""
    source: str = ""
    destination: str = ""


@dataclass
class SearchError(NearMeError):
    """The local search service failed.

    Attributes:
        query: The natural-language query that failed
        is_rate_limited: Whether the provider refused us for sending too many requests
    """

    query: str = ""
    is_rate_limited: bool = False


@dataclass
class ConfigurationError(NearMeError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
