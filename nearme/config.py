"""Centralized configuration using Pydantic Settings.

Every adapter reads its settings from here instead of hardcoding
service URLs, user agents or timeouts.

Configuration can be overridden via environment variables:
- NEARME_ROUTING_BASE_URL=http://localhost:5000
- NEARME_SEARCH_USER_AGENT=my-app
- NEARME_DISTANCE_METHOD=great_circle
- NEARME_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DialerConfig(BaseSettings):
    """Phone dialer configuration.

    Environment variables prefixed with NEARME_DIAL_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_DIAL_")

    scheme: str = "tel://"


class RoutingConfig(BaseSettings):
    """Routing service (OSRM) configuration.

    Environment variables prefixed with NEARME_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_ROUTING_")

    base_url: str = "https://router.project-osrm.org"
    timeout_seconds: float = 10.0
    walking_profile: str = "foot"
    driving_profile: str = "driving"


class SearchConfig(BaseSettings):
    """Local search (Nominatim) configuration.

    Environment variables prefixed with NEARME_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_SEARCH_")

    user_agent: str = "nearme-map-utilities"
    timeout_seconds: int = 10
    max_results: int = 20
    language: str = "en"
    rate_limit_delay: float = 1.0


class DistanceConfig(BaseSettings):
    """Geo-distance configuration.

    Environment variables prefixed with NEARME_DISTANCE_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_DISTANCE_")

    method: Literal["geodesic", "great_circle"] = "geodesic"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NEARME_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.routing.base_url)
        print(config.search.max_results)

    Environment variables prefixed with NEARME_.
    """

    model_config = SettingsConfigDict(env_prefix="NEARME_")

    dialer: DialerConfig = Field(default_factory=DialerConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    distance: DistanceConfig = Field(default_factory=DistanceConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload it
    (e.g., in tests), call reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
