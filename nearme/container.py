"""Dependency injection container.

Maps each port or service type to a factory, so the free functions in
``map_utilities`` can run against production adapters while tests swap
in fakes:

    container = Container()
    container.register(RoutingClientPort, lambda: FakeRouting())
    container.register(
        DirectionsService,
        lambda: DirectionsService(container.resolve(RoutingClientPort)),
    )
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Registry of factories keyed by type.

    Attributes:
        config: Configuration handed to the default adapters
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _shared: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        key: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind a factory to a type, replacing any earlier binding.

        Every cached singleton is dropped, so services built from an
        overridden port are rebuilt on their next resolve.

        Args:
            key: The port or service type.
            factory: Builds an instance on demand.
            singleton: Build once and reuse the instance.
        """
        with self._lock:
            self._factories[key] = factory
            self._instances.clear()
            if singleton:
                self._shared.add(key)
            else:
                self._shared.discard(key)

    def resolve(self, key: type[Any]) -> Any:
        """Return an instance for a registered type.

        Raises:
            KeyError: If nothing is registered for the type.
        """
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                raise KeyError(f"Type not registered: {key}")

            if key not in self._shared:
                return factory()
            if key not in self._instances:
                self._instances[key] = factory()
            return self._instances[key]

    def is_registered(self, key: type[Any]) -> bool:
        return key in self._factories

    def clear_singletons(self) -> None:
        """Drop cached instances; factories stay registered."""
        with self._lock:
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container wired to the production adapters.

        Adapters are built lazily, on first resolve, so creating the
        container never touches the network.

        Args:
            config: Optional configuration override.
        """
        from .adapters.dialer import SystemUrlHandler
        from .adapters.distance import GeopyDistanceAdapter
        from .adapters.routing import OSRMRoutingAdapter
        from .adapters.search import NominatimSearchAdapter
        from .ports.dialer import DialCapabilityPort, DialOpenerPort
        from .ports.distance import GeoDistancePort
        from .ports.routing import RoutingClientPort
        from .ports.search import LocalSearchClientPort
        from .services import (
            DialerService,
            DirectionsService,
            DistanceService,
            RoutePlannerService,
            SearchService,
        )

        config = config or get_config()
        container = cls(config=config)

        # One handler serves as both capability check and opener
        url_handler = SystemUrlHandler()
        container.register(DialCapabilityPort, lambda: url_handler)
        container.register(DialOpenerPort, lambda: url_handler)

        container.register(
            RoutingClientPort,
            lambda: OSRMRoutingAdapter(config.routing),
        )
        container.register(
            LocalSearchClientPort,
            lambda: NominatimSearchAdapter(config.search),
        )
        container.register(
            GeoDistancePort,
            lambda: GeopyDistanceAdapter(config.distance),
        )

        container.register(
            DialerService,
            lambda: DialerService(
                capability=container.resolve(DialCapabilityPort),
                opener=container.resolve(DialOpenerPort),
                config=config.dialer,
            ),
        )
        container.register(
            DirectionsService,
            lambda: DirectionsService(container.resolve(RoutingClientPort)),
        )
        container.register(
            DistanceService,
            lambda: DistanceService(container.resolve(GeoDistancePort)),
        )
        container.register(
            SearchService,
            lambda: SearchService(container.resolve(LocalSearchClientPort)),
        )
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                directions=container.resolve(DirectionsService),
                distance=container.resolve(DistanceService),
            ),
        )

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def set_container(container: Container) -> None:
    """Replace the process-wide container (e.g., with one holding fakes)."""
    global _default_container
    with _container_lock:
        _default_container = container


def reset_container() -> None:
    """Forget the process-wide container; the next call builds a new one."""
    global _default_container
    with _container_lock:
        _default_container = None
