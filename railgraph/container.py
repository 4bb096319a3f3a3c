"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It wires the single shared GraphEngine of the process and hands it to
the services that need it.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container()
        container.register(DistanceSourcePort, lambda: InMemoryDistanceSource())
        source = container.resolve(DistanceSourcePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The distance source is chosen by ``config.graph.source``. The
        GraphEngine is registered as a singleton, so every service shares
        the same loaded graph.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If the SQL source is selected without a
                database URL.
        """
        from .adapters.distances import (
            CsvDistanceSource,
            JsonDistanceSource,
            SqlDistanceSource,
        )
        from .adapters.routes import InMemoryRouteRepository
        from .adapters.stations import JsonStationCatalog
        from .graph import GraphEngine
        from .ports.graph import DistanceSourcePort, GraphEnginePort
        from .ports.routes import RouteRepositoryPort
        from .ports.stations import StationCatalogPort
        from .services import RoutePlannerService, StationDirectoryService

        config = config or get_config()
        graph_config = config.graph

        if graph_config.source == "sql" and not graph_config.database_url:
            raise ConfigurationError(
                "The sql distance source needs a database URL",
                setting_name="RAILGRAPH_GRAPH_DATABASE_URL",
                expected_type="SQLAlchemy database URL",
            )

        container = cls(config=config)

        # Distances, selected by config
        def create_distance_source() -> DistanceSourcePort:
            source = graph_config.source
            if source == "csv":
                return CsvDistanceSource(graph_config.edges_path)
            elif source == "sql":
                assert graph_config.database_url is not None
                return SqlDistanceSource.from_url(graph_config.database_url)
            else:
                return JsonDistanceSource(graph_config.distances_path)

        container.register(DistanceSourcePort, create_distance_source)

        # Graph engine (one per process)
        container.register(
            GraphEnginePort,
            lambda: GraphEngine(container.resolve(DistanceSourcePort)),
        )

        # Stations
        container.register(
            StationCatalogPort,
            lambda: JsonStationCatalog(graph_config.stations_path),
        )

        # Route history
        container.register(RouteRepositoryPort, lambda: InMemoryRouteRepository())

        # Services
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                graph_engine=container.resolve(GraphEnginePort),
                route_repository=container.resolve(RouteRepositoryPort),
                config=config.routes,
            ),
        )
        container.register(
            StationDirectoryService,
            lambda: StationDirectoryService(
                catalog=container.resolve(StationCatalogPort),
                graph_engine=container.resolve(GraphEnginePort),
            ),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
