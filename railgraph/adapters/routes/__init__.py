"""Route repository adapters - Implementations of RouteRepositoryPort.

Available implementations:
- InMemoryRouteRepository: Thread-safe in-process route history
"""

from .memory_repository import InMemoryRouteRepository

__all__ = ["InMemoryRouteRepository"]
