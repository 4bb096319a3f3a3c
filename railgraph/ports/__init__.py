"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import DistanceSourcePort, Graph, GraphEnginePort
from .routes import RouteRepositoryPort
from .stations import StationCatalogPort

__all__ = [
    # Graph
    "Graph",
    "DistanceSourcePort",
    "GraphEnginePort",
    # Stations
    "StationCatalogPort",
    # Routes
    "RouteRepositoryPort",
]
