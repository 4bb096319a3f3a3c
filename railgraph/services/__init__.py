"""Application services orchestrating the graph engine and adapters."""

from .route_planner import RoutePlannerService
from .station_directory import StationDirectoryService

__all__ = ["RoutePlannerService", "StationDirectoryService"]
