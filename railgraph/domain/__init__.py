"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DataUnavailableError,
    InvalidRouteRequestError,
    RailGraphError,
    StationNotFoundError,
)
from .models import Edge, Page, PathResult, RouteRecord, Station, StationCode

__all__ = [
    # Models
    "StationCode",
    "Edge",
    "PathResult",
    "Station",
    "RouteRecord",
    "Page",
    # Errors
    "RailGraphError",
    "DataUnavailableError",
    "StationNotFoundError",
    "InvalidRouteRequestError",
    "ConfigurationError",
]
