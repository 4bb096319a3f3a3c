"""Immutable domain models for the rail route planner.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core business concepts: track segments,
computed paths, catalog stations and stored routes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import NewType, Optional

StationCode = NewType("StationCode", str)
"""Short station identifier (e.g. 'MX'), kept apart from line names and analytic codes."""


@dataclass(frozen=True, slots=True)
class Edge:
    """One physical track segment between two stations on a named line.

    Attributes:
        parent: Station code at one end of the segment
        child: Station code at the other end
        distance_km: Segment length in kilometers
        line_name: Name of the line (informational only)
    """

    parent: StationCode
    child: StationCode
    distance_km: float
    line_name: str = ""

    def __post_init__(self) -> None:
        """Reject weights Dijkstra cannot handle."""
        if math.isnan(self.distance_km) or self.distance_km < 0:
            raise ValueError(
                f"Distance must be a non-negative number, got {self.distance_km} "
                f"for {self.parent}-{self.child}"
            )


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        distance_km: Total distance, rounded to 2 decimal places
        path: Station codes from origin to destination, inclusive
    """

    distance_km: float
    path: tuple[StationCode, ...]

    @property
    def origin(self) -> StationCode:
        """Return the first station of the path."""
        return self.path[0]

    @property
    def destination(self) -> StationCode:
        """Return the last station of the path."""
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of stations in the path."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class Station:
    """A station of the catalog.

    Attributes:
        code: Short station identifier (e.g., 'MX')
        name: Human-readable station name
    """

    code: StationCode
    name: str


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """A computed route stored for history and reporting.

    Attributes:
        id: UUID of the stored route
        from_station_id: Origin station code
        to_station_id: Destination station code
        analytic_code: Cost-center tag used for reporting
        distance_km: Total distance of the route
        path: Station codes of the route
        created_at: UTC timestamp of creation
        user_id: Owner of the route, if any
    """

    id: str
    from_station_id: StationCode
    to_station_id: StationCode
    analytic_code: str
    distance_km: float
    path: tuple[StationCode, ...]
    created_at: datetime
    user_id: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Page:
    """One page of stored routes.

    Attributes:
        items: Routes on this page
        total: Total number of routes across all pages
        page: 1-based page number
        per_page: Maximum number of routes per page
    """

    items: tuple[RouteRecord, ...] = field(default_factory=tuple)
    total: int = 0
    page: int = 1
    per_page: int = 10

    @property
    def last_page(self) -> int:
        """Return the number of the last page (at least 1)."""
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_more(self) -> bool:
        """Check if pages follow this one."""
        return self.page < self.last_page
