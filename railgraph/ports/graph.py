"""Graph ports - Abstractions for distance loading and routing.

These protocols define the contracts for graph operations: reading the
raw track segments from a backing store and answering membership and
shortest-path queries over the resulting network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol, Sequence

from ..domain.models import StationCode

if TYPE_CHECKING:
    from ..domain.models import Edge, PathResult

# Maps station code -> {neighbor_code: distance_km}
Graph = Mapping[StationCode, Mapping[StationCode, float]]


class DistanceSourcePort(Protocol):
    """Port for reading track segments.

    Implementations:
    - adapters/distances/json_source.py (JsonDistanceSource)
    - adapters/distances/csv_source.py (CsvDistanceSource)
    - adapters/distances/sql_source.py (SqlDistanceSource)
    - adapters/distances/memory_source.py (InMemoryDistanceSource)
    """

    def get_all_edges(self) -> Sequence[Edge]:
        """Return every track segment of the network.

        Returns:
            All edges; an empty sequence if none are recorded yet.

        Raises:
            DataUnavailableError: If the backing store cannot be read.
        """
        ...


class GraphEnginePort(Protocol):
    """Port for structural and path queries over the network graph.

    Implementation: graph/engine.py (GraphEngine)
    """

    def load(self) -> None:
        """Load the graph from its source. A no-op once loaded."""
        ...

    def get_stations(self) -> Sequence[StationCode]:
        """Return every station code having at least one edge."""
        ...

    def has_station(self, code: str) -> bool:
        """Check if a station has at least one edge in the graph."""
        ...

    def find_shortest_path(self, origin: str, destination: str) -> Optional[PathResult]:
        """Find the least-cost path between two stations.

        Returns:
            The path and its rounded distance, or None when either station
            is unknown or no path connects them.
        """
        ...
