"""In-memory graph engine.

The engine owns the station-distance graph for the lifetime of the
process. It is constructed unloaded, loads itself from its distance
source exactly once, and then answers membership and shortest-path
queries against read-only state.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..domain.errors import DataUnavailableError
from ..domain.models import PathResult, StationCode
from ..ports.graph import DistanceSourcePort, Graph
from .dijkstra import dijkstra
from .load_graph import AdjacencyMap, build_graph, count_edges


@dataclass
class GraphEngine:
    """Shortest-path engine over an undirected distance graph.

    This class implements GraphEnginePort. A single instance is shared
    by every caller of the process (see container.py); concurrent first
    calls to load() are serialized so the source is read only once.

    Attributes:
        source: Where the track segments are read from
    """

    source: DistanceSourcePort
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: AdjacencyMap = field(default_factory=dict, repr=False)
    _loaded: bool = field(default=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        """Check if the graph has been loaded or injected."""
        return self._loaded

    def load(self) -> None:
        """Load the graph from the distance source.

        Every edge is inserted in both directions. Calling this again once
        loaded does nothing.

        Raises:
            DataUnavailableError: If the source cannot be read. The engine
                keeps its previous state.
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return

            self._logger.debug(
                "Loading graph", extra={"source": type(self.source).__name__}
            )
            try:
                edges = list(self.source.get_all_edges())
            except DataUnavailableError:
                self._logger.error(
                    "Distance source unavailable",
                    extra={"source": type(self.source).__name__},
                )
                raise
            except (OSError, KeyError, ValueError) as e:
                self._logger.error(
                    "Distance source failed",
                    extra={"source": type(self.source).__name__, "error": str(e)},
                )
                raise DataUnavailableError(
                    "Failed to read distances",
                    source=type(self.source).__name__,
                    cause=e,
                )

            graph = build_graph(edges)
            self._graph = graph
            self._loaded = True
            self._logger.info(
                "Graph loaded",
                extra={"nodes": len(graph), "edges": len(edges)},
            )

    def set_graph(self, graph: Graph) -> None:
        """Replace the graph wholesale and mark the engine loaded.

        The given structure is taken as is: callers wanting an undirected
        graph must supply both directions.

        Args:
            graph: Station code -> {neighbor code: distance}.
        """
        copied: AdjacencyMap = {
            StationCode(station): {
                StationCode(neighbor): float(weight)
                for neighbor, weight in neighbors.items()
            }
            for station, neighbors in graph.items()
        }
        with self._lock:
            self._graph = copied
            self._loaded = True
        self._logger.debug(
            "Graph injected",
            extra={"nodes": len(copied), "edges": count_edges(copied)},
        )

    def reset(self) -> None:
        """Drop the graph and return to the unloaded state.

        Call this in tests to force the next query to reload.
        """
        with self._lock:
            self._graph = {}
            self._loaded = False
        self._logger.debug("Graph reset")

    def get_stations(self) -> List[StationCode]:
        """Return every station code of the graph, in insertion order."""
        return list(self._graph)

    def has_station(self, code: str) -> bool:
        """Check if a station has at least one entry in the graph.

        Stations present in the catalog but without any distance are not
        part of the graph.
        """
        return code in self._graph

    def neighbors(self, code: str) -> Dict[StationCode, float]:
        """Return the direct neighbors of a station with their distances."""
        return dict(self._graph.get(StationCode(code), {}))

    def find_shortest_path(self, origin: str, destination: str) -> Optional[PathResult]:
        """Find the shortest path between two stations.

        Loads the graph first if needed.

        Args:
            origin: Departure station code.
            destination: Arrival station code.

        Returns:
            PathResult with the distance rounded to 2 decimals, or None
            when either station is unknown or no path connects them.

        Raises:
            DataUnavailableError: If the lazy load fails.
        """
        if not self._loaded:
            self.load()

        graph = self._graph
        if origin not in graph or destination not in graph:
            self._logger.debug(
                "Unknown station",
                extra={"origin": origin, "destination": destination},
            )
            return None

        if origin == destination:
            return PathResult(distance_km=0.0, path=(StationCode(origin),))

        path, distance = dijkstra(graph, origin, destination)
        if not path:
            self._logger.debug(
                "No path",
                extra={"origin": origin, "destination": destination},
            )
            return None

        result = PathResult(distance_km=round(distance, 2), path=tuple(path))
        self._logger.debug(
            "Path found",
            extra={
                "origin": origin,
                "destination": destination,
                "stops": result.num_stops,
                "distance_km": result.distance_km,
            },
        )
        return result
