"""Shortest-path computation using Dijkstra's algorithm.

The priority queue is a binary heap without decrease-key: an improved
distance pushes a new entry and stale entries are dropped when popped
because their station is already visited.
"""

import heapq
import itertools
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import StationCode
from ..ports.graph import Graph


def dijkstra(graph: Graph, start: str, end: str) -> Tuple[List[StationCode], float]:
    """Compute the shortest path between two stations using Dijkstra.

    Parameters
    ----------
    graph:
        Adjacency map of station code -> {neighbor code: distance}.
        Weights must be non-negative.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.

    Returns
    -------
    list[str], float
        The sequence of station identifiers representing the path from
        ``start`` to ``end`` (inclusive) and the unrounded total distance.
        If either station is unknown or no path exists, returns
        ``([], float("inf"))``.
    """
    if start not in graph or end not in graph:
        return [], float("inf")

    distances: Dict[str, float] = {station: float("inf") for station in graph}
    previous: Dict[str, Optional[str]] = {station: None for station in graph}
    distances[start] = 0.0

    # Equal distances pop in insertion order.
    counter = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(counter), start)]
    visited: Set[str] = set()

    while heap:
        _, _, u = heapq.heappop(heap)

        # Stale entry for a station already settled at a lower distance.
        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, weight in graph.get(u, {}).items():
            if v in visited:
                continue
            new_distance = distances[u] + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(counter), v))

    if distances[end] == float("inf"):
        return [], float("inf")

    path: List[StationCode] = []
    current: Optional[str] = end
    while current is not None:
        path.append(StationCode(current))
        current = previous.get(current)

    path.reverse()
    return path, distances[end]
