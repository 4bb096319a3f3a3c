"""Graph construction from track segments.

This module defines the mutable adjacency structure built while loading
and the function that turns a sequence of edges into an undirected graph.
"""

from typing import Dict, Iterable

from ..domain.models import Edge, StationCode

AdjacencyMap = Dict[StationCode, Dict[StationCode, float]]


def add_edge(graph: AdjacencyMap, origin: StationCode, target: StationCode, distance: float) -> None:
    graph.setdefault(origin, {})[target] = distance


def build_graph(edges: Iterable[Edge]) -> AdjacencyMap:
    """Build an undirected adjacency map from track segments.

    Each edge is inserted in both directions with the same weight, so the
    result is symmetric. Stations appear in first-seen order.

    Parameters
    ----------
    edges:
        Track segments as returned by a distance source.

    Returns
    -------
    dict[str, dict[str, float]]
        Station code -> {neighbor code: distance in km}.
    """
    graph: AdjacencyMap = {}
    for edge in edges:
        distance = float(edge.distance_km)
        add_edge(graph, edge.parent, edge.child, distance)
        add_edge(graph, edge.child, edge.parent, distance)
    return graph


def count_edges(graph: AdjacencyMap) -> int:
    """Return the number of directed adjacency entries."""
    return sum(len(neighbors) for neighbors in graph.values())
