"""Graph-related utilities for representing the rail network.

This subpackage contains the construction of the in-memory graph from
track segments, the Dijkstra path-finding algorithm, and the engine
that ties both to a distance source.
"""

from .dijkstra import dijkstra
from .engine import GraphEngine
from .load_graph import build_graph

__all__ = ["GraphEngine", "build_graph", "dijkstra"]
