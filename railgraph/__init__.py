"""Top-level package for the railgraph route planner.

The core is the in-memory graph engine (``railgraph.graph``): it loads
an undirected station-distance graph from a distance source and answers
membership and shortest-path queries. Around it, services plan and store
routes tagged with an analytic code and search the station catalog.
"""

from .domain.models import PathResult, StationCode
from .graph import GraphEngine

__all__ = ["GraphEngine", "PathResult", "StationCode"]
