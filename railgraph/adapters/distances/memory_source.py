"""In-memory distance source.

Serves a fixed sequence of edges. Useful to wire the engine without a
backing store, and in tests to count how often the engine reads its
source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ...domain.models import Edge


@dataclass
class InMemoryDistanceSource:
    """Distance source backed by a tuple of edges.

    Attributes:
        edges: The edges served on every call
        calls: Number of times get_all_edges() was called
    """

    edges: Tuple[Edge, ...] = field(default_factory=tuple)
    calls: int = field(default=0, init=False)

    @classmethod
    def from_edges(cls, edges: Sequence[Edge]) -> InMemoryDistanceSource:
        return cls(edges=tuple(edges))

    def get_all_edges(self) -> List[Edge]:
        self.calls += 1
        return list(self.edges)
