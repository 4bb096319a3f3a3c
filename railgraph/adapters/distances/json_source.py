"""JSON distance source adapter.

Reads the seed-file format: a list of lines, each with its name and
the distances between consecutive stations:

    [{"name": "MOB", "distances": [{"parent": "MX", "child": "CGE", "distance": 0.65}]}]
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from ...config import get_config
from ...domain.errors import DataUnavailableError
from ...domain.models import Edge, StationCode


@dataclass
class JsonDistanceSource:
    """Distance source that loads track segments from a JSON file.

    This adapter implements DistanceSourcePort.

    Attributes:
        path: JSON file to read (defaults to the configured distances file)
    """

    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is None:
            self.path = get_config().graph.distances_path

    def get_all_edges(self) -> List[Edge]:
        """Read every track segment from the file.

        Returns:
            The edges, in file order.

        Raises:
            DataUnavailableError: If the file is missing or malformed.
        """
        assert self.path is not None
        self._logger.debug("Reading distances", extra={"path": str(self.path)})

        try:
            with self.path.open(encoding="utf-8") as f:
                lines = json.load(f)
            edges = [
                edge for line in lines for edge in self._parse_line(line)
            ]
        except (OSError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise DataUnavailableError(
                f"Failed to read distances from {self.path}",
                source=str(self.path),
                cause=e,
            )

        self._logger.info(
            "Distances read", extra={"path": str(self.path), "edges": len(edges)}
        )
        return edges

    @staticmethod
    def _parse_line(line: dict[str, Any]) -> List[Edge]:
        line_name = str(line.get("name", ""))
        return [
            Edge(
                parent=StationCode(str(segment["parent"]).strip()),
                child=StationCode(str(segment["child"]).strip()),
                distance_km=float(segment["distance"]),
                line_name=line_name,
            )
            for segment in line.get("distances", [])
        ]
