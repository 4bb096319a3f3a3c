"""CSV distance source adapter.

Expects a header row with ``line_name,parent_station,child_station,distance_km``.
Rows missing a station or a distance are skipped.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ...config import get_config
from ...domain.errors import DataUnavailableError
from ...domain.models import Edge, StationCode


@dataclass
class CsvDistanceSource:
    """Distance source that loads track segments from a CSV file.

    This adapter implements DistanceSourcePort.

    Attributes:
        path: CSV file to read (defaults to the configured edges file)
    """

    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is None:
            self.path = get_config().graph.edges_path

    def get_all_edges(self) -> List[Edge]:
        """Read every track segment from the file.

        Raises:
            DataUnavailableError: If the file is missing or holds a bad distance.
        """
        assert self.path is not None
        try:
            edges = self._read_edges(self.path)
        except (OSError, ValueError) as e:
            raise DataUnavailableError(
                f"Failed to read edges from {self.path}",
                source=str(self.path),
                cause=e,
            )

        self._logger.info(
            "Edges read", extra={"path": str(self.path), "edges": len(edges)}
        )
        return edges

    def _read_edges(self, path: Path) -> List[Edge]:
        edges: List[Edge] = []
        skipped = 0

        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                parent = (row.get("parent_station") or "").strip()
                child = (row.get("child_station") or "").strip()
                distance_str = (row.get("distance_km") or "").strip()

                if not parent or not child or not distance_str:
                    skipped += 1
                    continue

                edges.append(
                    Edge(
                        parent=StationCode(parent),
                        child=StationCode(child),
                        distance_km=float(distance_str),
                        line_name=(row.get("line_name") or "").strip(),
                    )
                )

        if skipped:
            self._logger.warning(
                "Skipped incomplete edge rows",
                extra={"path": str(path), "skipped": skipped},
            )
        return edges
