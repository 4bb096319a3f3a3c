"""Station directory service - Searches the station catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import Station
from ..ports.graph import GraphEnginePort
from ..ports.stations import StationCatalogPort


@dataclass
class StationDirectoryService:
    """Lists catalog stations, optionally limited to the connected network.

    Attributes:
        catalog: Source of station metadata
        graph_engine: Decides which stations are connected
    """

    catalog: StationCatalogPort
    graph_engine: GraphEnginePort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def search(
        self, term: Optional[str] = None, connected_only: bool = True
    ) -> List[Station]:
        """Search stations by code or name.

        Args:
            term: Case-insensitive substring matched against code and name.
                None or blank matches every station.
            connected_only: Keep only stations having at least one distance.

        Returns:
            Matching stations sorted by name.

        Raises:
            DataUnavailableError: If the catalog or the graph cannot be read.
        """
        stations = list(self.catalog.list_stations())

        needle = (term or "").strip().lower()
        if needle:
            stations = [
                s
                for s in stations
                if needle in s.code.lower() or needle in s.name.lower()
            ]

        if connected_only:
            self.graph_engine.load()
            stations = [s for s in stations if self.graph_engine.has_station(s.code)]

        stations.sort(key=lambda s: s.name)
        self._logger.debug(
            "Station search",
            extra={
                "term": term,
                "connected_only": connected_only,
                "results": len(stations),
            },
        )
        return stations
