"""JSON station catalog adapter.

Reads ``[{"shortName": "MX", "longName": "Montreux"}, ...]`` and keeps
the result in memory after the first read.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ...config import get_config
from ...domain.errors import DataUnavailableError
from ...domain.models import Station, StationCode


@dataclass
class JsonStationCatalog:
    """Station catalog loaded from a JSON file.

    This adapter implements StationCatalogPort.

    Attributes:
        path: JSON file to read (defaults to the configured stations file)
    """

    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _stations: Optional[Dict[str, Station]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is None:
            self.path = get_config().graph.stations_path

    def list_stations(self) -> List[Station]:
        """List all stations, in file order.

        Raises:
            DataUnavailableError: If the catalog cannot be read.
        """
        return list(self._load_stations().values())

    def get_station(self, code: str) -> Optional[Station]:
        """Get station details by code.

        Args:
            code: The station code to look up.

        Returns:
            The station, or None if not found.
        """
        return self._load_stations().get(code)

    def _load_stations(self) -> Dict[str, Station]:
        if self._stations is not None:
            return self._stations

        assert self.path is not None
        stations: Dict[str, Station] = {}

        try:
            with self.path.open(encoding="utf-8") as f:
                rows = json.load(f)
            for row in rows:
                code = str(row.get("shortName", "")).strip()
                if not code:
                    continue
                name = str(row.get("longName", "")).strip()
                stations[code] = Station(code=StationCode(code), name=name or code)
        except (OSError, AttributeError, TypeError, ValueError) as e:
            raise DataUnavailableError(
                f"Failed to read stations from {self.path}",
                source=str(self.path),
                cause=e,
            )

        self._stations = stations
        self._logger.info(
            "Stations loaded", extra={"path": str(self.path), "stations": len(stations)}
        )
        return stations

    def clear_cache(self) -> None:
        """Clear cached station data."""
        self._stations = None
        self._logger.debug("Station cache cleared")
