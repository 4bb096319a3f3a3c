"""Station catalog port - Abstraction for station metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station


class StationCatalogPort(Protocol):
    """Port for station metadata lookups.

    Implementation: adapters/stations/json_catalog.py

    The catalog knows every station, including those without any
    recorded distance; the graph engine only knows connected ones.
    """

    def list_stations(self) -> Sequence[Station]:
        """List all stations of the catalog.

        Raises:
            DataUnavailableError: If the catalog cannot be read.
        """
        ...

    def get_station(self, code: str) -> Optional[Station]:
        """Get station details by code.

        Args:
            code: The station code to look up (e.g., 'MX').

        Returns:
            The station, or None if not found.
        """
        ...
