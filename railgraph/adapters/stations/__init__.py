"""Station catalog adapters - Implementations of StationCatalogPort."""

from .json_catalog import JsonStationCatalog

__all__ = ["JsonStationCatalog"]
