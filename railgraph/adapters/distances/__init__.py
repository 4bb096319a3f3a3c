"""Distance source adapters - Implementations of DistanceSourcePort.

Available implementations:
- JsonDistanceSource: Loads line segments from the JSON seed file
- CsvDistanceSource: Loads edges from a CSV file
- SqlDistanceSource: Reads the distances table through SQLAlchemy
- InMemoryDistanceSource: Serves a fixed tuple of edges
"""

from .csv_source import CsvDistanceSource
from .json_source import JsonDistanceSource
from .memory_source import InMemoryDistanceSource
from .sql_source import SqlDistanceSource

__all__ = [
    "CsvDistanceSource",
    "InMemoryDistanceSource",
    "JsonDistanceSource",
    "SqlDistanceSource",
]
