"""Typed domain errors for the rail route planner.

All errors inherit from RailGraphError and can optionally wrap a root
cause exception for debugging.

"No path between two stations" is not an error: the graph engine
reports it as a ``None`` result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class RailGraphError(Exception):
    """Base error for the rail route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DataUnavailableError(RailGraphError):
    """A distance source or station catalog could not be read.

    Attributes:
        source: Description of the backing store (file path, database URL)
    """

    source: str = ""


@dataclass
class StationNotFoundError(RailGraphError):
    """One or more station codes are not part of the network graph.

    Attributes:
        station_codes: Every requested code missing from the graph
    """

    station_codes: Tuple[str, ...] = ()


@dataclass
class InvalidRouteRequestError(RailGraphError):
    """A route request carries an unusable parameter.

    Attributes:
        field_name: Name of the rejected parameter
    """

    field_name: str = ""


@dataclass
class ConfigurationError(RailGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
