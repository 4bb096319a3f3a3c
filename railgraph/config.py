"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where the distance graph and station catalog are read from, how route
history is paginated, and how logging is set up.

Configuration can be overridden via environment variables:
- RAILGRAPH_GRAPH_SOURCE=sql
- RAILGRAPH_GRAPH_DATABASE_URL=sqlite:///railgraph.db
- RAILGRAPH_GRAPH_DATA_DIR=/path/to/data
- RAILGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Distance graph and station catalog configuration.

    Environment variables prefixed with RAILGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    distances_file: str = "distances.json"
    edges_file: str = "edges.csv"
    stations_file: str = "stations.json"

    source: Literal["json", "csv", "sql"] = "json"
    database_url: Optional[str] = None

    @property
    def distances_path(self) -> Path:
        """Full path to the distances JSON file."""
        return self.data_dir / self.distances_file

    @property
    def edges_path(self) -> Path:
        """Full path to the edges CSV file."""
        return self.data_dir / self.edges_file

    @property
    def stations_path(self) -> Path:
        """Full path to the stations JSON file."""
        return self.data_dir / self.stations_file


class RoutesConfig(BaseSettings):
    """Route history configuration.

    Environment variables prefixed with RAILGRAPH_ROUTES_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_ROUTES_")

    default_per_page: int = 10
    max_per_page: int = 100
    analytic_code_max_length: int = 50


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.source)
        print(config.routes.max_per_page)

    Environment variables prefixed with RAILGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    routes: RoutesConfig = Field(default_factory=RoutesConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
