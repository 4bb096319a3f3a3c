"""Tests for configuration loading and dependency wiring."""

import logging

import pytest

from railgraph.adapters.distances import (
    CsvDistanceSource,
    InMemoryDistanceSource,
    JsonDistanceSource,
    SqlDistanceSource,
)
from railgraph.config import AppConfig, GraphConfig, get_config, reset_config
from railgraph.container import Container, get_container, reset_container
from railgraph.domain.errors import ConfigurationError
from railgraph.domain.models import Edge
from railgraph.graph import GraphEngine
from railgraph.observability import configure_logging
from railgraph.ports.graph import DistanceSourcePort, GraphEnginePort
from railgraph.services import RoutePlannerService, StationDirectoryService


@pytest.fixture(autouse=True)
def fresh_state():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


class TestConfig:
    def test_defaults_point_at_packaged_data(self):
        config = get_config()

        assert config.graph.source == "json"
        assert config.graph.distances_path.name == "distances.json"
        assert config.graph.distances_path.exists()
        assert config.graph.stations_path.exists()
        assert config.graph.edges_path.exists()
        assert config.routes.max_per_page == 100

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RAILGRAPH_GRAPH_SOURCE", "csv")
        monkeypatch.setenv("RAILGRAPH_GRAPH_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("RAILGRAPH_ROUTES_MAX_PER_PAGE", "25")
        reset_config()

        config = get_config()

        assert config.graph.source == "csv"
        assert config.graph.edges_path == tmp_path / "edges.csv"
        assert config.routes.max_per_page == 25

    def test_config_is_cached(self):
        assert get_config() is get_config()


class TestContainer:
    def test_register_and_resolve_singleton(self):
        container = Container(config=AppConfig())
        container.register(DistanceSourcePort, lambda: InMemoryDistanceSource())

        assert container.is_registered(DistanceSourcePort)
        assert container.resolve(DistanceSourcePort) is container.resolve(
            DistanceSourcePort
        )

    def test_non_singleton_creates_new_instances(self):
        container = Container(config=AppConfig())
        container.register(
            DistanceSourcePort, lambda: InMemoryDistanceSource(), singleton=False
        )

        assert container.resolve(DistanceSourcePort) is not container.resolve(
            DistanceSourcePort
        )

    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(GraphEnginePort)

    def test_services_share_one_engine(self):
        container = Container.create_default(AppConfig())

        engine = container.resolve(GraphEnginePort)
        planner = container.resolve(RoutePlannerService)
        directory = container.resolve(StationDirectoryService)

        assert isinstance(engine, GraphEngine)
        assert isinstance(engine.source, JsonDistanceSource)
        assert planner.graph_engine is engine
        assert directory.graph_engine is engine

    def test_default_wiring_plans_routes(self):
        container = Container.create_default(AppConfig())
        planner = container.resolve(RoutePlannerService)

        route = planner.plan_route("MX", "BLON", "ANA-01", user_id=3)

        assert route is not None
        assert route.distance_km == 3.96
        assert planner.list_routes(3).items == (route,)

    def test_default_wiring_lists_connected_stations(self):
        container = Container.create_default(AppConfig())
        directory = container.resolve(StationDirectoryService)

        codes = {s.code for s in directory.search()}

        assert "LENK" not in codes
        assert {"MX", "ZW", "VEV"} <= codes

    def test_csv_source_selected_by_config(self):
        container = Container.create_default(AppConfig(graph=GraphConfig(source="csv")))

        source = container.resolve(DistanceSourcePort)

        assert isinstance(source, CsvDistanceSource)
        engine = container.resolve(GraphEnginePort)
        assert engine.find_shortest_path("MX", "VEV").distance_km == 9.38

    def test_sql_source_selected_by_config(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'railgraph.db'}"
        seed = SqlDistanceSource.from_url(url)
        seed.create_schema()
        seed.add_edges([Edge("A", "B", 1.25, line_name="T")])

        container = Container.create_default(
            AppConfig(graph=GraphConfig(source="sql", database_url=url))
        )

        assert isinstance(container.resolve(DistanceSourcePort), SqlDistanceSource)
        assert container.resolve(GraphEnginePort).find_shortest_path("B", "A").path == (
            "B",
            "A",
        )

    def test_sql_source_without_url_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Container.create_default(AppConfig(graph=GraphConfig(source="sql")))

        assert exc_info.value.setting_name == "RAILGRAPH_GRAPH_DATABASE_URL"

    def test_register_overrides_cached_singleton(self):
        container = Container.create_default(AppConfig())
        container.resolve(DistanceSourcePort)
        replacement = InMemoryDistanceSource.from_edges([Edge("X", "Y", 1.0)])

        container.register(DistanceSourcePort, lambda: replacement)
        container.clear_singletons()

        assert container.resolve(GraphEnginePort).source is replacement

    def test_default_container_is_shared_until_reset(self):
        first = get_container()

        assert get_container() is first
        reset_container()
        assert get_container() is not first


def test_configure_logging_applies_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    observability = AppConfig().observability

    configure_logging(observability.model_copy(update={"level": "debug"}))
    configure_logging(observability.model_copy(update={"level": "nonsense"}))

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == observability.format
    assert calls[1]["level"] == logging.INFO
