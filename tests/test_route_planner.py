"""Tests for the route planner service."""

from unittest.mock import MagicMock

import pytest

from railgraph.adapters.routes import InMemoryRouteRepository
from railgraph.config import RoutesConfig
from railgraph.domain.errors import (
    DataUnavailableError,
    InvalidRouteRequestError,
    StationNotFoundError,
)
from railgraph.graph import GraphEngine
from railgraph.services import RoutePlannerService


@pytest.fixture
def engine():
    engine = GraphEngine(MagicMock())
    engine.set_graph(
        {
            "MX": {"CGE": 0.65},
            "CGE": {"MX": 0.65, "VUAR": 0.35},
            "VUAR": {"CGE": 0.35},
            "ZW": {"LENK": 13.0},
            "LENK": {"ZW": 13.0},
        }
    )
    return engine


@pytest.fixture
def repository():
    return InMemoryRouteRepository()


@pytest.fixture
def planner(engine, repository):
    return RoutePlannerService(
        graph_engine=engine,
        route_repository=repository,
        config=RoutesConfig(default_per_page=2, max_per_page=3, analytic_code_max_length=8),
    )


class TestCalculateAndStore:
    def test_stores_shortest_route(self, planner, repository):
        route = planner.calculate_and_store("MX", "VUAR", "ANA-01", user_id=7)

        assert route is not None
        assert route.distance_km == 1.0
        assert route.path == ("MX", "CGE", "VUAR")
        assert route.analytic_code == "ANA-01"
        assert route.user_id == 7
        assert repository.all() == [route]

    def test_returns_none_and_stores_nothing_without_path(self, planner, repository):
        assert planner.calculate_and_store("MX", "ZW", "ANA-01") is None
        assert repository.all() == []

    def test_unknown_station_returns_none(self, planner):
        assert planner.calculate_and_store("XX", "MX", "ANA-01") is None

    def test_same_station_stores_zero_distance(self, planner):
        route = planner.calculate_and_store("CGE", "CGE", "ANA-01")

        assert route is not None
        assert route.distance_km == 0.0
        assert route.path == ("CGE",)

    def test_analytic_code_is_trimmed(self, planner):
        route = planner.calculate_and_store("MX", "CGE", "  ANA-01 ")

        assert route is not None
        assert route.analytic_code == "ANA-01"

    @pytest.mark.parametrize("code", ["", "   ", "TOO-LONG-CODE"])
    def test_rejects_unusable_analytic_code(self, planner, repository, code):
        with pytest.raises(InvalidRouteRequestError) as exc_info:
            planner.calculate_and_store("MX", "CGE", code)

        assert exc_info.value.field_name == "analytic_code"
        assert repository.all() == []

    def test_graph_failure_propagates(self, repository):
        source = MagicMock()
        source.get_all_edges.side_effect = DataUnavailableError("down")
        planner = RoutePlannerService(GraphEngine(source), repository, RoutesConfig())

        with pytest.raises(DataUnavailableError):
            planner.calculate_and_store("MX", "CGE", "ANA-01")


class TestValidateStations:
    def test_accepts_known_stations(self, planner):
        planner.validate_stations("MX", "VUAR")

    def test_lists_every_missing_station(self, planner):
        with pytest.raises(StationNotFoundError) as exc_info:
            planner.validate_stations("XX", "YY")

        assert exc_info.value.station_codes == ("XX", "YY")

    def test_reports_missing_station_once(self, planner):
        with pytest.raises(StationNotFoundError) as exc_info:
            planner.validate_stations("XX", "XX")

        assert exc_info.value.station_codes == ("XX",)


class TestPlanRoute:
    def test_unknown_station_raises(self, planner, repository):
        with pytest.raises(StationNotFoundError) as exc_info:
            planner.plan_route("MX", "XX", "ANA-01")

        assert exc_info.value.station_codes == ("XX",)
        assert repository.all() == []

    def test_disconnected_stations_return_none(self, planner):
        assert planner.plan_route("MX", "LENK", "ANA-01") is None

    def test_connected_stations_are_stored(self, planner):
        route = planner.plan_route("ZW", "LENK", "ANA-02", user_id=1)

        assert route is not None
        assert route.distance_km == 13.0


class TestListRoutes:
    def test_uses_default_page_size(self, planner):
        for _ in range(3):
            planner.calculate_and_store("MX", "CGE", "ANA-01", user_id=1)

        page = planner.list_routes(1)

        assert page.per_page == 2
        assert len(page.items) == 2
        assert page.total == 3

    def test_caps_page_size(self, planner):
        page = planner.list_routes(1, per_page=500)

        assert page.per_page == 3

    @pytest.mark.parametrize("page, per_page", [(0, None), (1, 0), (-1, 5)])
    def test_rejects_invalid_pagination(self, planner, page, per_page):
        with pytest.raises(InvalidRouteRequestError):
            planner.list_routes(1, page=page, per_page=per_page)
