"""Route planner service - Computes and stores routes.

This service sits between a booking workflow and the graph engine:
it checks that both endpoints belong to the network, asks the engine
for the shortest path, and records the result with its analytic code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import RoutesConfig, get_config
from ..domain.errors import InvalidRouteRequestError, StationNotFoundError
from ..domain.models import Page, RouteRecord, StationCode
from ..ports.graph import GraphEnginePort
from ..ports.routes import RouteRepositoryPort


@dataclass
class RoutePlannerService:
    """Service for planning routes between stations.

    Attributes:
        graph_engine: Answers membership and shortest-path queries
        route_repository: Stores computed routes
        config: Pagination and analytic code limits
    """

    graph_engine: GraphEnginePort
    route_repository: RouteRepositoryPort
    config: RoutesConfig = field(default_factory=lambda: get_config().routes)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate_stations(self, from_station_id: str, to_station_id: str) -> None:
        """Check that both endpoints are part of the network graph.

        The engine answers "no path" the same way for unknown stations and
        disconnected ones; this check tells them apart.

        Raises:
            StationNotFoundError: Listing every endpoint missing from the graph.
            DataUnavailableError: If the graph cannot be loaded.
        """
        self.graph_engine.load()

        missing: List[str] = []
        for code in (from_station_id, to_station_id):
            if not self.graph_engine.has_station(code) and code not in missing:
                missing.append(code)

        if missing:
            self._logger.info(
                "Stations not in network", extra={"station_codes": missing}
            )
            raise StationNotFoundError(
                "Station(s) not in the network: " + ", ".join(repr(c) for c in missing),
                station_codes=tuple(missing),
            )

    def calculate_and_store(
        self,
        from_station_id: str,
        to_station_id: str,
        analytic_code: str,
        user_id: Optional[int] = None,
    ) -> Optional[RouteRecord]:
        """Compute the shortest path and store the route.

        Args:
            from_station_id: Departure station code.
            to_station_id: Arrival station code.
            analytic_code: Cost-center tag for reporting.
            user_id: Owner of the route, if any.

        Returns:
            The stored route, or None if no path exists.

        Raises:
            InvalidRouteRequestError: If the analytic code is empty or too long.
            DataUnavailableError: If the graph cannot be loaded.
        """
        analytic_code = self._check_analytic_code(analytic_code)

        self.graph_engine.load()
        result = self.graph_engine.find_shortest_path(from_station_id, to_station_id)

        if result is None:
            self._logger.warning(
                "No route found",
                extra={"departure": from_station_id, "arrival": to_station_id},
            )
            return None

        route = self.route_repository.create(
            from_station_id=StationCode(from_station_id),
            to_station_id=StationCode(to_station_id),
            analytic_code=analytic_code,
            distance_km=result.distance_km,
            path=result.path,
            user_id=user_id,
        )
        self._logger.info(
            "Route stored",
            extra={
                "route_id": route.id,
                "stops": result.num_stops,
                "distance_km": result.distance_km,
                "analytic_code": analytic_code,
            },
        )
        return route

    def plan_route(
        self,
        from_station_id: str,
        to_station_id: str,
        analytic_code: str,
        user_id: Optional[int] = None,
    ) -> Optional[RouteRecord]:
        """Validate both endpoints, then compute and store the route.

        Returns:
            The stored route, or None if the stations are not connected.

        Raises:
            StationNotFoundError: If an endpoint is not in the network.
            InvalidRouteRequestError: If the analytic code is unusable.
        """
        self.validate_stations(from_station_id, to_station_id)
        return self.calculate_and_store(
            from_station_id, to_station_id, analytic_code, user_id
        )

    def list_routes(
        self, user_id: int, page: int = 1, per_page: Optional[int] = None
    ) -> Page:
        """Return one page of a user's routes, newest first.

        per_page defaults to the configured value and is capped at
        ``max_per_page``.

        Raises:
            InvalidRouteRequestError: If page or per_page is below 1.
        """
        if page < 1:
            raise InvalidRouteRequestError(
                f"Page must be at least 1, got {page}", field_name="page"
            )
        if per_page is None:
            per_page = self.config.default_per_page
        if per_page < 1:
            raise InvalidRouteRequestError(
                f"per_page must be at least 1, got {per_page}",
                field_name="per_page",
            )
        per_page = min(per_page, self.config.max_per_page)

        return self.route_repository.find_by_user(user_id, page=page, per_page=per_page)

    def _check_analytic_code(self, analytic_code: str) -> str:
        code = analytic_code.strip()
        if not code:
            raise InvalidRouteRequestError(
                "The analytic code is required.", field_name="analytic_code"
            )
        if len(code) > self.config.analytic_code_max_length:
            raise InvalidRouteRequestError(
                f"The analytic code may not exceed "
                f"{self.config.analytic_code_max_length} characters.",
                field_name="analytic_code",
            )
        return code
