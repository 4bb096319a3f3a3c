"""Thread-safe in-memory route repository.

Stores computed routes for the lifetime of the process. Routes are
kept in creation order; listings return them newest first.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ...domain.models import Page, RouteRecord, StationCode


@dataclass
class InMemoryRouteRepository:
    """In-memory route history.

    This adapter implements RouteRepositoryPort.
    """

    _routes: List[RouteRecord] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        from_station_id: StationCode,
        to_station_id: StationCode,
        analytic_code: str,
        distance_km: float,
        path: Sequence[StationCode],
        user_id: Optional[int] = None,
    ) -> RouteRecord:
        """Store a computed route.

        Returns:
            The stored route with a fresh UUID and UTC timestamp.
        """
        record = RouteRecord(
            id=str(uuid.uuid4()),
            from_station_id=from_station_id,
            to_station_id=to_station_id,
            analytic_code=analytic_code,
            distance_km=distance_km,
            path=tuple(path),
            created_at=datetime.now(timezone.utc),
            user_id=user_id,
        )
        with self._lock:
            self._routes.append(record)
        self._logger.debug(
            "Route stored",
            extra={"route_id": record.id, "analytic_code": analytic_code},
        )
        return record

    def find_by_user(self, user_id: int, page: int = 1, per_page: int = 10) -> Page:
        """Return one page of a user's routes, newest first.

        Args:
            user_id: Owner of the routes.
            page: 1-based page number.
            per_page: Maximum number of routes per page.
        """
        with self._lock:
            owned = [route for route in self._routes if route.user_id == user_id]

        owned.reverse()
        start = (page - 1) * per_page
        return Page(
            items=tuple(owned[start : start + per_page]),
            total=len(owned),
            page=page,
            per_page=per_page,
        )

    def get(self, route_id: str) -> Optional[RouteRecord]:
        """Return a stored route by id, or None."""
        with self._lock:
            for route in self._routes:
                if route.id == route_id:
                    return route
        return None

    def all(self) -> List[RouteRecord]:
        """Return every stored route, in creation order."""
        with self._lock:
            return list(self._routes)

    def clear(self) -> int:
        """Remove all routes.

        Returns:
            Number of routes removed.
        """
        with self._lock:
            count = len(self._routes)
            self._routes.clear()
        self._logger.info("Route history cleared", extra={"routes_cleared": count})
        return count
