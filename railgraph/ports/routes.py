"""Route repository port - Abstraction for stored route history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Page, RouteRecord, StationCode


class RouteRepositoryPort(Protocol):
    """Port for persisting computed routes.

    Implementation: adapters/routes/memory_repository.py
    """

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
            The stored route with its generated id and timestamp.
        """
        ...

    def find_by_user(self, user_id: int, page: int = 1, per_page: int = 10) -> Page:
        """Return one page of a user's routes, newest first."""
        ...
