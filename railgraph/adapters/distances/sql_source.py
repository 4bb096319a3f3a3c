"""SQL distance source adapter.

Reads track segments from a relational ``distances`` table through the
SQLAlchemy ORM. Any database SQLAlchemy can reach works; tests use an
in-memory SQLite database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List

from sqlalchemy import DateTime, Integer, Numeric, String, UniqueConstraint, create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from ...domain.errors import DataUnavailableError
from ...domain.models import Edge, StationCode


class Base(DeclarativeBase):
    pass


class DistanceRow(Base):
    __tablename__ = "distances"
    __table_args__ = (UniqueConstraint("parent_station", "child_station"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    line_name: Mapped[str] = mapped_column(String(20))
    parent_station: Mapped[str] = mapped_column(String(10), index=True)
    child_station: Mapped[str] = mapped_column(String(10), index=True)
    distance_km: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP")
    )


@dataclass
class SqlDistanceSource:
    """Distance source backed by a relational database.

    This adapter implements DistanceSourcePort.

    Attributes:
        engine: SQLAlchemy engine connected to the database
    """

    engine: Engine
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_url(cls, database_url: str) -> SqlDistanceSource:
        """Create a source from a database URL (e.g. 'sqlite:///railgraph.db')."""
        return cls(engine=create_engine(database_url, pool_pre_ping=True))

    def create_schema(self) -> None:
        """Create the distances table if it does not exist."""
        Base.metadata.create_all(self.engine)

    def add_edges(self, edges: Iterable[Edge]) -> int:
        """Insert track segments. Used to seed a database.

        Returns:
            Number of rows inserted.

        Raises:
            DataUnavailableError: If the insert fails (e.g. duplicate pair).
        """
        rows = [
            DistanceRow(
                line_name=edge.line_name,
                parent_station=edge.parent,
                child_station=edge.child,
                distance_km=edge.distance_km,
            )
            for edge in edges
        ]
        try:
            with Session(self.engine) as session, session.begin():
                session.add_all(rows)
        except SQLAlchemyError as e:
            raise DataUnavailableError(
                "Failed to store distances",
                source=self._describe(),
                cause=e,
            )
        return len(rows)

    def get_all_edges(self) -> List[Edge]:
        """Read every track segment from the distances table.

        Raises:
            DataUnavailableError: If the database cannot be queried.
        """
        stmt = select(
            DistanceRow.line_name,
            DistanceRow.parent_station,
            DistanceRow.child_station,
            DistanceRow.distance_km,
        ).order_by(DistanceRow.id)

        try:
            with Session(self.engine) as session:
                rows = session.execute(stmt).all()
            edges = [
                Edge(
                    parent=StationCode(row.parent_station),
                    child=StationCode(row.child_station),
                    distance_km=float(row.distance_km),
                    line_name=row.line_name or "",
                )
                for row in rows
            ]
        except (SQLAlchemyError, ValueError) as e:
            raise DataUnavailableError(
                "Failed to read distances from database",
                source=self._describe(),
                cause=e,
            )

        self._logger.info(
            "Distances read", extra={"source": self._describe(), "edges": len(edges)}
        )
        return edges

    def _describe(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

