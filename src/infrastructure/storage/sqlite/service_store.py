"""SQLite implementation of the service catalog store."""

from datetime import datetime
from decimal import Decimal

import aiosqlite

from src.config import get_logger
from src.core.entities.service import Service
from src.core.exceptions import ServiceNotFoundError
from src.core.interfaces.service_store import IServiceStore
from src.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    persistence_errors,
)

logger = get_logger(__name__)


class SQLiteServiceStore(IServiceStore):
    """SQLite implementation of catalog storage."""

    async def list_services(self) -> list[Service]:
        """List every service ordered by category and name."""
        async with persistence_errors("list_services"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM services ORDER BY service_type, name"
                )
                rows = await cursor.fetchall()
        return [self._row_to_service(r) for r in rows]

    async def get_service(self, service_id: str) -> Service | None:
        """Get a service by ID."""
        async with persistence_errors("get_service"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM services WHERE id = ?",
                    (service_id,),
                )
                row = await cursor.fetchone()
        return self._row_to_service(row) if row else None

    async def add_service(self, service: Service) -> Service:
        """Insert a new catalog service."""
        now = datetime.utcnow()
        service.created_at = now
        service.updated_at = now
        async with persistence_errors("add_service"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO services (
                        id, service_type, name, price, paper_size,
                        color_type, paper_orientation, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        service.id,
                        service.service_type.value,
                        service.name,
                        str(service.price),
                        service.paper_size,
                        service.color_type.value if service.color_type else None,
                        service.paper_orientation.value if service.paper_orientation else None,
                        now.isoformat(),
                        now.isoformat(),
                    ),
                )
        logger.info("service_added", service_id=service.id, price=service.price)
        return service

    async def update_service(self, service: Service) -> Service:
        """Overwrite an existing service's name, price and print attributes."""
        now = datetime.utcnow()
        service.updated_at = now
        async with persistence_errors("update_service"):
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE services SET
                        service_type = ?, name = ?, price = ?, paper_size = ?,
                        color_type = ?, paper_orientation = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        service.service_type.value,
                        service.name,
                        str(service.price),
                        service.paper_size,
                        service.color_type.value if service.color_type else None,
                        service.paper_orientation.value if service.paper_orientation else None,
                        now.isoformat(),
                        service.id,
                    ),
                )
                updated = cursor.rowcount
        if updated == 0:
            raise ServiceNotFoundError(service.id)
        logger.info("service_updated", service_id=service.id, price=service.price)
        return service

    @staticmethod
    def _row_to_service(row: aiosqlite.Row) -> Service:
        """Convert a database row to a Service entity."""
        return Service(
            id=row["id"],
            service_type=row["service_type"],
            name=row["name"],
            price=Decimal(row["price"]),
            paper_size=row["paper_size"],
            color_type=row["color_type"],
            paper_orientation=row["paper_orientation"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


def _parse_timestamp(value: str | None) -> datetime:
    """Parse ISO or SQLite CURRENT_TIMESTAMP text, defaulting to now."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return datetime.utcnow()
