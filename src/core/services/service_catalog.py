"""
Service catalog.

Read-side view of the priced services offered by the shop.
"""

from src.config import get_logger
from src.core.entities.service import Service, ServiceType
from src.core.exceptions import PersistenceError, ServiceNotFoundError
from src.core.interfaces.service_store import IServiceStore

logger = get_logger(__name__)


class ServiceCatalog:
    """
    Lists and resolves catalog services for the ledger.

    An unreachable store yields an empty listing, never zero-priced
    placeholders; the failure is kept on ``last_error`` for the caller.
    """

    def __init__(self, service_store: IServiceStore):
        self._store = service_store
        self._services: list[Service] = []
        self.last_error: PersistenceError | None = None

    @property
    def services(self) -> list[Service]:
        """Services from the last successful load."""
        return list(self._services)

    async def list_services(self) -> list[Service]:
        """Return services ordered by service type, then name."""
        try:
            services = await self._store.list_services()
        except PersistenceError as e:
            self.last_error = e
            self._services = []
            logger.warning("catalog_load_failed", error=e.message)
            return []

        self.last_error = None
        self._services = sorted(
            services, key=lambda s: (s.service_type.value, s.name)
        )
        logger.debug("catalog_loaded", services=len(self._services))
        return list(self._services)

    async def get_service(self, service_id: str) -> Service:
        """Resolve a service by ID, raising ServiceNotFoundError if unknown."""
        service = await self._store.get_service(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)
        return service

    def group_by_type(self) -> dict[ServiceType, list[Service]]:
        """Group the loaded services by category, keeping catalog order."""
        grouped: dict[ServiceType, list[Service]] = {}
        for service in self._services:
            grouped.setdefault(service.service_type, []).append(service)
        return grouped
