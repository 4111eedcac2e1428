"""Abstract interface for service catalog storage."""

from abc import ABC, abstractmethod

from src.core.entities.service import Service


class IServiceStore(ABC):
    """Interface for service catalog persistence."""

    @abstractmethod
    async def list_services(self) -> list[Service]:
        """List all services ordered by service type, then name."""
        pass

    @abstractmethod
    async def get_service(self, service_id: str) -> Service | None:
        """Get a service by ID."""
        pass

    @abstractmethod
    async def add_service(self, service: Service) -> Service:
        """Insert a new service."""
        pass

    @abstractmethod
    async def update_service(self, service: Service) -> Service:
        """Replace a service's attributes, keyed by its ID."""
        pass
