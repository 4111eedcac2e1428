"""List Services Use Case."""

from dataclasses import dataclass, field

from src.application.dto.responses import ServiceListResponse, ServiceResponse
from src.application.services import get_service_catalog
from src.config import get_logger
from src.core.entities.service import Service
from src.core.interfaces.service_store import IServiceStore

logger = get_logger(__name__)


@dataclass
class ListServicesResult:
    """Catalog listing. ``error`` is set when the store could not be read."""

    services: list[Service] = field(default_factory=list)
    error: str | None = None


class ListServicesUseCase:
    """List the priced services available for sale."""

    def __init__(self, service_store: IServiceStore | None = None):
        self._service_store = service_store

    async def _get_service_store(self) -> IServiceStore:
        if self._service_store is None:
            from src.infrastructure.storage.sqlite import get_service_store

            self._service_store = await get_service_store()
        return self._service_store

    async def execute(self) -> ListServicesResult:
        """Load the catalog. An unreachable store yields an empty listing."""
        catalog = await get_service_catalog(await self._get_service_store())
        services = await catalog.list_services()
        error = catalog.last_error.message if catalog.last_error else None
        return ListServicesResult(services=services, error=error)

    @staticmethod
    def to_response(result: ListServicesResult) -> ServiceListResponse:
        """Convert result to API response."""
        return ServiceListResponse(
            services=[service_to_response(s) for s in result.services],
            total=len(result.services),
            available=result.error is None,
            error=result.error,
        )


def service_to_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        service_type=service.service_type.value,
        service_type_label=service.service_type.label,
        name=service.name,
        display_name=service.display_name,
        price=service.price,
        paper_size=service.paper_size,
        color_type=service.color_type.value if service.color_type else None,
        paper_orientation=(
            service.paper_orientation.value if service.paper_orientation else None
        ),
    )
