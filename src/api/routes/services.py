"""Service catalog endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_list_services_use_case
from src.application.dto.responses import ServiceListResponse
from src.application.use_cases.list_services import ListServicesUseCase

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("", response_model=ServiceListResponse)
async def list_services(
    use_case: ListServicesUseCase = Depends(get_list_services_use_case),
) -> ServiceListResponse:
    """
    List the catalog.

    When the store cannot be read the listing is empty and ``available``
    is false, so the sale form can still render.
    """
    result = await use_case.execute()
    return use_case.to_response(result)
