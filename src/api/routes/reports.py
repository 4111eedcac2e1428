"""Sales report endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from src.api.dependencies import (
    get_daily_report_use_case,
    get_daily_snapshot_pdf_use_case,
    get_monthly_report_use_case,
)
from src.application.dto.responses import ErrorResponse, ReportResponse
from src.application.use_cases.create_daily_snapshot_pdf import CreateDailySnapshotPdfUseCase
from src.application.use_cases.generate_report import (
    GenerateDailyReportUseCase,
    GenerateMonthlyReportUseCase,
)

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get(
    "/daily",
    response_model=ReportResponse,
    responses={400: {"model": ErrorResponse}},
)
async def daily_report(
    days: int | None = Query(default=None, le=366, description="Window length in days"),
    use_case: GenerateDailyReportUseCase = Depends(get_daily_report_use_case),
) -> ReportResponse:
    """Per-day totals for the window ending today, oldest day first."""
    result = await use_case.execute(days=days)
    return use_case.to_response(result)


@router.get(
    "/monthly",
    response_model=ReportResponse,
    responses={400: {"model": ErrorResponse}},
)
async def monthly_report(
    year: int | None = Query(default=None, description="Calendar year, defaults to current"),
    use_case: GenerateMonthlyReportUseCase = Depends(get_monthly_report_use_case),
) -> ReportResponse:
    """Per-month totals for one calendar year, January first."""
    result = await use_case.execute(year=year)
    return use_case.to_response(result)


@router.get(
    "/daily/print",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def print_daily_snapshot(
    use_case: CreateDailySnapshotPdfUseCase = Depends(get_daily_snapshot_pdf_use_case),
) -> Response:
    """Render today's transactions as a printable PDF."""
    result = await use_case.execute()
    return Response(
        content=result.pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{result.file_name}"'},
    )
