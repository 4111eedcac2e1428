"""Generate Report Use Cases: rolling daily window and calendar year by month."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from src.application.dto.responses import (
    ReportBucketResponse,
    ReportResponse,
    ReportSummaryResponse,
)
from src.application.services import get_report_aggregator
from src.config import get_logger
from src.core.entities.report import ReportBucket, ReportPeriod, ReportSummary
from src.core.exceptions import ValidationError
from src.core.interfaces.transaction_store import ITransactionStore
from src.core.services.report_aggregator import ReportAggregator

logger = get_logger(__name__)


@dataclass
class ReportResult:
    """Buckets plus their summary."""

    period: ReportPeriod
    buckets: list[ReportBucket]
    summary: ReportSummary


class _ReportUseCaseBase:
    def __init__(
        self,
        transaction_store: ITransactionStore | None = None,
        aggregator: ReportAggregator | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._transaction_store = transaction_store
        self._aggregator = aggregator or get_report_aggregator()
        self._clock = clock or datetime.now

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    @staticmethod
    def to_response(result: ReportResult) -> ReportResponse:
        """Convert result to API response."""
        return ReportResponse(
            period=result.period.value,
            buckets=[
                ReportBucketResponse(
                    label=b.label,
                    period_start=b.period_start,
                    by_payment_method=b.by_payment_method,
                    by_service_type=b.by_service_type,
                    total=b.total,
                    transaction_count=b.transaction_count,
                    total_quantity=b.total_quantity,
                )
                for b in result.buckets
            ],
            summary=ReportSummaryResponse(
                total_revenue=result.summary.total_revenue,
                transaction_count=result.summary.transaction_count,
                average_transaction=result.summary.average_transaction,
            ),
        )


class GenerateDailyReportUseCase(_ReportUseCaseBase):
    """Per-day totals for the window ending today."""

    async def execute(self, days: int | None = None) -> ReportResult:
        if days is None:
            from src.config import get_settings

            days = get_settings().report.daily_window_days
        if days <= 0:
            raise ValidationError("days", "Report window must be at least one day", days)

        today = self._clock().date()
        start = today - timedelta(days=days - 1)

        store = await self._get_transaction_store()
        transactions = await store.list_transactions(start_date=start, end_date=today)

        buckets = self._aggregator.daily_report(transactions, today, days=days)
        summary = self._aggregator.summary(buckets)
        logger.info(
            "daily_report_generated",
            start=start.isoformat(),
            end=today.isoformat(),
            total=summary.total_revenue,
        )
        return ReportResult(period=ReportPeriod.DAY, buckets=buckets, summary=summary)


class GenerateMonthlyReportUseCase(_ReportUseCaseBase):
    """Per-month totals for one calendar year."""

    async def execute(self, year: int | None = None) -> ReportResult:
        if year is None:
            year = self._clock().year
        if not 1 <= year <= 9999:
            raise ValidationError("year", "Year is out of range", year)

        store = await self._get_transaction_store()
        transactions = await store.list_transactions(
            start_date=date(year, 1, 1),
            end_date=date(year, 12, 31),
        )

        buckets = self._aggregator.monthly_report(transactions, year)
        summary = self._aggregator.summary(buckets)
        logger.info("monthly_report_generated", year=year, total=summary.total_revenue)
        return ReportResult(period=ReportPeriod.MONTH, buckets=buckets, summary=summary)
