"""
Create Daily Snapshot PDF Use Case.

Builds today's printable report and renders it to PDF.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from src.application.services import (
    get_daily_snapshot_renderer,
    get_print_formatter,
    get_report_aggregator,
)
from src.config import get_logger, get_settings
from src.core.entities.report import DailySnapshotDocument
from src.core.interfaces.transaction_store import ITransactionStore
from src.core.services.print_formatter import IDailySnapshotRenderer

logger = get_logger(__name__)


@dataclass
class DailySnapshotPdfResult:
    """Result of daily snapshot PDF generation."""

    pdf_bytes: bytes
    snapshot_date: date
    document: DailySnapshotDocument
    file_name: str
    file_size: int


class CreateDailySnapshotPdfUseCase:
    """
    Use case for printing the day's transactions.

    Flow:
    1. Load the snapshot day's transactions from the store
    2. Summarize them and build the snapshot document
    3. Render PDF via the injected renderer
    """

    def __init__(
        self,
        transaction_store: ITransactionStore | None = None,
        renderer: IDailySnapshotRenderer | None = None,
        clock: Callable[[], datetime] | None = None,
        shop_name: str | None = None,
    ):
        self._transaction_store = transaction_store
        self._renderer = renderer
        self._clock = clock or datetime.now
        self._shop_name = shop_name
        self._aggregator = get_report_aggregator()
        self._formatter = get_print_formatter()

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    def _get_renderer(self) -> IDailySnapshotRenderer:
        if self._renderer is None:
            self._renderer = get_daily_snapshot_renderer()
        return self._renderer

    async def execute(self, snapshot_date: date | None = None) -> DailySnapshotPdfResult:
        """
        Generate the daily snapshot PDF.

        Args:
            snapshot_date: Day to print (defaults to today)
        """
        snapshot_date = snapshot_date or self._clock().date()
        logger.info("create_daily_snapshot_started", snapshot_date=snapshot_date.isoformat())

        store = await self._get_transaction_store()
        transactions = await store.list_transactions(
            start_date=snapshot_date,
            end_date=snapshot_date,
        )

        todays = self._aggregator.today_transactions(transactions, snapshot_date)
        buckets = self._aggregator.daily_report(todays, snapshot_date, days=1)
        summary = self._aggregator.summary(buckets)

        document = self._formatter.render_daily_snapshot(
            transactions=todays,
            summary=summary,
            snapshot_date=snapshot_date,
            shop_name=self._shop_name or get_settings().pdf.shop_name,
        )
        pdf_bytes = self._get_renderer().render(document)

        logger.info(
            "create_daily_snapshot_complete",
            snapshot_date=snapshot_date.isoformat(),
            rows=len(document.rows),
            file_size=len(pdf_bytes),
        )
        return DailySnapshotPdfResult(
            pdf_bytes=pdf_bytes,
            snapshot_date=snapshot_date,
            document=document,
            file_name=f"daybook_{snapshot_date.isoformat()}.pdf",
            file_size=len(pdf_bytes),
        )
