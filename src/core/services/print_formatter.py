"""
Daily snapshot print formatting.

Pure service that turns today's transactions into a self-contained
printable document. Turning the document into bytes is delegated to an
injected IDailySnapshotRenderer.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from src.config import get_logger
from src.core.entities.money import ZERO
from src.core.entities.report import (
    DailySnapshotDocument,
    DailySnapshotRow,
    ReportSummary,
)
from src.core.entities.transaction import PaymentMethod, Transaction

logger = get_logger(__name__)


class IDailySnapshotRenderer(ABC):
    """Interface for printable snapshot renderers."""

    @abstractmethod
    def render(self, document: DailySnapshotDocument) -> bytes:
        """Render a snapshot document into printable bytes."""
        pass


class PrintFormatter:
    """Builds the daily snapshot document. Same inputs, same document."""

    def render_daily_snapshot(
        self,
        transactions: Iterable[Transaction],
        summary: ReportSummary,
        snapshot_date: date,
        shop_name: str,
    ) -> DailySnapshotDocument:
        """
        Build the printable daily report.

        Args:
            transactions: The day's transactions, in any order
            summary: Totals shown in the report footer
            snapshot_date: Day the report covers
            shop_name: Heading printed above the table

        Returns:
            DailySnapshotDocument with rows ordered by time of sale
        """
        ordered = sorted(transactions, key=lambda t: (t.sale_time, t.created_at))

        by_method = {m.value: ZERO for m in PaymentMethod}
        for transaction in ordered:
            by_method[transaction.payment_method.value] += transaction.final_cost

        rows = [_to_row(t) for t in ordered]
        document = DailySnapshotDocument(
            title=f"Daily Report - {snapshot_date.strftime('%d %b %Y')}",
            shop_name=shop_name,
            snapshot_date=snapshot_date,
            rows=rows,
            summary=summary,
            by_payment_method=by_method,
            total_quantity=sum(r.quantity for r in rows),
        )
        logger.debug(
            "daily_snapshot_formatted",
            snapshot_date=snapshot_date.isoformat(),
            rows=len(rows),
        )
        return document


def _to_row(transaction: Transaction) -> DailySnapshotRow:
    if transaction.is_multi_service:
        description = transaction.notes or "Multi-service"
    else:
        description = (
            transaction.service_type.label
            if transaction.service_type is not None
            else "Service"
        )
        if transaction.notes:
            description = f"{description} - {transaction.notes}"

    customer = transaction.customer_name
    if customer and transaction.customer_phone:
        customer = f"{customer} ({transaction.customer_phone})"
    elif transaction.customer_phone:
        customer = transaction.customer_phone

    return DailySnapshotRow(
        time=transaction.sale_time,
        payment_method=transaction.payment_method.value,
        description=description,
        quantity=transaction.quantity,
        cost=transaction.cost,
        # Discount actually applied, so cost - discount == final_cost on paper
        discount=transaction.cost - transaction.final_cost,
        final_cost=transaction.final_cost,
        customer=customer,
    )
