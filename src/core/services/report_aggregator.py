"""
Report Aggregator.

Rolls ledger transactions up into day and month buckets grouped by
payment method and by service category. Pure functions over a snapshot;
no storage access.
"""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from src.config import get_logger
from src.core.entities.money import ZERO, quantize
from src.core.entities.report import (
    UNASSIGNED_SERVICE_TYPE,
    ReportBucket,
    ReportPeriod,
    ReportSummary,
)
from src.core.entities.service import ServiceType
from src.core.entities.transaction import PaymentMethod, Transaction

logger = get_logger(__name__)

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class ReportAggregator:
    """
    Builds fixed-shape report buckets.

    Empty periods are never omitted so chart axes stay aligned, and every
    payment method and service category is present in each bucket with a
    zero total when nothing was sold.
    """

    def daily_report(
        self,
        transactions: Iterable[Transaction],
        today: date,
        days: int = 7,
    ) -> list[ReportBucket]:
        """
        One bucket per calendar day ending at ``today``, oldest first.

        Args:
            transactions: Ledger snapshot to aggregate
            today: Last day of the window
            days: Window length in days, including today
        """
        if days <= 0:
            raise ValueError("days must be positive")

        window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
        by_day: dict[date, list[Transaction]] = {day: [] for day in window}
        for transaction in transactions:
            bucket = by_day.get(transaction.sale_date)
            if bucket is not None:
                bucket.append(transaction)

        buckets = [
            _build_bucket(day.isoformat(), ReportPeriod.DAY, day, by_day[day])
            for day in window
        ]
        logger.debug(
            "daily_report_built",
            start=window[0].isoformat(),
            end=today.isoformat(),
            transactions=sum(b.transaction_count for b in buckets),
        )
        return buckets

    def monthly_report(
        self,
        transactions: Iterable[Transaction],
        year: int,
    ) -> list[ReportBucket]:
        """Exactly twelve buckets, January through December of ``year``."""
        by_month: dict[int, list[Transaction]] = {month: [] for month in range(1, 13)}
        for transaction in transactions:
            if transaction.sale_date.year == year:
                by_month[transaction.sale_date.month].append(transaction)

        buckets = [
            _build_bucket(
                MONTH_LABELS[month - 1],
                ReportPeriod.MONTH,
                date(year, month, 1),
                by_month[month],
            )
            for month in range(1, 13)
        ]
        logger.debug(
            "monthly_report_built",
            year=year,
            transactions=sum(b.transaction_count for b in buckets),
        )
        return buckets

    def summary(self, buckets: Sequence[ReportBucket]) -> ReportSummary:
        """Total revenue, transaction count and average over ``buckets``."""
        total = sum((b.total for b in buckets), ZERO)
        count = sum(b.transaction_count for b in buckets)
        average = quantize(total / count) if count > 0 else ZERO
        return ReportSummary(
            total_revenue=total,
            transaction_count=count,
            average_transaction=average,
        )

    def today_transactions(
        self,
        transactions: Iterable[Transaction],
        today: date,
    ) -> list[Transaction]:
        """Transactions recorded on ``today``, oldest first."""
        return sorted(
            (t for t in transactions if t.sale_date == today),
            key=lambda t: t.sale_time,
        )


def _build_bucket(
    label: str,
    period: ReportPeriod,
    period_start: date,
    transactions: list[Transaction],
) -> ReportBucket:
    by_method: dict[str, Decimal] = {m.value: ZERO for m in PaymentMethod}
    by_type: dict[str, Decimal] = {t.value: ZERO for t in ServiceType}
    total = ZERO
    quantity = 0

    for transaction in transactions:
        amount = transaction.final_cost
        method = transaction.payment_method.value
        by_method[method] = by_method[method] + amount
        # Multi-service sales count toward their primary category
        category = (
            transaction.service_type.value
            if transaction.service_type is not None
            else UNASSIGNED_SERVICE_TYPE
        )
        by_type[category] = by_type.get(category, ZERO) + amount
        total += amount
        quantity += transaction.quantity

    return ReportBucket(
        label=label,
        period=period,
        period_start=period_start,
        by_payment_method=by_method,
        by_service_type=by_type,
        total=total,
        transaction_count=len(transactions),
        total_quantity=quantity,
    )
