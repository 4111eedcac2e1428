"""Report aggregation and printable snapshot entities."""

from datetime import date, time
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from src.core.entities.money import ZERO

UNASSIGNED_SERVICE_TYPE = "unassigned"


class ReportPeriod(str, Enum):
    """Bucket granularity."""

    DAY = "day"
    MONTH = "month"


class ReportBucket(BaseModel):
    """Totals for one day or one calendar month. Never persisted."""

    label: str
    period: ReportPeriod
    period_start: date
    by_payment_method: dict[str, Decimal] = Field(default_factory=dict)
    by_service_type: dict[str, Decimal] = Field(default_factory=dict)
    total: Decimal = ZERO
    transaction_count: int = 0
    total_quantity: int = 0


class ReportSummary(BaseModel):
    """Headline figures over a sequence of buckets."""

    total_revenue: Decimal = ZERO
    transaction_count: int = 0
    average_transaction: Decimal = ZERO


class DailySnapshotRow(BaseModel):
    """One transaction line on the printable daily report."""

    time: time
    payment_method: str
    description: str
    quantity: int
    cost: Decimal
    discount: Decimal
    final_cost: Decimal
    customer: str | None = None


class DailySnapshotDocument(BaseModel):
    """Self-contained printable daily report."""

    title: str
    shop_name: str
    snapshot_date: date
    rows: list[DailySnapshotRow] = Field(default_factory=list)
    summary: ReportSummary
    by_payment_method: dict[str, Decimal] = Field(default_factory=dict)
    total_quantity: int = 0
