"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime, time
from decimal import Decimal

from pydantic import BaseModel, Field


class ServiceResponse(BaseModel):
    """Catalog service response DTO."""

    id: str
    service_type: str
    service_type_label: str
    name: str
    display_name: str
    price: Decimal
    paper_size: str | None = None
    color_type: str | None = None
    paper_orientation: str | None = None


class ServiceListResponse(BaseModel):
    """Catalog listing. ``available`` is False when the store could not be read."""

    services: list[ServiceResponse]
    total: int
    available: bool = True
    error: str | None = None


class TransactionLineItemResponse(BaseModel):
    """Multi-service line item response DTO."""

    id: int | None = None
    service_id: str
    service_name: str
    quantity: int
    unit_cost: Decimal
    line_total: Decimal


class TransactionResponse(BaseModel):
    """Day book transaction response DTO."""

    id: str
    user_id: str
    sale_date: date
    sale_time: time
    payment_method: str
    quantity: int
    unit_cost: Decimal | None = None
    cost: Decimal
    discount: Decimal
    final_cost: Decimal
    service_id: str | None = None
    service_type: str | None = None
    notes: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    is_multi_service: bool = False
    items: list[TransactionLineItemResponse] = Field(default_factory=list)
    created_at: datetime


class TransactionListResponse(BaseModel):
    """Ledger listing, newest first."""

    transactions: list[TransactionResponse]
    total: int


class ReportBucketResponse(BaseModel):
    """One day or month of aggregated sales."""

    label: str
    period_start: date
    by_payment_method: dict[str, Decimal]
    by_service_type: dict[str, Decimal]
    total: Decimal
    transaction_count: int
    total_quantity: int


class ReportSummaryResponse(BaseModel):
    """Headline figures across a report."""

    total_revenue: Decimal
    transaction_count: int
    average_transaction: Decimal


class ReportResponse(BaseModel):
    """Daily or monthly report."""

    period: str = Field(..., description="day or month")
    buckets: list[ReportBucketResponse]
    summary: ReportSummaryResponse


class ProviderHealthResponse(BaseModel):
    """Dependency health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. TRANSACTION_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
