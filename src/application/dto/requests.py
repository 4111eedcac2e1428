"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Quantities and discounts are passed through loosely typed so that the
ledger applies its own rules (positive quantity, lenient discount) and
reports them as domain validation errors.
"""

from typing import Any

from pydantic import BaseModel, Field


class RecordSingleTransactionRequest(BaseModel):
    """Request to record a sale of one catalog service."""

    service_id: str = Field(..., description="Catalog service ID", examples=["xerox-black-a4"])
    quantity: Any = Field(..., description="Pages or items sold", examples=[10])
    payment_method: str = Field(..., description="Cash or PhonePe", examples=["Cash"])
    discount: Any = Field(
        default=None,
        description="Discount amount; blank or non-numeric counts as zero",
        examples=["5"],
    )
    notes: str | None = Field(default=None, description="Free-text notes")
    customer_name: str | None = Field(default=None, description="Customer name")
    customer_phone: str | None = Field(default=None, description="Customer phone")


class MultiServiceItemRequest(BaseModel):
    """One selected service within a multi-service sale."""

    service_id: str = Field(..., description="Catalog service ID")
    quantity: Any = Field(default=1, description="Pages or items sold")


class RecordMultiTransactionRequest(BaseModel):
    """Request to record one sale made of several services."""

    items: list[MultiServiceItemRequest] = Field(
        ..., description="Selected services; the first is the primary service"
    )
    payment_method: str = Field(..., description="Cash or PhonePe", examples=["PhonePe"])
    discount: Any = Field(default=None, description="Discount over the whole sale")
    notes: str | None = Field(default=None, description="Free-text notes")
    customer_name: str | None = Field(default=None, description="Customer name")
    customer_phone: str | None = Field(default=None, description="Customer phone")
