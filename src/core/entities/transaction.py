"""Day book transaction domain entities."""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.entities.money import ZERO, clamp_final_cost
from src.core.entities.service import ServiceType


class PaymentMethod(str, Enum):
    """How the customer paid."""

    CASH = "Cash"
    PHONEPE = "PhonePe"


def new_transaction_id() -> str:
    return str(uuid4())


class IdentityContext(BaseModel):
    """The actor recording ledger changes."""

    user_id: str


class CustomerInfo(BaseModel):
    """Optional customer details captured with a sale."""

    name: str | None = None
    phone: str | None = None

    @field_validator("name", "phone", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = str(v).strip()
        return v or None


class TransactionLineItem(BaseModel):
    """One service within a multi-service transaction."""

    id: int | None = None
    transaction_id: str | None = None
    service_id: str
    service_name: str
    quantity: int = Field(..., gt=0)
    unit_cost: Decimal = Field(..., ge=0)  # price snapshot at time of sale
    line_total: Decimal = ZERO  # quantity * unit_cost

    @model_validator(mode="after")
    def compute_line(self) -> "TransactionLineItem":
        """Compute line_total from quantity and the unit cost snapshot."""
        self.line_total = self.unit_cost * self.quantity
        return self


class Transaction(BaseModel):
    """A single recorded sale on the day book."""

    id: str = Field(default_factory=new_transaction_id)
    user_id: str
    sale_date: date
    sale_time: time
    payment_method: PaymentMethod
    quantity: int = Field(..., gt=0)  # pages / items sold
    unit_cost: Decimal | None = Field(default=None, ge=0)
    cost: Decimal = Field(default=ZERO, ge=0)  # gross
    discount: Decimal = Field(default=ZERO, ge=0)  # "estimation" in the shop's terms
    final_cost: Decimal = ZERO
    service_id: str | None = None
    service_type: ServiceType | None = None
    notes: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    is_multi_service: bool = False
    items: list[TransactionLineItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def compute_totals(self) -> "Transaction":
        """Derive gross and final cost from the unit cost or the line items."""
        if self.items:
            self.cost = sum((i.line_total for i in self.items), ZERO)
        elif self.unit_cost is not None:
            self.cost = self.unit_cost * self.quantity
        self.final_cost = clamp_final_cost(self.cost, self.discount)
        return self

    @property
    def recorded_at(self) -> datetime:
        return datetime.combine(self.sale_date, self.sale_time)
