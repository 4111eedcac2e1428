"""Service catalog domain entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ServiceType(str, Enum):
    """Category of a sellable service."""

    XEROX = "xerox"
    SCANNING = "scanning"
    NET_PRINTING = "net_printing"
    SPIRAL_BINDING = "spiral_binding"
    LAMINATION = "lamination"
    RUBBER_STAMPS = "rubber_stamps"

    @property
    def label(self) -> str:
        return SERVICE_TYPE_LABELS[self]


SERVICE_TYPE_LABELS: dict[ServiceType, str] = {
    ServiceType.XEROX: "Xerox",
    ServiceType.SCANNING: "Scanning",
    ServiceType.NET_PRINTING: "Net Printing",
    ServiceType.SPIRAL_BINDING: "Spiral Binding",
    ServiceType.LAMINATION: "Lamination",
    ServiceType.RUBBER_STAMPS: "Rubber Stamps",
}


class ColorType(str, Enum):
    """Print color mode."""

    BLACK_WHITE = "black_white"
    COLOR = "color"


class PaperOrientation(str, Enum):
    """Single or double sided copies."""

    SINGLE_SIDE = "single_side"
    BOTH_SIDES = "both_sides"


# Categories for which the optional print attributes mean anything
COLOR_TYPES_ALLOWED = frozenset({ServiceType.XEROX, ServiceType.NET_PRINTING})
ORIENTATION_ALLOWED = frozenset({ServiceType.XEROX})


class Service(BaseModel):
    """A priced offering from the shop's catalog."""

    id: str
    service_type: ServiceType
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    paper_size: str | None = None
    color_type: ColorType | None = None
    paper_orientation: PaperOrientation | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def check_category_fields(self) -> "Service":
        """Reject print attributes on categories where they have no meaning."""
        if self.color_type is not None and self.service_type not in COLOR_TYPES_ALLOWED:
            raise ValueError(
                f"color_type is only valid for xerox and net_printing, "
                f"not {self.service_type.value}"
            )
        if (
            self.paper_orientation is not None
            and self.service_type not in ORIENTATION_ALLOWED
        ):
            raise ValueError(
                f"paper_orientation is only valid for xerox, "
                f"not {self.service_type.value}"
            )
        return self

    @property
    def display_name(self) -> str:
        """Name with paper size, as shown on receipts."""
        if self.paper_size and self.paper_size not in self.name:
            return f"{self.name} ({self.paper_size})"
        return self.name
