"""Core domain entities."""

from src.core.entities.report import (
    UNASSIGNED_SERVICE_TYPE,
    DailySnapshotDocument,
    DailySnapshotRow,
    ReportBucket,
    ReportPeriod,
    ReportSummary,
)
from src.core.entities.service import (
    ColorType,
    PaperOrientation,
    Service,
    ServiceType,
)
from src.core.entities.transaction import (
    CustomerInfo,
    IdentityContext,
    PaymentMethod,
    Transaction,
    TransactionLineItem,
)

__all__ = [
    # Catalog entities
    "Service",
    "ServiceType",
    "ColorType",
    "PaperOrientation",
    # Ledger entities
    "Transaction",
    "TransactionLineItem",
    "PaymentMethod",
    "IdentityContext",
    "CustomerInfo",
    # Report entities
    "ReportBucket",
    "ReportPeriod",
    "ReportSummary",
    "DailySnapshotDocument",
    "DailySnapshotRow",
    "UNASSIGNED_SERVICE_TYPE",
]
