"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.print_formatter import IDailySnapshotRenderer, PrintFormatter
from src.core.services.report_aggregator import ReportAggregator
from src.core.services.service_catalog import ServiceCatalog
from src.core.services.transaction_ledger import TransactionLedger

__all__ = [
    # Catalog
    "ServiceCatalog",
    # Ledger
    "TransactionLedger",
    # Reports
    "ReportAggregator",
    # Printing
    "PrintFormatter",
    "IDailySnapshotRenderer",
]
