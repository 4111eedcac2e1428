"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from src.core.services import (
    IDailySnapshotRenderer,
    PrintFormatter,
    ReportAggregator,
    ServiceCatalog,
    TransactionLedger,
)

if TYPE_CHECKING:
    from src.core.interfaces import IServiceStore, ITransactionStore


# Singleton service instances (stateless ones only)
_report_aggregator: ReportAggregator | None = None
_print_formatter: PrintFormatter | None = None
_snapshot_renderer: IDailySnapshotRenderer | None = None


async def get_service_catalog(
    service_store: "IServiceStore | None" = None,
) -> ServiceCatalog:
    """
    Create a ServiceCatalog.

    Args:
        service_store: Optional store override (defaults to SQLite)
    """
    if service_store is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage.sqlite import get_service_store

        service_store = await get_service_store()
    return ServiceCatalog(service_store)


async def get_transaction_ledger(
    transaction_store: "ITransactionStore | None" = None,
    clock: Callable[[], datetime] | None = None,
) -> TransactionLedger:
    """
    Create a TransactionLedger.

    A fresh ledger per call, since its cached view belongs to one caller.

    Args:
        transaction_store: Optional store override (defaults to SQLite)
        clock: Optional clock override for the recording timestamp
    """
    if transaction_store is None:
        from src.infrastructure.storage.sqlite import get_transaction_store

        transaction_store = await get_transaction_store()
    return TransactionLedger(transaction_store, clock=clock)


def get_report_aggregator() -> ReportAggregator:
    """Get or create the ReportAggregator singleton."""
    global _report_aggregator
    if _report_aggregator is None:
        _report_aggregator = ReportAggregator()
    return _report_aggregator


def get_print_formatter() -> PrintFormatter:
    """Get or create the PrintFormatter singleton."""
    global _print_formatter
    if _print_formatter is None:
        _print_formatter = PrintFormatter()
    return _print_formatter


def get_daily_snapshot_renderer() -> IDailySnapshotRenderer:
    """Get or create the PDF renderer configured from PdfSettings."""
    global _snapshot_renderer
    if _snapshot_renderer is None:
        from src.infrastructure.pdf import Fpdf2DailySnapshotRenderer

        _snapshot_renderer = Fpdf2DailySnapshotRenderer()
    return _snapshot_renderer


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _report_aggregator
    global _print_formatter
    global _snapshot_renderer

    _report_aggregator = None
    _print_formatter = None
    _snapshot_renderer = None


__all__ = [
    # Factory functions
    "get_service_catalog",
    "get_transaction_ledger",
    "get_report_aggregator",
    "get_print_formatter",
    "get_daily_snapshot_renderer",
    "reset_services",
]
