"""
Dependency injection container for FastAPI.

Provides use case instances and the acting identity to route handlers.
"""

from functools import lru_cache

from fastapi import Header

from src.application.use_cases import (
    CreateDailySnapshotPdfUseCase,
    DeleteTransactionUseCase,
    GenerateDailyReportUseCase,
    GenerateMonthlyReportUseCase,
    GetTransactionUseCase,
    ListServicesUseCase,
    ListTransactionsUseCase,
    RecordMultiTransactionUseCase,
    RecordSingleTransactionUseCase,
)
from src.config import Settings, get_settings
from src.core.entities.transaction import IdentityContext


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_identity(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> IdentityContext | None:
    """
    Resolve the acting user from the X-User-Id header.

    A missing or blank header yields None; the ledger decides whether
    the operation needs an identity.
    """
    if x_user_id is None or not x_user_id.strip():
        return None
    return IdentityContext(user_id=x_user_id.strip())


# Use case dependencies
def get_list_services_use_case() -> ListServicesUseCase:
    """Get list services use case."""
    return ListServicesUseCase()


def get_record_single_use_case() -> RecordSingleTransactionUseCase:
    """Get single-service record use case."""
    return RecordSingleTransactionUseCase()


def get_record_multi_use_case() -> RecordMultiTransactionUseCase:
    """Get multi-service record use case."""
    return RecordMultiTransactionUseCase()


def get_list_transactions_use_case() -> ListTransactionsUseCase:
    """Get list transactions use case."""
    return ListTransactionsUseCase()


def get_get_transaction_use_case() -> GetTransactionUseCase:
    """Get single transaction lookup use case."""
    return GetTransactionUseCase()


def get_delete_transaction_use_case() -> DeleteTransactionUseCase:
    """Get delete transaction use case."""
    return DeleteTransactionUseCase()


def get_daily_report_use_case() -> GenerateDailyReportUseCase:
    """Get daily report use case."""
    return GenerateDailyReportUseCase()


def get_monthly_report_use_case() -> GenerateMonthlyReportUseCase:
    """Get monthly report use case."""
    return GenerateMonthlyReportUseCase()


def get_daily_snapshot_pdf_use_case() -> CreateDailySnapshotPdfUseCase:
    """Get daily snapshot PDF use case."""
    return CreateDailySnapshotPdfUseCase()
