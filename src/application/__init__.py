"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.dto.requests import (
    MultiServiceItemRequest,
    RecordMultiTransactionRequest,
    RecordSingleTransactionRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    ReportResponse,
    ServiceListResponse,
    TransactionListResponse,
    TransactionResponse,
)
from src.application.services import (
    get_daily_snapshot_renderer,
    get_print_formatter,
    get_report_aggregator,
    get_service_catalog,
    get_transaction_ledger,
    reset_services,
)
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

__all__ = [
    # Request DTOs
    "RecordSingleTransactionRequest",
    "RecordMultiTransactionRequest",
    "MultiServiceItemRequest",
    # Response DTOs
    "ServiceListResponse",
    "TransactionResponse",
    "TransactionListResponse",
    "ReportResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "ListServicesUseCase",
    "RecordSingleTransactionUseCase",
    "RecordMultiTransactionUseCase",
    "ListTransactionsUseCase",
    "GetTransactionUseCase",
    "DeleteTransactionUseCase",
    "GenerateDailyReportUseCase",
    "GenerateMonthlyReportUseCase",
    "CreateDailySnapshotPdfUseCase",
    # Service factories
    "get_service_catalog",
    "get_transaction_ledger",
    "get_report_aggregator",
    "get_print_formatter",
    "get_daily_snapshot_renderer",
    "reset_services",
]
