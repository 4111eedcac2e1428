"""Application use cases."""

from src.application.use_cases.create_daily_snapshot_pdf import (
    CreateDailySnapshotPdfUseCase,
    DailySnapshotPdfResult,
)
from src.application.use_cases.delete_transaction import DeleteTransactionUseCase
from src.application.use_cases.generate_report import (
    GenerateDailyReportUseCase,
    GenerateMonthlyReportUseCase,
    ReportResult,
)
from src.application.use_cases.list_services import ListServicesResult, ListServicesUseCase
from src.application.use_cases.list_transactions import (
    GetTransactionUseCase,
    ListTransactionsResult,
    ListTransactionsUseCase,
)
from src.application.use_cases.record_transaction import (
    RecordMultiTransactionUseCase,
    RecordSingleTransactionUseCase,
    RecordTransactionResult,
)

__all__ = [
    "ListServicesUseCase",
    "ListServicesResult",
    "RecordSingleTransactionUseCase",
    "RecordMultiTransactionUseCase",
    "RecordTransactionResult",
    "ListTransactionsUseCase",
    "ListTransactionsResult",
    "GetTransactionUseCase",
    "DeleteTransactionUseCase",
    "GenerateDailyReportUseCase",
    "GenerateMonthlyReportUseCase",
    "ReportResult",
    "CreateDailySnapshotPdfUseCase",
    "DailySnapshotPdfResult",
]
