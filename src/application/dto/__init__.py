"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    MultiServiceItemRequest,
    RecordMultiTransactionRequest,
    RecordSingleTransactionRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    ProviderHealthResponse,
    ReportBucketResponse,
    ReportResponse,
    ReportSummaryResponse,
    ServiceListResponse,
    ServiceResponse,
    TransactionLineItemResponse,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "RecordSingleTransactionRequest",
    "RecordMultiTransactionRequest",
    "MultiServiceItemRequest",
    # Responses
    "ServiceResponse",
    "ServiceListResponse",
    "TransactionResponse",
    "TransactionLineItemResponse",
    "TransactionListResponse",
    "ReportBucketResponse",
    "ReportSummaryResponse",
    "ReportResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
