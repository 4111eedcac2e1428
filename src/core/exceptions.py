"""
Domain exceptions for the Day Book application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class DayBookError(Exception):
    """Base exception for all Day Book errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(DayBookError):
    """Caller input rejected before any persistence call."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class IdentityRequiredError(ValidationError):
    """No actor identity was supplied for a ledger write."""

    def __init__(self) -> None:
        super().__init__(
            field="user_id",
            message="An identity context with a user id is required",
        )
        self.code = "IDENTITY_REQUIRED"


# Persistence Exceptions
class PersistenceError(DayBookError):
    """The backing store rejected or could not complete an operation."""

    def __init__(
        self,
        operation: str,
        error: str,
        code: str = "PERSISTENCE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        merged = {"operation": operation, "error": error}
        merged.update(details or {})
        super().__init__(
            f"Persistence error during {operation}: {error}",
            code=code,
            details=merged,
        )
        self.operation = operation


class RecordNotFoundError(PersistenceError):
    """A record addressed by id does not exist."""

    def __init__(self, record_type: str, record_id: str, code: str):
        super().__init__(
            operation=f"get_{record_type}",
            error=f"{record_type.capitalize()} not found: {record_id}",
            code=code,
            details={f"{record_type}_id": record_id},
        )
        self.message = f"{record_type.capitalize()} not found: {record_id}"
        self.args = (self.message,)


class TransactionNotFoundError(RecordNotFoundError):
    """Transaction not found in storage."""

    def __init__(self, transaction_id: str):
        super().__init__("transaction", transaction_id, code="TRANSACTION_NOT_FOUND")


class ServiceNotFoundError(RecordNotFoundError):
    """Service not found in the catalog."""

    def __init__(self, service_id: str):
        super().__init__("service", service_id, code="SERVICE_NOT_FOUND")


class PartialWriteError(PersistenceError):
    """A multi-service transaction was stored without all of its line items."""

    def __init__(self, transaction_id: str, expected_items: int, saved_items: int):
        super().__init__(
            operation="create_transaction",
            error=(
                f"Transaction {transaction_id} saved {saved_items} of "
                f"{expected_items} line items"
            ),
            code="PARTIAL_WRITE",
            details={
                "transaction_id": transaction_id,
                "expected_items": expected_items,
                "saved_items": saved_items,
            },
        )
