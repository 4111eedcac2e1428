"""Unit tests for domain exceptions."""

from src.core.exceptions import (
    DayBookError,
    IdentityRequiredError,
    PartialWriteError,
    PersistenceError,
    RecordNotFoundError,
    ServiceNotFoundError,
    TransactionNotFoundError,
    ValidationError,
)


class TestDayBookError:
    def test_defaults(self):
        err = DayBookError("boom")
        assert err.message == "boom"
        assert err.code == "DayBookError"
        assert err.details == {}

    def test_to_dict(self):
        err = DayBookError("boom", code="X", details={"a": 1})
        assert err.to_dict() == {"error": "X", "message": "boom", "details": {"a": 1}}


class TestValidationError:
    def test_fields(self):
        err = ValidationError("quantity", "Quantity must be a positive integer", 0)
        assert err.code == "VALIDATION_ERROR"
        assert err.details["field"] == "quantity"
        assert err.details["value"] == "0"
        assert "quantity" in err.message

    def test_long_value_truncated(self):
        err = ValidationError("notes", "too long", "x" * 500)
        assert len(err.details["value"]) == 100

    def test_identity_required_is_validation_error(self):
        err = IdentityRequiredError()
        assert isinstance(err, ValidationError)
        assert err.code == "IDENTITY_REQUIRED"
        assert err.details["field"] == "user_id"


class TestPersistenceErrors:
    def test_persistence_error(self):
        err = PersistenceError("create_transaction", "disk I/O error")
        assert err.code == "PERSISTENCE_ERROR"
        assert err.operation == "create_transaction"
        assert err.details["error"] == "disk I/O error"

    def test_not_found_hierarchy(self):
        err = TransactionNotFoundError("abc")
        assert isinstance(err, RecordNotFoundError)
        assert isinstance(err, PersistenceError)
        assert err.code == "TRANSACTION_NOT_FOUND"
        assert err.message == "Transaction not found: abc"
        assert str(err) == "Transaction not found: abc"
        assert err.details["transaction_id"] == "abc"

    def test_service_not_found(self):
        err = ServiceNotFoundError("xerox-black-a9")
        assert err.code == "SERVICE_NOT_FOUND"
        assert err.details["service_id"] == "xerox-black-a9"

    def test_partial_write(self):
        err = PartialWriteError("t1", expected_items=3, saved_items=1)
        assert isinstance(err, PersistenceError)
        assert err.code == "PARTIAL_WRITE"
        assert err.details["expected_items"] == 3
        assert err.details["saved_items"] == 1
        assert "1 of 3" in err.message
