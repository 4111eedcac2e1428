"""Unit tests for the record transaction use cases."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import (
    MultiServiceItemRequest,
    RecordMultiTransactionRequest,
    RecordSingleTransactionRequest,
)
from src.application.use_cases.record_transaction import (
    RecordMultiTransactionUseCase,
    RecordSingleTransactionUseCase,
)
from src.core.exceptions import IdentityRequiredError, ServiceNotFoundError, ValidationError
from src.core.interfaces.service_store import IServiceStore

NOW = datetime(2024, 3, 10, 11, 45, 10)


@pytest.fixture
def service_store(xerox_a4, lamination_a4) -> AsyncMock:
    catalog = {s.id: s for s in (xerox_a4, lamination_a4)}
    store = AsyncMock(spec=IServiceStore)
    store.get_service.side_effect = lambda service_id: catalog.get(service_id)
    return store


class TestRecordSingleTransactionUseCase:
    """Tests for RecordSingleTransactionUseCase."""

    async def test_records_and_converts(self, service_store, memory_store, identity):
        uc = RecordSingleTransactionUseCase(
            service_store=service_store,
            transaction_store=memory_store,
            clock=lambda: NOW,
        )
        request = RecordSingleTransactionRequest(
            service_id="xerox-black-a4",
            quantity="10",
            payment_method="Cash",
            discount="5",
            customer_name="Ravi",
        )

        result = await uc.execute(identity, request)
        response = uc.to_response(result)

        assert result.transaction.final_cost == Decimal("15")
        assert result.transaction.id in memory_store.rows
        assert response.final_cost == Decimal("15")
        assert response.sale_time.isoformat() == "11:45:10"
        assert response.customer_name == "Ravi"
        assert response.items == []

    async def test_unknown_service(self, service_store, memory_store, identity):
        uc = RecordSingleTransactionUseCase(service_store, memory_store)
        request = RecordSingleTransactionRequest(
            service_id="xerox-black-a9", quantity=1, payment_method="Cash"
        )

        with pytest.raises(ServiceNotFoundError):
            await uc.execute(identity, request)
        assert memory_store.rows == {}

    async def test_missing_identity(self, service_store, memory_store):
        uc = RecordSingleTransactionUseCase(service_store, memory_store)
        request = RecordSingleTransactionRequest(
            service_id="xerox-black-a4", quantity=1, payment_method="Cash"
        )

        with pytest.raises(IdentityRequiredError):
            await uc.execute(None, request)

    async def test_invalid_quantity(self, service_store, memory_store, identity):
        uc = RecordSingleTransactionUseCase(service_store, memory_store)
        request = RecordSingleTransactionRequest(
            service_id="xerox-black-a4", quantity="ten", payment_method="Cash"
        )

        with pytest.raises(ValidationError):
            await uc.execute(identity, request)
        assert memory_store.rows == {}


class TestRecordMultiTransactionUseCase:
    """Tests for RecordMultiTransactionUseCase."""

    async def test_records_line_items(self, service_store, memory_store, identity):
        uc = RecordMultiTransactionUseCase(service_store, memory_store, clock=lambda: NOW)
        request = RecordMultiTransactionRequest(
            items=[
                MultiServiceItemRequest(service_id="xerox-black-a4", quantity=10),
                MultiServiceItemRequest(service_id="lamination-a4"),
            ],
            payment_method="PhonePe",
        )

        result = await uc.execute(identity, request)
        response = uc.to_response(result)

        assert response.is_multi_service is True
        assert response.cost == Decimal("40")
        assert response.final_cost == Decimal("40")
        assert [(i.service_id, i.quantity) for i in response.items] == [
            ("xerox-black-a4", 10),
            ("lamination-a4", 1),
        ]
        assert response.payment_method == "PhonePe"

    async def test_unknown_service_in_selection(self, service_store, memory_store, identity):
        uc = RecordMultiTransactionUseCase(service_store, memory_store)
        request = RecordMultiTransactionRequest(
            items=[
                MultiServiceItemRequest(service_id="xerox-black-a4", quantity=10),
                MultiServiceItemRequest(service_id="binding-gold"),
            ],
            payment_method="Cash",
        )

        with pytest.raises(ServiceNotFoundError):
            await uc.execute(identity, request)
        assert memory_store.rows == {}

    async def test_empty_selection(self, service_store, memory_store, identity):
        uc = RecordMultiTransactionUseCase(service_store, memory_store)
        request = RecordMultiTransactionRequest(items=[], payment_method="Cash")

        with pytest.raises(ValidationError):
            await uc.execute(identity, request)
