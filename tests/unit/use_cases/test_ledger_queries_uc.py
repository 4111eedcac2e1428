"""Unit tests for listing, lookup and deletion use cases."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.delete_transaction import DeleteTransactionUseCase
from src.application.use_cases.list_services import ListServicesUseCase
from src.application.use_cases.list_transactions import (
    GetTransactionUseCase,
    ListTransactionsUseCase,
)
from src.core.exceptions import (
    IdentityRequiredError,
    PersistenceError,
    TransactionNotFoundError,
)
from src.core.interfaces.service_store import IServiceStore


class TestListServicesUseCase:
    async def test_lists_catalog(self, xerox_a4, lamination_a4):
        store = AsyncMock(spec=IServiceStore)
        store.list_services.return_value = [xerox_a4, lamination_a4]
        uc = ListServicesUseCase(service_store=store)

        response = uc.to_response(await uc.execute())

        assert response.total == 2
        assert response.available is True
        assert response.services[0].service_type == "lamination"
        assert response.services[1].display_name == "Black (A4)"
        assert response.services[1].service_type_label == "Xerox"

    async def test_store_failure_gives_empty_listing(self):
        store = AsyncMock(spec=IServiceStore)
        store.list_services.side_effect = PersistenceError("list_services", "no such table")
        uc = ListServicesUseCase(service_store=store)

        response = uc.to_response(await uc.execute())

        assert response.services == []
        assert response.total == 0
        assert response.available is False
        assert "no such table" in response.error


class TestListAndGetTransactions:
    async def test_list_newest_first(self, memory_store, make_transaction):
        older = make_transaction(date(2024, 3, 9), "5")
        newer = make_transaction(date(2024, 3, 10), "7")
        await memory_store.create_transaction(older)
        await memory_store.create_transaction(newer)
        uc = ListTransactionsUseCase(transaction_store=memory_store)

        response = uc.to_response(await uc.execute())

        assert response.total == 2
        assert [t.id for t in response.transactions] == [newer.id, older.id]

    async def test_get_missing(self, memory_store):
        uc = GetTransactionUseCase(transaction_store=memory_store)
        with pytest.raises(TransactionNotFoundError):
            await uc.execute("missing")


class TestDeleteTransactionUseCase:
    async def test_delete(self, memory_store, make_transaction, identity):
        t = make_transaction(date(2024, 3, 10), "5")
        await memory_store.create_transaction(t)
        uc = DeleteTransactionUseCase(transaction_store=memory_store)

        await uc.execute(identity, t.id)
        await uc.execute(identity, t.id)

        assert memory_store.rows == {}

    async def test_delete_requires_identity(self, memory_store):
        uc = DeleteTransactionUseCase(transaction_store=memory_store)
        with pytest.raises(IdentityRequiredError):
            await uc.execute(None, "abc")
