"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.core.entities.service import ColorType, PaperOrientation, Service, ServiceType
from src.core.entities.transaction import (
    IdentityContext,
    PaymentMethod,
    Transaction,
    TransactionLineItem,
)
from src.core.interfaces.transaction_store import ITransactionStore


class InMemoryTransactionStore(ITransactionStore):
    """Dict-backed transaction store for ledger tests."""

    def __init__(self) -> None:
        self.rows: dict[str, Transaction] = {}

    async def create_transaction(self, transaction: Transaction) -> Transaction:
        for index, item in enumerate(transaction.items, 1):
            item.id = index
            item.transaction_id = transaction.id
        self.rows[transaction.id] = transaction
        return transaction

    async def get_transaction(self, transaction_id: str) -> Transaction | None:
        return self.rows.get(transaction_id)

    async def list_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        return [
            t for t in self.rows.values()
            if (start_date is None or t.sale_date >= start_date)
            and (end_date is None or t.sale_date <= end_date)
        ]

    async def delete_transaction(self, transaction_id: str) -> bool:
        return self.rows.pop(transaction_id, None) is not None


def _make_clock(*moments: datetime) -> Callable[[], datetime]:
    """Clock returning each moment in turn, then repeating the last one."""
    remaining = list(moments)

    def clock() -> datetime:
        if len(remaining) > 1:
            return remaining.pop(0)
        return remaining[0]

    return clock


def _make_transaction(
    sale_date: date,
    final_cost: str,
    payment_method: PaymentMethod = PaymentMethod.CASH,
    service_type: ServiceType | None = ServiceType.XEROX,
    quantity: int = 1,
    sale_time: str = "10:00:00",
    **kwargs,
) -> Transaction:
    """Build a single-service transaction whose final cost is ``final_cost``."""
    amount = Decimal(final_cost)
    return Transaction(
        user_id="tester",
        sale_date=sale_date,
        sale_time=datetime.strptime(sale_time, "%H:%M:%S").time(),
        payment_method=payment_method,
        quantity=quantity,
        cost=amount,
        service_type=service_type,
        **kwargs,
    )


@pytest.fixture
def identity() -> IdentityContext:
    return IdentityContext(user_id="counter-1")


@pytest.fixture
def xerox_a4() -> Service:
    """Black xerox, A4, Rs. 2 per page."""
    return Service(
        id="xerox-black-a4",
        service_type=ServiceType.XEROX,
        name="Black",
        price=Decimal("2"),
        paper_size="A4",
        color_type=ColorType.BLACK_WHITE,
        paper_orientation=PaperOrientation.SINGLE_SIDE,
    )


@pytest.fixture
def lamination_a4() -> Service:
    return Service(
        id="lamination-a4",
        service_type=ServiceType.LAMINATION,
        name="Lamination",
        price=Decimal("20"),
        paper_size="A4",
    )


@pytest.fixture
def spiral_binding() -> Service:
    return Service(
        id="spiral-binding",
        service_type=ServiceType.SPIRAL_BINDING,
        name="Spiral Binding",
        price=Decimal("30"),
    )


@pytest.fixture
def memory_store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture
def line_item() -> TransactionLineItem:
    return TransactionLineItem(
        service_id="xerox-black-a4",
        service_name="Black",
        quantity=10,
        unit_cost=Decimal("2"),
    )


@pytest.fixture
async def migrated_db(tmp_path: Path) -> AsyncGenerator[Path, None]:
    """
    Fully migrated temporary database wired into the global pool.

    Stores created inside the test talk to this file; the pool is closed
    afterwards.
    """
    import src.infrastructure.storage.sqlite.connection as conn_module
    from src.infrastructure.storage.sqlite.migrations import initialize_database

    db_path = tmp_path / "daybook.db"
    results = await initialize_database(db_path=db_path, create_backup_before=False)
    assert all(r.success for r in results)

    mock_settings = MagicMock()
    mock_settings.storage.db_path = db_path
    mock_settings.storage.pool_size = 1
    mock_settings.storage.busy_timeout = 5000

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield db_path
        finally:
            await conn_module.close_pool()


@pytest.fixture
def make_clock() -> Callable[..., Callable[[], datetime]]:
    return _make_clock


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    return _make_transaction
