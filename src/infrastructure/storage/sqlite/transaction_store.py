"""SQLite implementation of day book transaction storage."""

from collections import defaultdict
from datetime import date, datetime, time
from decimal import Decimal

import aiosqlite

from src.config import get_logger
from src.core.entities.transaction import Transaction, TransactionLineItem
from src.core.interfaces.transaction_store import ITransactionStore
from src.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    persistence_errors,
)

logger = get_logger(__name__)

# Newest first; rowid keeps insertion order for identical timestamps
_LIST_ORDER = "ORDER BY t.date DESC, t.time DESC, t.created_at DESC, t.rowid DESC"


class SQLiteTransactionStore(ITransactionStore):
    """SQLite implementation of transaction storage."""

    async def create_transaction(self, transaction: Transaction) -> Transaction:
        """Insert the header and every line item in one SQL transaction."""
        async with persistence_errors("create_transaction"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO transactions (
                        id, user_id, date, time, payment_method,
                        quantity, unit_cost, cost, discount, final_cost,
                        service_id, service_type, notes,
                        customer_name, customer_phone, is_multi_service, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        transaction.id,
                        transaction.user_id,
                        transaction.sale_date.isoformat(),
                        transaction.sale_time.isoformat(),
                        transaction.payment_method.value,
                        transaction.quantity,
                        _money_or_none(transaction.unit_cost),
                        str(transaction.cost),
                        str(transaction.discount),
                        str(transaction.final_cost),
                        transaction.service_id,
                        transaction.service_type.value if transaction.service_type else None,
                        transaction.notes,
                        transaction.customer_name,
                        transaction.customer_phone,
                        int(transaction.is_multi_service),
                        transaction.created_at.isoformat(),
                    ),
                )

                for item in transaction.items:
                    item.transaction_id = transaction.id
                    cursor = await conn.execute(
                        """
                        INSERT INTO transaction_items (
                            transaction_id, service_id, service_name,
                            quantity, unit_cost, line_total, created_at
                        ) VALUES (?, ?, ?, ?, ?, ?, ?)
                        """,
                        (
                            item.transaction_id,
                            item.service_id,
                            item.service_name,
                            item.quantity,
                            str(item.unit_cost),
                            str(item.line_total),
                            transaction.created_at.isoformat(),
                        ),
                    )
                    item.id = cursor.lastrowid

        logger.info(
            "transaction_stored",
            transaction_id=transaction.id,
            items=len(transaction.items),
        )
        return transaction

    async def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Get a transaction by ID with its line items."""
        async with persistence_errors("get_transaction"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM transactions WHERE id = ?",
                    (transaction_id,),
                )
                row = await cursor.fetchone()
                if row is None:
                    return None

                items_cursor = await conn.execute(
                    "SELECT * FROM transaction_items WHERE transaction_id = ? ORDER BY id",
                    (transaction_id,),
                )
                item_rows = await items_cursor.fetchall()

        return self._row_to_transaction(row, [self._row_to_item(r) for r in item_rows])

    async def list_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """List transactions newest first, optionally within [start_date, end_date]."""
        where, params = _date_filter(start_date, end_date)

        async with persistence_errors("list_transactions"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    f"SELECT t.* FROM transactions t {where} {_LIST_ORDER}",
                    params,
                )
                rows = await cursor.fetchall()

                items_cursor = await conn.execute(
                    f"""
                    SELECT ti.* FROM transaction_items ti
                    JOIN transactions t ON t.id = ti.transaction_id
                    {where}
                    ORDER BY ti.id
                    """,
                    params,
                )
                item_rows = await items_cursor.fetchall()

        items_by_txn: dict[str, list[TransactionLineItem]] = defaultdict(list)
        for item_row in item_rows:
            items_by_txn[item_row["transaction_id"]].append(self._row_to_item(item_row))

        return [self._row_to_transaction(r, items_by_txn.get(r["id"], [])) for r in rows]

    async def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction; its line items go with it via ON DELETE CASCADE."""
        async with persistence_errors("delete_transaction"):
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM transactions WHERE id = ?",
                    (transaction_id,),
                )
                deleted = cursor.rowcount > 0

        if deleted:
            logger.info("transaction_removed", transaction_id=transaction_id)
        return deleted

    @staticmethod
    def _row_to_transaction(
        row: aiosqlite.Row, items: list[TransactionLineItem]
    ) -> Transaction:
        """Convert a database row to a Transaction entity."""
        created_at = datetime.utcnow()
        if row["created_at"]:
            try:
                created_at = datetime.fromisoformat(row["created_at"])
            except (ValueError, TypeError):
                pass

        return Transaction(
            id=row["id"],
            user_id=row["user_id"],
            sale_date=date.fromisoformat(row["date"]),
            sale_time=time.fromisoformat(row["time"]),
            payment_method=row["payment_method"],
            quantity=row["quantity"],
            unit_cost=Decimal(row["unit_cost"]) if row["unit_cost"] is not None else None,
            cost=Decimal(row["cost"]),
            discount=Decimal(row["discount"]),
            final_cost=Decimal(row["final_cost"]),
            service_id=row["service_id"],
            service_type=row["service_type"],
            notes=row["notes"],
            customer_name=row["customer_name"],
            customer_phone=row["customer_phone"],
            is_multi_service=bool(row["is_multi_service"]),
            items=items,
            created_at=created_at,
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> TransactionLineItem:
        """Convert a database row to a TransactionLineItem entity."""
        return TransactionLineItem(
            id=row["id"],
            transaction_id=row["transaction_id"],
            service_id=row["service_id"],
            service_name=row["service_name"],
            quantity=row["quantity"],
            unit_cost=Decimal(row["unit_cost"]),
            line_total=Decimal(row["line_total"]),
        )


def _money_or_none(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def _date_filter(
    start_date: date | None, end_date: date | None
) -> tuple[str, tuple[str, ...]]:
    clauses = []
    params: list[str] = []
    if start_date is not None:
        clauses.append("t.date >= ?")
        params.append(start_date.isoformat())
    if end_date is not None:
        clauses.append("t.date <= ?")
        params.append(end_date.isoformat())
    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, tuple(params)
