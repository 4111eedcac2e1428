"""List and get transaction use cases."""

from dataclasses import dataclass

from src.application.dto.responses import (
    TransactionLineItemResponse,
    TransactionListResponse,
    TransactionResponse,
)
from src.application.services import get_transaction_ledger
from src.config import get_logger
from src.core.entities.transaction import Transaction
from src.core.interfaces.transaction_store import ITransactionStore

logger = get_logger(__name__)


@dataclass
class ListTransactionsResult:
    """Ledger contents, newest first."""

    transactions: list[Transaction]


class ListTransactionsUseCase:
    """List every recorded transaction, newest first."""

    def __init__(self, transaction_store: ITransactionStore | None = None):
        self._transaction_store = transaction_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def execute(self) -> ListTransactionsResult:
        ledger = await get_transaction_ledger(await self._get_transaction_store())
        transactions = await ledger.list_transactions()
        logger.debug("transactions_listed", total=len(transactions))
        return ListTransactionsResult(transactions=transactions)

    @staticmethod
    def to_response(result: ListTransactionsResult) -> TransactionListResponse:
        """Convert result to API response."""
        return TransactionListResponse(
            transactions=[transaction_to_response(t) for t in result.transactions],
            total=len(result.transactions),
        )


class GetTransactionUseCase:
    """Fetch one transaction with its line items."""

    def __init__(self, transaction_store: ITransactionStore | None = None):
        self._transaction_store = transaction_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def execute(self, transaction_id: str) -> Transaction:
        """
        Raises:
            TransactionNotFoundError: If no transaction has this ID
        """
        ledger = await get_transaction_ledger(await self._get_transaction_store())
        return await ledger.get_transaction(transaction_id)


def transaction_to_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        user_id=transaction.user_id,
        sale_date=transaction.sale_date,
        sale_time=transaction.sale_time,
        payment_method=transaction.payment_method.value,
        quantity=transaction.quantity,
        unit_cost=transaction.unit_cost,
        cost=transaction.cost,
        discount=transaction.discount,
        final_cost=transaction.final_cost,
        service_id=transaction.service_id,
        service_type=transaction.service_type.value if transaction.service_type else None,
        notes=transaction.notes,
        customer_name=transaction.customer_name,
        customer_phone=transaction.customer_phone,
        is_multi_service=transaction.is_multi_service,
        items=[
            TransactionLineItemResponse(
                id=item.id,
                service_id=item.service_id,
                service_name=item.service_name,
                quantity=item.quantity,
                unit_cost=item.unit_cost,
                line_total=item.line_total,
            )
            for item in transaction.items
        ],
        created_at=transaction.created_at,
    )
