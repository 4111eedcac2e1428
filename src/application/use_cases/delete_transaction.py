"""Delete Transaction Use Case."""

from src.application.services import get_transaction_ledger
from src.config import get_logger
from src.core.entities.transaction import IdentityContext
from src.core.interfaces.transaction_store import ITransactionStore

logger = get_logger(__name__)


class DeleteTransactionUseCase:
    """Delete a transaction and its line items. Already-deleted IDs are fine."""

    def __init__(self, transaction_store: ITransactionStore | None = None):
        self._transaction_store = transaction_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def execute(self, identity: IdentityContext | None, transaction_id: str) -> None:
        ledger = await get_transaction_ledger(await self._get_transaction_store())
        await ledger.delete_transaction(identity, transaction_id)
