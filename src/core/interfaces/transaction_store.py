"""Abstract interface for day book transaction storage."""

from abc import ABC, abstractmethod
from datetime import date

from src.core.entities.transaction import Transaction


class ITransactionStore(ABC):
    """Interface for transaction persistence."""

    @abstractmethod
    async def create_transaction(self, transaction: Transaction) -> Transaction:
        """Persist a transaction header and all its line items as one unit."""
        pass

    @abstractmethod
    async def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Get a transaction by ID with its line items."""
        pass

    @abstractmethod
    async def list_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """List transactions newest first, optionally within a date range."""
        pass

    @abstractmethod
    async def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction and its line items. Returns False if absent."""
        pass
