"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    persistence_errors,
)
from src.infrastructure.storage.sqlite.service_store import SQLiteServiceStore
from src.infrastructure.storage.sqlite.transaction_store import SQLiteTransactionStore

# Singleton instances
_service_store: SQLiteServiceStore | None = None
_transaction_store: SQLiteTransactionStore | None = None


async def get_service_store() -> SQLiteServiceStore:
    """Get singleton service store instance."""
    global _service_store
    if _service_store is None:
        _service_store = SQLiteServiceStore()
    return _service_store


async def get_transaction_store() -> SQLiteTransactionStore:
    """Get singleton transaction store instance."""
    global _transaction_store
    if _transaction_store is None:
        _transaction_store = SQLiteTransactionStore()
    return _transaction_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "persistence_errors",
    # Store classes
    "SQLiteServiceStore",
    "SQLiteTransactionStore",
    # Factory functions
    "get_service_store",
    "get_transaction_store",
]
