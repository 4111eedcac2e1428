"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteServiceStore,
    SQLiteTransactionStore,
    close_pool,
    get_connection,
    get_pool,
    get_service_store,
    get_transaction,
    get_transaction_store,
)

__all__ = [
    # SQLite stores
    "SQLiteServiceStore",
    "SQLiteTransactionStore",
    "get_service_store",
    "get_transaction_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
