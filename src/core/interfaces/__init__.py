"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.service_store import IServiceStore
from src.core.interfaces.transaction_store import ITransactionStore

__all__ = [
    # Storage interfaces
    "IServiceStore",
    "ITransactionStore",
]
