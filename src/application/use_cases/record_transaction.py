"""Record Transaction Use Cases: single-service and multi-service sales."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from src.application.dto.requests import (
    RecordMultiTransactionRequest,
    RecordSingleTransactionRequest,
)
from src.application.dto.responses import TransactionResponse
from src.application.services import get_service_catalog, get_transaction_ledger
from src.application.use_cases.list_transactions import transaction_to_response
from src.config import get_logger
from src.core.entities.transaction import CustomerInfo, IdentityContext, Transaction
from src.core.interfaces.service_store import IServiceStore
from src.core.interfaces.transaction_store import ITransactionStore
from src.core.services.service_catalog import ServiceCatalog
from src.core.services.transaction_ledger import TransactionLedger

logger = get_logger(__name__)


@dataclass
class RecordTransactionResult:
    """Result of recording a transaction."""

    transaction: Transaction


class _RecordTransactionBase:
    """Store wiring shared by the record use cases."""

    def __init__(
        self,
        service_store: IServiceStore | None = None,
        transaction_store: ITransactionStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._service_store = service_store
        self._transaction_store = transaction_store
        self._clock = clock

    async def _get_service_store(self) -> IServiceStore:
        if self._service_store is None:
            from src.infrastructure.storage.sqlite import get_service_store

            self._service_store = await get_service_store()
        return self._service_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from src.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def _ledger(self) -> TransactionLedger:
        return await get_transaction_ledger(
            await self._get_transaction_store(), clock=self._clock
        )

    async def _catalog(self) -> ServiceCatalog:
        return await get_service_catalog(await self._get_service_store())

    @staticmethod
    def to_response(result: RecordTransactionResult) -> TransactionResponse:
        """Convert result to API response."""
        return transaction_to_response(result.transaction)


class RecordSingleTransactionUseCase(_RecordTransactionBase):
    """Record a sale of one catalog service at its current price."""

    async def execute(
        self,
        identity: IdentityContext | None,
        request: RecordSingleTransactionRequest,
    ) -> RecordTransactionResult:
        """
        Raises:
            ServiceNotFoundError: Unknown service ID
            ValidationError: Rejected by the ledger before persistence
            PersistenceError: The store rejected the write
        """
        logger.info(
            "record_single_transaction_started",
            service_id=request.service_id,
            payment_method=request.payment_method,
        )

        catalog = await self._catalog()
        service = await catalog.get_service(request.service_id)

        ledger = await self._ledger()
        transaction = await ledger.record_single_service_transaction(
            identity=identity,
            payment_method=request.payment_method,
            service=service,
            quantity=request.quantity,
            discount=request.discount,
            notes=request.notes,
            customer=CustomerInfo(
                name=request.customer_name,
                phone=request.customer_phone,
            ),
        )
        return RecordTransactionResult(transaction=transaction)


class RecordMultiTransactionUseCase(_RecordTransactionBase):
    """Record one sale made of several catalog services."""

    async def execute(
        self,
        identity: IdentityContext | None,
        request: RecordMultiTransactionRequest,
    ) -> RecordTransactionResult:
        """
        Raises:
            ServiceNotFoundError: Unknown service ID in the selection
            ValidationError: Rejected by the ledger before persistence
            PartialWriteError: Line items did not all persist
            PersistenceError: The store rejected the write
        """
        logger.info(
            "record_multi_transaction_started",
            items=len(request.items),
            payment_method=request.payment_method,
        )

        catalog = await self._catalog()
        items = [
            (await catalog.get_service(item.service_id), item.quantity)
            for item in request.items
        ]

        ledger = await self._ledger()
        transaction = await ledger.record_multi_service_transaction(
            identity=identity,
            payment_method=request.payment_method,
            items=items,
            discount=request.discount,
            customer=CustomerInfo(
                name=request.customer_name,
                phone=request.customer_phone,
            ),
            notes=request.notes,
        )
        return RecordTransactionResult(transaction=transaction)
