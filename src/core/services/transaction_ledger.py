"""
Transaction ledger service.

Layer-pure service that records and deletes day book transactions.
NO infrastructure imports - depends only on core entities, interfaces, exceptions.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from decimal import Decimal
from typing import Any

from src.config import get_logger
from src.core.entities.money import ZERO, parse_amount
from src.core.entities.service import Service
from src.core.entities.transaction import (
    CustomerInfo,
    IdentityContext,
    PaymentMethod,
    Transaction,
    TransactionLineItem,
)
from src.core.exceptions import (
    IdentityRequiredError,
    PartialWriteError,
    PersistenceError,
    TransactionNotFoundError,
    ValidationError,
)
from src.core.interfaces.transaction_store import ITransactionStore

logger = get_logger(__name__)

Clock = Callable[[], datetime]

# Signed 64-bit ceiling; quantities are stored as integers
MAX_QUANTITY = 2**63 - 1


class TransactionLedger:
    """
    Append/delete log of shop transactions.

    Every mutation is a single awaited store call. The cached view in
    ``transactions`` only changes after the store confirms the write, so a
    failed write never leaves a ghost row behind.

    Required interfaces for DI:
    - ITransactionStore: persistence for headers and line items
    """

    def __init__(
        self,
        transaction_store: ITransactionStore,
        clock: Clock | None = None,
    ):
        """
        Initialize the ledger.

        Args:
            transaction_store: Store used for every read and write
            clock: Source of the recording timestamp. Defaults to local wall time.
        """
        self._store = transaction_store
        self._clock = clock or datetime.now
        self._transactions: list[Transaction] = []

    @property
    def transactions(self) -> list[Transaction]:
        """Cached view, newest first, as of the last confirmed read or write."""
        return list(self._transactions)

    async def record_single_service_transaction(
        self,
        identity: IdentityContext | None,
        payment_method: PaymentMethod | str,
        service: Service | None,
        quantity: Any,
        discount: Any = None,
        notes: str | None = None,
        customer: CustomerInfo | None = None,
    ) -> Transaction:
        """
        Record a sale of one catalog service.

        gross = quantity * service.price, final = max(0, gross - discount).

        Raises:
            ValidationError: Bad quantity, payment method, discount or identity
            PersistenceError: The store rejected the write
        """
        user_id = self._require_identity(identity)
        method = self._parse_payment_method(payment_method)
        if service is None:
            raise ValidationError("service", "A service must be selected")
        qty = self._parse_quantity("quantity", quantity)
        discount_amount = self._parse_discount(discount)
        customer = customer or CustomerInfo()
        now = self._clock()

        transaction = Transaction(
            user_id=user_id,
            sale_date=now.date(),
            sale_time=now.time().replace(microsecond=0),
            payment_method=method,
            quantity=qty,
            unit_cost=service.price,
            discount=discount_amount,
            service_id=service.id,
            service_type=service.service_type,
            notes=_clean_text(notes),
            customer_name=customer.name,
            customer_phone=customer.phone,
            created_at=now,
        )

        saved = await self._create(transaction)
        logger.info(
            "transaction_recorded",
            transaction_id=saved.id,
            service_id=service.id,
            quantity=qty,
            final_cost=saved.final_cost,
        )
        return saved

    async def record_multi_service_transaction(
        self,
        identity: IdentityContext | None,
        payment_method: PaymentMethod | str,
        items: Sequence[tuple[Service, Any]],
        discount: Any = None,
        customer: CustomerInfo | None = None,
        notes: str | None = None,
    ) -> Transaction:
        """
        Record one sale made of several catalog services.

        Each line snapshots the service price at call time. The first item
        is the primary service carried on the transaction summary fields.

        Raises:
            ValidationError: Empty selection or a non-positive quantity
            PartialWriteError: The store kept the header but not every line item
            PersistenceError: The store rejected the write
        """
        user_id = self._require_identity(identity)
        method = self._parse_payment_method(payment_method)
        if not items:
            raise ValidationError("items", "At least one service must be selected")

        line_items: list[TransactionLineItem] = []
        for index, (service, quantity) in enumerate(items):
            if service is None:
                raise ValidationError(f"items[{index}].service", "A service must be selected")
            qty = self._parse_quantity(f"items[{index}].quantity", quantity)
            line_items.append(
                TransactionLineItem(
                    service_id=service.id,
                    service_name=service.name,
                    quantity=qty,
                    unit_cost=service.price,
                )
            )

        if sum(li.quantity for li in line_items) > MAX_QUANTITY:
            raise ValidationError("items", "Total quantity is too large")

        discount_amount = self._parse_discount(discount)
        customer = customer or CustomerInfo()
        primary = items[0][0]
        now = self._clock()

        summary = ", ".join(f"{li.service_name} ({li.quantity}x)" for li in line_items)
        extra = _clean_text(notes)
        combined_notes = f"Multi-service: {summary}"
        if extra:
            combined_notes += f" | Notes: {extra}"

        transaction = Transaction(
            user_id=user_id,
            sale_date=now.date(),
            sale_time=now.time().replace(microsecond=0),
            payment_method=method,
            quantity=sum(li.quantity for li in line_items),
            discount=discount_amount,
            service_id=primary.id,
            service_type=primary.service_type,
            notes=combined_notes,
            customer_name=customer.name,
            customer_phone=customer.phone,
            is_multi_service=True,
            items=line_items,
            created_at=now,
        )

        saved = await self._create(transaction)
        logger.info(
            "multi_service_transaction_recorded",
            transaction_id=saved.id,
            items=len(saved.items),
            gross=saved.cost,
            final_cost=saved.final_cost,
        )
        return saved

    async def delete_transaction(
        self,
        identity: IdentityContext | None,
        transaction_id: str,
    ) -> None:
        """
        Delete a transaction and its line items.

        Deleting an ID that is already gone is a no-op.

        Raises:
            IdentityRequiredError: No actor identity was supplied
            PersistenceError: The store failed to complete the delete
        """
        user_id = self._require_identity(identity)
        try:
            deleted = await self._store.delete_transaction(transaction_id)
        except PersistenceError:
            logger.error("transaction_delete_failed", transaction_id=transaction_id)
            raise

        self._transactions = [t for t in self._transactions if t.id != transaction_id]
        if deleted:
            logger.info(
                "transaction_deleted", transaction_id=transaction_id, user_id=user_id
            )
        else:
            logger.info("transaction_delete_missing", transaction_id=transaction_id)

    async def list_transactions(self) -> list[Transaction]:
        """Reload the ledger from the store, newest first by (date, time)."""
        transactions = await self._store.list_transactions()
        self._transactions = _newest_first(transactions)
        return list(self._transactions)

    async def get_transaction(self, transaction_id: str) -> Transaction:
        """Get a single transaction, raising TransactionNotFoundError if absent."""
        transaction = await self._store.get_transaction(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _create(self, transaction: Transaction) -> Transaction:
        """Persist, verify line items survived, then update the cached view."""
        try:
            saved = await self._store.create_transaction(transaction)
        except PersistenceError:
            logger.error(
                "transaction_record_failed",
                transaction_id=transaction.id,
                multi_service=transaction.is_multi_service,
            )
            raise

        if len(saved.items) != len(transaction.items):
            await self._discard_partial(saved)
            raise PartialWriteError(
                transaction_id=saved.id,
                expected_items=len(transaction.items),
                saved_items=len(saved.items),
            )

        self._transactions = _newest_first([saved, *self._transactions])
        return saved

    async def _discard_partial(self, saved: Transaction) -> None:
        """Remove a header whose line items did not all persist."""
        try:
            await self._store.delete_transaction(saved.id)
        except PersistenceError as e:
            logger.error(
                "partial_write_cleanup_failed",
                transaction_id=saved.id,
                error=e.message,
            )
        else:
            logger.warning("partial_write_discarded", transaction_id=saved.id)

    @staticmethod
    def _require_identity(identity: IdentityContext | None) -> str:
        if identity is None or not identity.user_id or not identity.user_id.strip():
            raise IdentityRequiredError()
        return identity.user_id.strip()

    @staticmethod
    def _parse_payment_method(value: PaymentMethod | str) -> PaymentMethod:
        try:
            return PaymentMethod(value)
        except ValueError:
            raise ValidationError(
                "payment_method",
                f"Must be one of: {', '.join(m.value for m in PaymentMethod)}",
                value,
            )

    @staticmethod
    def _parse_quantity(field: str, value: Any) -> int:
        """Accept positive integers, or strings holding one."""
        if isinstance(value, bool):
            raise ValidationError(field, "Quantity must be a positive integer", value)
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise ValidationError(field, "Quantity must be a positive integer", value)
        if not isinstance(value, int) or value <= 0:
            raise ValidationError(field, "Quantity must be a positive integer", value)
        if value > MAX_QUANTITY:
            raise ValidationError(field, "Quantity is too large", value)
        return value

    @staticmethod
    def _parse_discount(value: Any) -> Decimal:
        """Absent or non-numeric discounts count as zero; negatives are rejected."""
        amount = parse_amount(value)
        if amount is None:
            return ZERO
        if amount < 0:
            raise ValidationError("discount", "Discount cannot be negative", value)
        return amount


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _newest_first(transactions: list[Transaction]) -> list[Transaction]:
    # sorted() is stable, so equal (date, time) keys keep the store's order
    return sorted(
        transactions,
        key=lambda t: (t.sale_date, t.sale_time),
        reverse=True,
    )
