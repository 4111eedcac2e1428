"""Day book transaction endpoints."""

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import (
    get_delete_transaction_use_case,
    get_get_transaction_use_case,
    get_identity,
    get_list_transactions_use_case,
    get_record_multi_use_case,
    get_record_single_use_case,
)
from src.application.dto.requests import (
    RecordMultiTransactionRequest,
    RecordSingleTransactionRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    TransactionListResponse,
    TransactionResponse,
)
from src.application.use_cases.delete_transaction import DeleteTransactionUseCase
from src.application.use_cases.list_transactions import (
    GetTransactionUseCase,
    ListTransactionsUseCase,
    transaction_to_response,
)
from src.application.use_cases.record_transaction import (
    RecordMultiTransactionUseCase,
    RecordSingleTransactionUseCase,
)
from src.core.entities.transaction import IdentityContext

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
async def list_transactions(
    use_case: ListTransactionsUseCase = Depends(get_list_transactions_use_case),
) -> TransactionListResponse:
    """List all transactions, newest first."""
    result = await use_case.execute()
    return use_case.to_response(result)


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_transaction(
    transaction_id: str,
    use_case: GetTransactionUseCase = Depends(get_get_transaction_use_case),
) -> TransactionResponse:
    """Get one transaction with its line items."""
    transaction = await use_case.execute(transaction_id)
    return transaction_to_response(transaction)


@router.post(
    "/single",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def record_single_transaction(
    request: RecordSingleTransactionRequest,
    identity: IdentityContext | None = Depends(get_identity),
    use_case: RecordSingleTransactionUseCase = Depends(get_record_single_use_case),
) -> TransactionResponse:
    """Record a sale of one service at its catalog price."""
    result = await use_case.execute(identity, request)
    return use_case.to_response(result)


@router.post(
    "/multi",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def record_multi_transaction(
    request: RecordMultiTransactionRequest,
    identity: IdentityContext | None = Depends(get_identity),
    use_case: RecordMultiTransactionUseCase = Depends(get_record_multi_use_case),
) -> TransactionResponse:
    """Record one sale made of several services."""
    result = await use_case.execute(identity, request)
    return use_case.to_response(result)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def delete_transaction(
    transaction_id: str,
    identity: IdentityContext | None = Depends(get_identity),
    use_case: DeleteTransactionUseCase = Depends(get_delete_transaction_use_case),
) -> Response:
    """Delete a transaction. Deleting an unknown ID is not an error."""
    await use_case.execute(identity, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
