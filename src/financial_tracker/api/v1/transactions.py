"""Transaction endpoints."""

from fastapi import APIRouter, Depends, Response, status

from financial_tracker.api.deps import get_category_service, get_transaction_service
from financial_tracker.models.category import Category
from financial_tracker.models.transaction import Transaction
from financial_tracker.schemas.transaction import TransactionRequest, TransactionResponse
from financial_tracker.services.category import CategoryService
from financial_tracker.services.transaction import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _to_response(transaction: Transaction, category: Category) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        description=transaction.description,
        amount=transaction.amount,
        time=transaction.time,
        category_id=category.id,
        category_name=category.name,
        category_type=category.type,
    )


async def _to_responses(
    transactions: list[Transaction], category_service: CategoryService
) -> list[TransactionResponse]:
    # One category read for the whole page instead of one per row
    categories = {category.id: category for category in await category_service.get_all()}
    return [_to_response(txn, categories[txn.category_id]) for txn in transactions]


@router.get(
    "",
    response_model=list[TransactionResponse],
    summary="List transactions",
    description="All transactions, most recent first.",
)
async def list_transactions(
    transaction_service: TransactionService = Depends(get_transaction_service),
    category_service: CategoryService = Depends(get_category_service),
) -> list[TransactionResponse]:
    transactions = await transaction_service.get_all()
    return await _to_responses(transactions, category_service)


@router.get(
    "/category/{category_id}",
    response_model=list[TransactionResponse],
    summary="List a category's transactions",
    responses={404: {"description": "Category not found"}},
)
async def list_transactions_by_category(
    category_id: int,
    transaction_service: TransactionService = Depends(get_transaction_service),
    category_service: CategoryService = Depends(get_category_service),
) -> list[TransactionResponse]:
    transactions = await transaction_service.get_by_category(category_id)
    category = await category_service.get(category_id)
    return [_to_response(txn, category) for txn in transactions]


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def get_transaction(
    transaction_id: int,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await transaction_service.get(transaction_id)
    category = await transaction_service.get_category(transaction)
    return _to_response(transaction, category)


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create transaction",
    responses={
        400: {"description": "Missing category or invalid amount"},
        404: {"description": "Category not found"},
    },
)
async def create_transaction(
    request: TransactionRequest,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await transaction_service.create(
        request.description, request.amount, request.category_id, request.time
    )
    category = await transaction_service.get_category(transaction)
    return _to_response(transaction, category)


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Replace transaction",
    description="Full replace: every field in the body is written as given.",
    responses={404: {"description": "Transaction or category not found"}},
)
async def update_transaction(
    transaction_id: int,
    request: TransactionRequest,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await transaction_service.update(
        transaction_id,
        request.description,
        request.amount,
        request.category_id,
        request.time,
    )
    category = await transaction_service.get_category(transaction)
    return _to_response(transaction, category)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def delete_transaction(
    transaction_id: int,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> Response:
    await transaction_service.delete(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
