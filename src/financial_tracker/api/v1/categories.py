"""Category management endpoints."""

from fastapi import APIRouter, Depends, Response, status

from financial_tracker.api.deps import get_category_service, get_transaction_service
from financial_tracker.schemas.category import (
    CategoryExpenseSummary,
    CategoryRequest,
    CategoryResponse,
)
from financial_tracker.services.category import CategoryService
from financial_tracker.services.transaction import TransactionService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "/expenses/summary",
    response_model=list[CategoryExpenseSummary],
    summary="Expense totals per category",
    description="""
    Total spent in every EXPENSE category, largest first.

    Categories without transactions are included with a total of 0.00.
    Equal totals are ordered by category id.
    """,
)
async def get_category_expense_summary(
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> list[CategoryExpenseSummary]:
    return await transaction_service.get_category_expense_summary()


@router.get("", response_model=list[CategoryResponse], summary="List categories")
async def list_categories(
    category_service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await category_service.get_all()
    return [CategoryResponse.model_validate(category) for category in categories]


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Get category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(
    category_id: int,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await category_service.get(category_id)
    return CategoryResponse.model_validate(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={409: {"description": "Category name already exists"}},
)
async def create_category(
    request: CategoryRequest,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await category_service.create(request.name, request.type)
    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Replace category",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "Category name already exists"},
    },
)
async def update_category(
    category_id: int,
    request: CategoryRequest,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await category_service.update(category_id, request.name, request.type)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    description="Only categories without transactions can be deleted.",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "Category still has transactions"},
    },
)
async def delete_category(
    category_id: int,
    category_service: CategoryService = Depends(get_category_service),
) -> Response:
    await category_service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
