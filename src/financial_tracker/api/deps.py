"""FastAPI dependency injection for repositories and services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from financial_tracker.db.session import get_db
from financial_tracker.repositories.category import CategoryRepository
from financial_tracker.repositories.transaction import TransactionRepository
from financial_tracker.services.category import CategoryService
from financial_tracker.services.transaction import TransactionService


async def get_category_repository(
    db: AsyncSession = Depends(get_db),
) -> CategoryRepository:
    """
    Get category repository instance.

    Args:
        db: Database session

    Returns:
        CategoryRepository instance
    """
    return CategoryRepository(db)


async def get_transaction_repository(
    db: AsyncSession = Depends(get_db),
) -> TransactionRepository:
    """
    Get transaction repository instance.

    Args:
        db: Database session

    Returns:
        TransactionRepository instance
    """
    return TransactionRepository(db)


async def get_category_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
) -> CategoryService:
    """Get category service bound to the request's repositories."""
    return CategoryService(category_repo, transaction_repo)


async def get_transaction_service(
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> TransactionService:
    """Get transaction service bound to the request's repositories."""
    return TransactionService(transaction_repo, category_repo)
