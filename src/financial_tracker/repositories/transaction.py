"""Transaction repository with category filtering and time ordering."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from financial_tracker.models.transaction import Transaction
from financial_tracker.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    async def get_by_category_id(self, category_id: int) -> list[Transaction]:
        """Get all transactions referencing a category, in insertion order."""
        result = await self.db.execute(
            select(Transaction)
            .where(Transaction.category_id == category_id)
            .order_by(Transaction.id)
        )
        return list(result.scalars().all())

    async def exists_by_category_id(self, category_id: int) -> bool:
        """Check whether at least one transaction references a category."""
        result = await self.db.execute(
            select(Transaction.id).where(Transaction.category_id == category_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def get_all_ordered_by_time_desc(self) -> list[Transaction]:
        """Get all transactions, most recent first.

        Transactions sharing a timestamp come back newest-inserted first.
        """
        result = await self.db.execute(
            select(Transaction).order_by(Transaction.time.desc(), Transaction.id.desc())
        )
        return list(result.scalars().all())
