"""Category repository with name and type lookups."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from financial_tracker.models.category import Category, CategoryType
from financial_tracker.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def get_by_name(self, name: str) -> Category | None:
        """Find category by exact name."""
        result = await self.db.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()

    async def get_by_type(self, category_type: CategoryType) -> list[Category]:
        """Get all categories of a given type."""
        result = await self.db.execute(
            select(Category).where(Category.type == category_type).order_by(Category.id)
        )
        return list(result.scalars().all())
