"""Base repository with generic CRUD operations."""
from typing import Generic, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from financial_tracker.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model.

    Every write commits immediately; a failed commit is rolled back before
    the error is re-raised so the session stays usable for the request.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: int) -> T | None:
        """Get a single record by ID."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[T]:
        """Get all records in store order."""
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def exists_by_id(self, id: int) -> bool:
        """Check whether a record with this ID exists."""
        result = await self.db.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None

    async def save(self, obj: T) -> T:
        """Insert a new record or persist changes to an existing one."""
        self.db.add(obj)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        await self.db.refresh(obj)
        return obj

    async def delete_by_id(self, id: int) -> bool:
        """Delete a record by ID. Returns False if nothing was deleted."""
        try:
            result = await self.db.execute(delete(self.model).where(self.model.id == id))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        return result.rowcount > 0
