"""Store contracts consumed by the service layer.

The services depend only on these protocols; the SQLAlchemy repositories in
this package satisfy them, and tests may substitute in-memory stores.
"""

from typing import Protocol

from financial_tracker.models.category import Category, CategoryType
from financial_tracker.models.transaction import Transaction


class CategoryStore(Protocol):
    """Persistence contract for categories."""

    async def get_by_id(self, id: int) -> Category | None:
        """Retrieve a category by ID."""
        ...

    async def get_by_name(self, name: str) -> Category | None:
        """Retrieve a category by its exact name."""
        ...

    async def get_by_type(self, category_type: CategoryType) -> list[Category]:
        """List categories of the given type."""
        ...

    async def get_all(self) -> list[Category]:
        """List all categories."""
        ...

    async def save(self, category: Category) -> Category:
        """Insert or update a category."""
        ...

    async def delete_by_id(self, id: int) -> bool:
        """Delete a category by ID."""
        ...

    async def exists_by_id(self, id: int) -> bool:
        """Check whether a category exists."""
        ...


class TransactionStore(Protocol):
    """Persistence contract for transactions."""

    async def get_by_id(self, id: int) -> Transaction | None:
        """Retrieve a transaction by ID."""
        ...

    async def get_by_category_id(self, category_id: int) -> list[Transaction]:
        """List transactions referencing a category."""
        ...

    async def exists_by_category_id(self, category_id: int) -> bool:
        """Check whether any transaction references a category."""
        ...

    async def get_all(self) -> list[Transaction]:
        """List all transactions in store order."""
        ...

    async def get_all_ordered_by_time_desc(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        ...

    async def save(self, transaction: Transaction) -> Transaction:
        """Insert or update a transaction."""
        ...

    async def delete_by_id(self, id: int) -> bool:
        """Delete a transaction by ID."""
        ...
