"""In-memory stores and service fixtures for service unit tests."""

from datetime import datetime, timezone

import pytest

from financial_tracker.models.category import Category, CategoryType
from financial_tracker.models.transaction import Transaction
from financial_tracker.services.category import CategoryService
from financial_tracker.services.transaction import TransactionService

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryCategoryStore:
    """Dict-backed CategoryStore."""

    def __init__(self):
        self.rows: dict[int, Category] = {}
        self._next_id = 1

    async def get_by_id(self, id: int) -> Category | None:
        return self.rows.get(id)

    async def get_by_name(self, name: str) -> Category | None:
        return next((c for c in self.rows.values() if c.name == name), None)

    async def get_by_type(self, category_type: CategoryType) -> list[Category]:
        return [c for c in self.rows.values() if c.type == category_type]

    async def get_all(self) -> list[Category]:
        return list(self.rows.values())

    async def save(self, category: Category) -> Category:
        if category.id is None:
            category.id = self._next_id
            self._next_id += 1
        self.rows[category.id] = category
        return category

    async def delete_by_id(self, id: int) -> bool:
        return self.rows.pop(id, None) is not None

    async def exists_by_id(self, id: int) -> bool:
        return id in self.rows


class InMemoryTransactionStore:
    """Dict-backed TransactionStore."""

    def __init__(self):
        self.rows: dict[int, Transaction] = {}
        self._next_id = 1

    async def get_by_id(self, id: int) -> Transaction | None:
        return self.rows.get(id)

    async def get_by_category_id(self, category_id: int) -> list[Transaction]:
        return [t for t in self.rows.values() if t.category_id == category_id]

    async def exists_by_category_id(self, category_id: int) -> bool:
        return any(t.category_id == category_id for t in self.rows.values())

    async def get_all(self) -> list[Transaction]:
        return list(self.rows.values())

    async def get_all_ordered_by_time_desc(self) -> list[Transaction]:
        return sorted(self.rows.values(), key=lambda t: (t.time, t.id), reverse=True)

    async def save(self, transaction: Transaction) -> Transaction:
        if transaction.id is None:
            transaction.id = self._next_id
            self._next_id += 1
        self.rows[transaction.id] = transaction
        return transaction

    async def delete_by_id(self, id: int) -> bool:
        return self.rows.pop(id, None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def category_store() -> InMemoryCategoryStore:
    return InMemoryCategoryStore()


@pytest.fixture
def transaction_store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture
def category_service(category_store, transaction_store) -> CategoryService:
    return CategoryService(category_store, transaction_store)


@pytest.fixture
def transaction_service(category_store, transaction_store) -> TransactionService:
    return TransactionService(transaction_store, category_store, clock=lambda: FIXED_NOW)


@pytest.fixture
async def budget_categories(category_service: CategoryService) -> dict[str, Category]:
    """Salary (INCOME), Groceries and Rent (EXPENSE), created in that order."""
    salary = await category_service.create("Salary", CategoryType.INCOME)
    groceries = await category_service.create("Groceries", CategoryType.EXPENSE)
    rent = await category_service.create("Rent", CategoryType.EXPENSE)
    return {"salary": salary, "groceries": groceries, "rent": rent}
