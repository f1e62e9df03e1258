"""Transaction service.

This module owns the transaction lifecycle:
1. Validate amount, description and time
2. Resolve the referenced category
3. Persist the transaction
4. Aggregate expense totals per EXPENSE category
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable

from sqlalchemy.exc import IntegrityError

from financial_tracker.core.exceptions import NotFoundError, ValidationError
from financial_tracker.models.category import Category, CategoryType
from financial_tracker.models.transaction import (
    AMOUNT_PRECISION,
    AMOUNT_SCALE,
    DESCRIPTION_MAX_LENGTH,
    Transaction,
)
from financial_tracker.repositories.protocols import CategoryStore, TransactionStore
from financial_tracker.schemas.category import CategoryExpenseSummary

logger = logging.getLogger(__name__)

AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_PRECISION - AMOUNT_SCALE)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_amount(amount: Decimal | int | str | None) -> Decimal:
    """Check an amount against the storage rules and return it at scale 2.

    Raises:
        ValidationError: If the amount is missing, negative, not finite,
            has more than two decimal places or does not fit the column
    """
    if amount is None:
        raise ValidationError("amount", "amount cannot be null")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError("amount", "amount must be a decimal number")
    if not value.is_finite():
        raise ValidationError("amount", "amount must be a finite number")
    if value < 0:
        raise ValidationError("amount", "amount cannot be negative")
    if value >= AMOUNT_LIMIT:
        raise ValidationError("amount", f"amount must be less than {AMOUNT_LIMIT}")

    quantized = value.quantize(AMOUNT_QUANTUM)
    if quantized != value:
        raise ValidationError(
            "amount", f"amount cannot have more than {AMOUNT_SCALE} decimal places"
        )
    return quantized


def validate_description(description: str | None) -> str | None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            "description", f"description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


def as_utc(value: datetime) -> datetime:
    """Convert to UTC, treating naive timestamps as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TransactionService:
    """Service for transaction lifecycle and expense aggregation.

    The service holds both stores: transactions are validated against the
    category store so a transaction never points at a missing category.
    """

    def __init__(
        self,
        transaction_repo: TransactionStore,
        category_repo: CategoryStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the service.

        Args:
            transaction_repo: Store holding transactions
            category_repo: Store used to resolve category references
            clock: Source of the current instant for defaulted times
        """
        self.transaction_repo = transaction_repo
        self.category_repo = category_repo
        self.clock = clock

    async def _require_category(self, category_id: int) -> Category:
        category = await self.category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    async def create(
        self,
        description: str | None,
        amount: Decimal | None,
        category_id: int | None,
        time: datetime | None = None,
    ) -> Transaction:
        """Create a transaction in an existing category.

        Args:
            description: Optional free-text note
            amount: Non-negative amount
            category_id: ID of the owning category
            time: When it happened; defaults to the current instant

        Returns:
            The persisted transaction

        Raises:
            ValidationError: If category_id is missing or a field is invalid
            NotFoundError: If the category does not exist
        """
        if category_id is None:
            raise ValidationError("category_id", "category_id cannot be null")
        amount = validate_amount(amount)
        description = validate_description(description)
        await self._require_category(category_id)

        transaction = Transaction(
            description=description,
            amount=amount,
            category_id=category_id,
            time=as_utc(time) if time is not None else self.clock(),
        )
        try:
            saved = await self.transaction_repo.save(transaction)
        except IntegrityError as exc:
            # Category deleted between lookup and insert
            raise NotFoundError("Category", category_id) from exc

        logger.info(
            "Transaction created",
            extra={"transaction_id": saved.id, "category_id": category_id},
        )
        return saved

    async def get(self, transaction_id: int) -> Transaction:
        """Get a transaction by id.

        Raises:
            NotFoundError: If no transaction has this id
        """
        transaction = await self.transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    async def get_all(self) -> list[Transaction]:
        """Get all transactions, most recent first."""
        return await self.transaction_repo.get_all_ordered_by_time_desc()

    async def update(
        self,
        transaction_id: int,
        description: str | None,
        amount: Decimal | None,
        category_id: int | None,
        time: datetime | None,
    ) -> Transaction:
        """Fully replace a transaction's fields.

        Description, amount and time are overwritten unconditionally. The
        category is only looked up when category_id differs from the
        current one.

        A null description is written as-is, but amount and time are
        rejected when null: the amount must satisfy the non-negative rule
        and the time column is NOT NULL.

        Raises:
            NotFoundError: If the transaction, or a newly referenced
                category, does not exist
            ValidationError: If a field is invalid
        """
        transaction = await self.get(transaction_id)
        amount = validate_amount(amount)
        description = validate_description(description)
        if time is None:
            raise ValidationError("time", "time cannot be null")

        if category_id != transaction.category_id:
            if category_id is None:
                raise ValidationError("category_id", "category_id cannot be null")
            await self._require_category(category_id)
            transaction.category_id = category_id

        transaction.description = description
        transaction.amount = amount
        transaction.time = as_utc(time)
        try:
            updated = await self.transaction_repo.save(transaction)
        except IntegrityError as exc:
            raise NotFoundError("Category", category_id) from exc

        logger.info(
            "Transaction updated",
            extra={"transaction_id": transaction_id, "category_id": category_id},
        )
        return updated

    async def delete(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If no transaction has this id
        """
        await self.get(transaction_id)
        await self.transaction_repo.delete_by_id(transaction_id)
        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})

    async def get_by_category(self, category_id: int) -> list[Transaction]:
        """Get all transactions of a category, in store order.

        Raises:
            NotFoundError: If the category does not exist
        """
        await self._require_category(category_id)
        return await self.transaction_repo.get_by_category_id(category_id)

    async def get_category(self, transaction: Transaction) -> Category:
        """Resolve the category a transaction belongs to."""
        return await self._require_category(transaction.category_id)

    async def get_category_expense_summary(self) -> list[CategoryExpenseSummary]:
        """Total spent per EXPENSE category, largest first.

        Every EXPENSE category appears, with 0.00 when it has no
        transactions. Equal totals are ordered by category id ascending.
        """
        categories = await self.category_repo.get_by_type(CategoryType.EXPENSE)

        summaries = []
        for category in categories:
            transactions = await self.transaction_repo.get_by_category_id(category.id)
            total = sum((t.amount for t in transactions), Decimal("0.00"))
            summaries.append(
                CategoryExpenseSummary(
                    category_id=category.id,
                    category_name=category.name,
                    total_expenses=total,
                )
            )

        summaries.sort(key=lambda s: (-s.total_expenses, s.category_id))
        return summaries
