"""Category service for business logic operations."""

import logging

from sqlalchemy.exc import IntegrityError

from financial_tracker.core.exceptions import (
    BusinessRuleViolation,
    DuplicateNameError,
    NotFoundError,
    ValidationError,
)
from financial_tracker.models.category import CATEGORY_NAME_MAX_LENGTH, Category, CategoryType
from financial_tracker.repositories.protocols import CategoryStore, TransactionStore

logger = logging.getLogger(__name__)


def normalize_category_name(name: str | None) -> str:
    """Apply the collation rule used for storing and comparing names.

    Surrounding whitespace is stripped; comparison stays case-sensitive,
    matching the unique constraint on the column.

    Raises:
        ValidationError: If the name is missing, blank or too long
    """
    if name is None or not name.strip():
        raise ValidationError("name", "name cannot be blank")
    name = name.strip()
    if len(name) > CATEGORY_NAME_MAX_LENGTH:
        raise ValidationError(
            "name", f"name cannot exceed {CATEGORY_NAME_MAX_LENGTH} characters"
        )
    return name


def _require_type(category_type: CategoryType | None) -> CategoryType:
    if category_type is None:
        raise ValidationError("type", "type cannot be null")
    try:
        return CategoryType(category_type)
    except ValueError:
        raise ValidationError("type", f"type must be one of {[t.value for t in CategoryType]}")


class CategoryService:
    """Service layer for category lifecycle and name uniqueness."""

    def __init__(self, category_repo: CategoryStore, transaction_repo: TransactionStore):
        """Initialize category service.

        Args:
            category_repo: Store holding categories
            transaction_repo: Store consulted for references before deletion
        """
        self.category_repo = category_repo
        self.transaction_repo = transaction_repo

    async def create(self, name: str, category_type: CategoryType) -> Category:
        """Create a new category.

        Args:
            name: Category name, unique across all categories
            category_type: INCOME or EXPENSE

        Returns:
            The persisted category with its assigned id

        Raises:
            DuplicateNameError: If the name is already taken
            ValidationError: If name or type is invalid
        """
        name = normalize_category_name(name)
        category_type = _require_type(category_type)

        if await self.category_repo.get_by_name(name) is not None:
            raise DuplicateNameError(name)

        category = Category(name=name, type=category_type)
        try:
            saved = await self.category_repo.save(category)
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same name
            raise DuplicateNameError(name) from exc

        logger.info("Category created", extra={"category_id": saved.id})
        return saved

    async def get(self, category_id: int) -> Category:
        """Get a category by id.

        Raises:
            NotFoundError: If no category has this id
        """
        category = await self.category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    async def get_all(self) -> list[Category]:
        """Get all categories in store order."""
        return await self.category_repo.get_all()

    async def update(self, category_id: int, name: str, category_type: CategoryType) -> Category:
        """Replace a category's name and type.

        Uniqueness is only re-checked when the name actually changes, so
        saving a category under its current name always succeeds.

        Raises:
            NotFoundError: If no category has this id
            DuplicateNameError: If the new name belongs to another category
            ValidationError: If name or type is invalid
        """
        category = await self.get(category_id)
        name = normalize_category_name(name)
        category_type = _require_type(category_type)

        if category.name != name and await self.category_repo.get_by_name(name) is not None:
            raise DuplicateNameError(name)

        category.name = name
        category.type = category_type
        try:
            updated = await self.category_repo.save(category)
        except IntegrityError as exc:
            raise DuplicateNameError(name) from exc

        logger.info("Category updated", extra={"category_id": category_id})
        return updated

    async def delete(self, category_id: int) -> None:
        """Delete a category that no transaction references.

        Raises:
            NotFoundError: If no category has this id
            BusinessRuleViolation: If transactions still reference the category
        """
        if not await self.category_repo.exists_by_id(category_id):
            raise NotFoundError("Category", category_id)

        if await self.transaction_repo.exists_by_category_id(category_id):
            raise BusinessRuleViolation(
                "Cannot delete category with existing transactions",
                {"category_id": category_id},
            )

        try:
            await self.category_repo.delete_by_id(category_id)
        except IntegrityError as exc:
            # A transaction was attached between the check and the delete
            raise BusinessRuleViolation(
                "Cannot delete category with existing transactions",
                {"category_id": category_id},
            ) from exc

        logger.info("Category deleted", extra={"category_id": category_id})
