"""Category model classifying transactions as income or expense."""
import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from financial_tracker.models.base import BaseModel

CATEGORY_NAME_MAX_LENGTH = 50


class CategoryType(str, enum.Enum):
    """Kind of financial activity a category tracks."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Category(BaseModel):
    """Category model; names are unique across all categories."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(CATEGORY_NAME_MAX_LENGTH), nullable=False, unique=True
    )
    type: Mapped[CategoryType] = mapped_column(
        Enum(CategoryType, name="category_type", native_enum=False, length=12),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, type={self.type})>"
