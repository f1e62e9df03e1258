"""Pydantic schemas for category API requests and responses."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from financial_tracker.models.category import CategoryType


class CategoryRequest(BaseModel):
    """Payload for creating or replacing a category."""

    name: str = Field(description="Unique category name (surrounding whitespace is ignored)")
    type: CategoryType = Field(description="INCOME or EXPENSE")


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    id: int
    name: str
    type: CategoryType
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class CategoryExpenseSummary(BaseModel):
    """Total spent in one EXPENSE category."""

    category_id: int
    category_name: str
    total_expenses: Decimal = Field(description="Exact sum of transaction amounts")
