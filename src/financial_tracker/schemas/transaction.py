"""Transaction-specific request/response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from financial_tracker.models.category import CategoryType


class TransactionRequest(BaseModel):
    """Payload for creating or fully replacing a transaction.

    Amount and category checks are enforced by the service so that every
    caller gets the same rules, not only HTTP clients.
    """

    description: str | None = Field(None, description="Free-text note")
    amount: Decimal | None = Field(None, description="Non-negative amount with at most 2 decimals")
    category_id: int | None = Field(None, description="ID of an existing category")
    time: datetime | None = Field(
        None, description="When the transaction happened; defaults to now on create"
    )


class TransactionResponse(BaseModel):
    """Transaction data for API responses, with its category resolved."""

    id: int
    description: str | None
    amount: Decimal
    time: datetime
    category_id: int
    category_name: str
    category_type: CategoryType
