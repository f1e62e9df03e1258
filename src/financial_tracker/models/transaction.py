"""Transaction model representing a single dated money movement."""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from financial_tracker.models.base import BaseModel, UTCDateTime

DESCRIPTION_MAX_LENGTH = 100
AMOUNT_PRECISION = 10
AMOUNT_SCALE = 2


class Transaction(BaseModel):
    """Transaction model.

    The owning category is held as a plain foreign key; there is no ORM
    relationship, so the category is never fetched implicitly. Resolve it
    through the category repository instead.
    """

    __tablename__ = "transactions"

    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=True)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False
    )
    time: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Transaction(id={self.id}, category_id={self.category_id}, amount={self.amount})>"
