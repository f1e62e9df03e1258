"""Database models."""
from financial_tracker.models.category import Category, CategoryType
from financial_tracker.models.transaction import Transaction

__all__ = ["Category", "CategoryType", "Transaction"]
