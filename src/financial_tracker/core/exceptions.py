"""Domain exception classes raised by the service layer.

Each exception maps to an error code defined in errors.py and carries
structured fields describing what went wrong. Translating them into
transport responses is the job of the API layer.
"""

from typing import Any


class FinanceTrackerError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "RES_001")
        details: Structured context about the error
    """

    def __init__(self, error_code: str, message: str, details: dict[str, Any] | None = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(FinanceTrackerError):
    """Raised when a category or transaction does not exist."""

    def __init__(self, entity_kind: str, entity_id: Any):
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        super().__init__(
            "RES_001",
            f"{entity_kind} not found with id: {entity_id}",
            {"entity_kind": entity_kind, "entity_id": entity_id},
        )


class DuplicateNameError(FinanceTrackerError):
    """Raised when a category name is already in use."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "RES_002",
            f"Category with name {name} already exists",
            {"name": name},
        )


class BusinessRuleViolation(FinanceTrackerError):
    """Raised when an operation would break a domain rule.

    The typical case is deleting a category that is still referenced by
    transactions.
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        self.reason = reason
        super().__init__("BIZ_001", reason, {"reason": reason, **(details or {})})


class ValidationError(FinanceTrackerError):
    """Raised when an input value fails a domain check."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__("VAL_002", message, {"field": field, "message": message})
