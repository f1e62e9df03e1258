"""Error codes and user-friendly messages.

This module defines the error catalog for the tracker. Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "RES_001": {
        "code": "RES_001",
        "message": "Requested resource does not exist",
        "user_message": "We couldn't find what you were looking for.",
        "suggestion": "Please check the identifier and try again.",
        "retry_allowed": False,
    },
    "RES_002": {
        "code": "RES_002",
        "message": "A category with this name already exists",
        "user_message": "That category name is already taken.",
        "suggestion": "Choose a different name or edit the existing category.",
        "retry_allowed": False,
    },
    "BIZ_001": {
        "code": "BIZ_001",
        "message": "Operation violates a business rule",
        "user_message": "This change isn't allowed right now.",
        "suggestion": "Remove or reassign dependent transactions first.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request payload failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Field value failed domain validation",
        "user_message": "One of the values you entered isn't valid.",
        "suggestion": "Please correct the highlighted field and try again.",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists",
        "suggestion": "Please check if the record was already created",
        "retry_allowed": False,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic, retryable definition instead of
    raising.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]
