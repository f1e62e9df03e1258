"""Global error handling middleware.

This module provides consistent error responses across all API endpoints.
Domain exceptions raised by the services are mapped to HTTP status codes
here; the services themselves know nothing about HTTP.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from financial_tracker.config import settings
from financial_tracker.core.errors import get_error
from financial_tracker.core.exceptions import FinanceTrackerError

logger = logging.getLogger(__name__)

# Error code -> HTTP status for domain exceptions
ERROR_HTTP_STATUS: dict[str, int] = {
    "RES_001": status.HTTP_404_NOT_FOUND,
    "RES_002": status.HTTP_409_CONFLICT,
    "BIZ_001": status.HTTP_409_CONFLICT,
    "VAL_002": status.HTTP_400_BAD_REQUEST,
}


def _error_content(error_code: str, message: str | None = None, **extra) -> dict:
    error_info = get_error(error_code)
    return {
        "error_code": error_code,
        "message": message or error_info["message"],
        "user_message": error_info["user_message"],
        "suggestion": error_info["suggestion"],
        "retry_allowed": error_info["retry_allowed"],
        **extra,
    }


async def handle_domain_error(request: Request, exc: FinanceTrackerError) -> JSONResponse:
    """Handle exceptions raised by the service layer.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with error details from catalog
    """
    status_code = ERROR_HTTP_STATUS.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.warning(
        f"Domain error: {exc.error_code}",
        extra={"error_code": exc.error_code, "path": request.url.path, "method": request.method},
    )

    return JSONResponse(
        status_code=status_code,
        content=_error_content(exc.error_code, str(exc), details=exc.details),
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse with validation error details
    """
    error_messages = []
    for error in exc.errors():
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    logger.warning(
        f"Validation error on {request.url.path}",
        extra={"path": request.url.path, "method": request.method},
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content("VAL_001", " | ".join(error_messages)),
    )


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors the services did not translate.

    Args:
        request: The incoming request
        exc: The integrity error

    Returns:
        JSONResponse with error details
    """
    # Do not log str(exc): it can include SQL + bound parameters.
    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        logger.exception(f"Database integrity error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Database integrity error on {request.url.path}", extra=extra)

    error_msg = str(exc).lower()
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_content("DB_002"),
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content("DB_001"),
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Args:
        request: The incoming request
        exc: The unexpected exception

    Returns:
        JSONResponse with generic error message
    """
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    # Don't expose internal details
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content("SYS_001"),
    )
