from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from financial_tracker import __version__
from financial_tracker.api.middleware.error_handler import (
    handle_domain_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from financial_tracker.api.middleware.logging import RequestLoggingMiddleware
from financial_tracker.api.v1 import router as v1_router
from financial_tracker.api.v1.health import router as health_router
from financial_tracker.config import settings
from financial_tracker.core.exceptions import FinanceTrackerError
from financial_tracker.core.logging import setup_logging
from financial_tracker.db.session import async_engine, init_models


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.log_level, settings.log_format)
    if settings.create_tables_on_startup:
        await init_models()
    yield
    # Shutdown
    await async_engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Financial Tracker API",
        description="Categorized income/expense tracking with expense summaries",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(FinanceTrackerError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
