"""API version 1 routes."""

from fastapi import APIRouter

from financial_tracker.api.v1 import categories, transactions

router = APIRouter(prefix="/api/v1")

# Include routers
router.include_router(categories.router)
router.include_router(transactions.router)
