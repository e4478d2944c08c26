"""API routes, mounted under Settings.API_PREFIX."""

from fastapi import APIRouter

from repairshop.api.routes import auth, health, suppliers, transactions

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
