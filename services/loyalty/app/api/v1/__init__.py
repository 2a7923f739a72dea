"""Version 1 API routes for the loyalty service."""

from fastapi import APIRouter, Depends

from app.core.security import require_api_key

from .balance_routes import router as balance_router
from .benefit_routes import router as benefit_router
from .membership_routes import router as membership_router
from .payment_routes import router as payment_router
from .plan_routes import router as plan_router

router = APIRouter(dependencies=[Depends(require_api_key)])
router.include_router(plan_router)
router.include_router(benefit_router)
router.include_router(membership_router)
router.include_router(payment_router)
router.include_router(balance_router)

__all__ = [
    "router",
    "balance_router",
    "benefit_router",
    "membership_router",
    "payment_router",
    "plan_router",
]
