"""Schemas exposed by the loyalty service."""

from app.schemas.balance import BalanceCreate, BalanceResponse, BalanceUpdate
from app.schemas.benefit import BenefitCreate, BenefitResponse, BenefitUpdate
from app.schemas.common import (
    CountedListResponse,
    DataResponse,
    ListResponse,
    envelope,
)
from app.schemas.membership import (
    MembershipCreate,
    MembershipResponse,
    MembershipStatusResponse,
    MembershipUpdate,
)
from app.schemas.payment import PaymentCreate, PaymentResponse, PaymentUpdate
from app.schemas.plan import PlanCreate, PlanResponse, PlanUpdate
from app.schemas.usage import UsageCreate, UsageResponse

__all__ = [
    "BalanceCreate",
    "BalanceResponse",
    "BalanceUpdate",
    "BenefitCreate",
    "BenefitResponse",
    "BenefitUpdate",
    "CountedListResponse",
    "DataResponse",
    "ListResponse",
    "MembershipCreate",
    "MembershipResponse",
    "MembershipStatusResponse",
    "MembershipUpdate",
    "PaymentCreate",
    "PaymentResponse",
    "PaymentUpdate",
    "PlanCreate",
    "PlanResponse",
    "PlanUpdate",
    "UsageCreate",
    "UsageResponse",
    "envelope",
]
