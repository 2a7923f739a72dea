from .balance_service import BalanceService
from .benefit_service import BenefitService
from .membership_service import MembershipService
from .payment_service import PaymentService
from .plan_service import PlanService
from .status_service import MembershipStatusService
from .usage_service import UsageService

__all__ = [
    "BalanceService",
    "BenefitService",
    "MembershipService",
    "MembershipStatusService",
    "PaymentService",
    "PlanService",
    "UsageService",
]
