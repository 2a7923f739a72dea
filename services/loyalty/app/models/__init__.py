from .balance import EntryBalance
from .benefit import MembershipBenefit
from .customer import Customer
from .membership import (
    MEMBERSHIP_STATUS_ACTIVE,
    MEMBERSHIP_STATUS_INACTIVE,
    CustomerMembership,
)
from .payment import MembershipPayment
from .plan import MembershipPlan
from .usage import EntryUsage

__all__ = [
    "Customer",
    "CustomerMembership",
    "EntryBalance",
    "EntryUsage",
    "MEMBERSHIP_STATUS_ACTIVE",
    "MEMBERSHIP_STATUS_INACTIVE",
    "MembershipBenefit",
    "MembershipPayment",
    "MembershipPlan",
]
