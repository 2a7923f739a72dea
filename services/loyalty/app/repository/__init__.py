"""Repository helpers for the loyalty service."""

from . import (
    balance_repository,
    benefit_repository,
    customer_repository,
    membership_repository,
    payment_repository,
    plan_repository,
)

__all__ = [
    "balance_repository",
    "benefit_repository",
    "customer_repository",
    "membership_repository",
    "payment_repository",
    "plan_repository",
]
