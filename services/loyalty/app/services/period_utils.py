"""Helpers for yyyyMM periods."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from app.core.clock import ensure_utc, utcnow


def period_of(moment: datetime) -> int:
    """Encode the calendar month of ``moment`` as a yyyyMM integer."""
    moment = ensure_utc(moment)
    return moment.year * 100 + moment.month


def current_period(now: Optional[datetime] = None) -> int:
    return period_of(now or utcnow())


def is_valid_period(periodo: int) -> bool:
    """Six digits, year 2000-9999, month 01-12."""
    text = str(periodo)
    if len(text) != 6 or not text.isdigit():
        return False
    year, month = int(text[:4]), int(text[4:])
    return 2000 <= year <= 9999 and 1 <= month <= 12


__all__ = [
    "current_period",
    "ensure_utc",
    "is_valid_period",
    "period_of",
    "utcnow",
]
