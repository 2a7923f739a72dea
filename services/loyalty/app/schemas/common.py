"""Response envelopes shared by every resource."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, List, TypeVar

from pydantic import BaseModel

from app.core.clock import utcnow

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    data: T
    timestamp: datetime


class ListResponse(BaseModel, Generic[T]):
    data: List[T]
    timestamp: datetime


class CountedListResponse(ListResponse[T], Generic[T]):
    count: int


def envelope(data: Any, *, with_count: bool = False) -> dict[str, Any]:
    """Wrap a payload the way every successful response is returned."""

    body: dict[str, Any] = {"data": data, "timestamp": utcnow()}
    if with_count:
        body["count"] = len(data)
    return body


__all__ = [
    "CountedListResponse",
    "DataResponse",
    "ListResponse",
    "envelope",
]
