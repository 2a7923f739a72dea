"""HTTP errors raised by the loyalty services."""

from __future__ import annotations

from fastapi import HTTPException, status


class LoyaltyError(HTTPException):
    """Base error carrying the message returned to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, headers: dict[str, str] | None = None) -> None:
        super().__init__(status_code=self.status_code, detail=message, headers=headers)
        self.message = message


class ValidationError(LoyaltyError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(LoyaltyError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(LoyaltyError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(LoyaltyError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(LoyaltyError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


__all__ = [
    "LoyaltyError",
    "ValidationError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
]
