"""API routers exposed by the loyalty service."""

from .v1 import router as loyalty_router

__all__ = ["loyalty_router"]
