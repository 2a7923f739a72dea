"""Entry point for the Loyalty service."""

from fastapi import FastAPI

from app.api import loyalty_router
from app.core.config import settings
from app.core.database import Base, engine
from app.core.error_handlers import register_exception_handlers
from app.core.logging import configure_logging

configure_logging()
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

app.include_router(
    loyalty_router,
    prefix=settings.API_PREFIX,
)


__all__ = ["app"]
