"""Common dependencies for the loyalty service."""

from collections.abc import Generator

from app.core.database import SessionLocal


def get_db() -> Generator:
    """Open a session for one request and close it when the request ends."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["get_db"]
