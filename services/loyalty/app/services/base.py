"""Shared transaction handling for the service layer."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _transaction(
        self, error_message: str, *, conflict_message: Optional[str] = None
    ) -> Iterator[None]:
        """Run the block and commit, or roll everything back on a database error.

        Unique constraint violations become 409 when ``conflict_message`` is
        given; any other database failure becomes a 500 with ``error_message``.
        """
        try:
            yield
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if conflict_message is not None:
                logger.warning("Integrity violation: %s", exc.orig)
                raise ConflictError(conflict_message) from exc
            logger.exception("Integrity error while committing")
            raise InternalError(error_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Database error while committing")
            raise InternalError(error_message) from exc


__all__ = ["BaseService"]
