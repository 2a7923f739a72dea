"""Logging setup shared by the loyalty service entry points."""

from __future__ import annotations

import logging
import sys

from app.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a single stream handler to the root logger.

    Calling it more than once only updates the level.
    """

    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    if any(getattr(handler, "_loyalty", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._loyalty = True  # type: ignore[attr-defined]
    root.addHandler(handler)


__all__ = ["configure_logging"]
