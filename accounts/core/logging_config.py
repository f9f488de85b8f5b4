"""Logging setup shared by scripts and services."""
from __future__ import annotations

import logging

from .config import get_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a single stream handler to the ``accounts`` logger tree."""
    logger = logging.getLogger("accounts")
    logger.setLevel(level or get_settings().log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
