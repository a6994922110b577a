"""Logging setup shared by the API server and scripts."""

from __future__ import annotations
import logging

from wallframe.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("wallframe")
    logger.setLevel((level or get_settings().log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
