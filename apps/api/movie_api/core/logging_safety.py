"""Utilities for safe structured logging fields."""

from __future__ import annotations

import hashlib
import logging
import os
from typing import Any

ACCESS_LOGGER_NAME = "movie_api.access"


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Return a deterministic non-reversible token for log correlation fields.

    Usernames and principal ids are logged through this helper so that log
    lines can be correlated without exposing the identity itself.
    """
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:12]
    return f"{prefix}-{digest}"


def configure_access_log(path: str | None) -> logging.Logger:
    """Attach a file handler to the access logger when ``path`` is set."""
    logger = logging.getLogger(ACCESS_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    if not path:
        return logger

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(path):
            return logger

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
    logger.addHandler(handler)
    return logger
