"""
Logging helpers: process-wide setup and safe error handling.

configure_logging() is called once by entry points; every module logs via
its own ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure root logging for the whole process.

    Args:
        level: Level name ("DEBUG", "info", ...) or logging constant.
            Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    Logs the full exception for debugging and returns a generic message,
    so file system details do not leak into user-facing output.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display
    """
    logger.exception(f"[security] Exception sanitized: {e}")
    return safe_message
