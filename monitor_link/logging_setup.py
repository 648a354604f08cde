"""Logging setup: systemd journal when available, stderr otherwise."""

import logging
import os
import sys
from typing import Optional

from .constants import LOG_FORMAT, LOG_IDENTIFIER
from .models import normalize_log_level

try:
    from systemd import journal
    SYSTEMD_AVAILABLE = True
except ImportError:
    SYSTEMD_AVAILABLE = False

logger = logging.getLogger(__name__)


def apply_log_level(level: str) -> str:
    """Set the root logger level; unknown names fall back to INFO.

    Returns:
        The level name actually applied
    """
    try:
        log_level = normalize_log_level(level)
    except ValueError as e:
        logger.warning(f"{e}; using INFO")
        log_level = "INFO"

    root_logger = logging.getLogger()
    if root_logger.level != logging.getLevelName(log_level):
        root_logger.setLevel(log_level)
        logger.debug(f"Root log level set to {log_level}")
    return log_level


def setup_logging(level: Optional[str] = None) -> logging.Handler:
    """Setup logging to systemd journal or stderr.

    Args:
        level: Log level name (falls back to LOG_LEVEL, then INFO)

    Returns:
        The handler added to the root logger
    """
    root_logger = logging.getLogger()

    if SYSTEMD_AVAILABLE:
        handler = journal.JournalHandler(SYSLOG_IDENTIFIER=LOG_IDENTIFIER)
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    log_level = apply_log_level(level or os.environ.get("LOG_LEVEL", "INFO"))
    logger.info(f"Logging configured: level={log_level}")
    return handler
