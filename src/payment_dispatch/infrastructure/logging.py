"""Logging setup for payment-dispatch.

Modules log through logging.getLogger(__name__) under the
"payment_dispatch" namespace; configure_logging() attaches the handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_dispatch.infrastructure.config import Settings

ROOT_LOGGER = "payment_dispatch"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Get a logger with a single stderr handler attached."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure the package root logger from settings."""
    return get_logger(ROOT_LOGGER, settings.log_level)
