"""Centralized logger configuration.

Usage:
    from notetaker.utils.logger import get_logger
    logger = get_logger(__name__)

The level comes from Settings.log_level (NT_LOG_LEVEL) unless a caller
passes one explicitly, so entry points and lazily configured modules agree.
"""
import logging
from typing import Optional

from notetaker.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (default: the configured one) to a logging constant."""
    name = (level or get_settings().log_level).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
