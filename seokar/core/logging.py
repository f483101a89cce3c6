"""Centralized logging configuration for SeoKar AI.

Every module logs through a child of the ``seokar`` logger so the host
application can route or silence the plugin's output in one place.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# Create the main logger for the application
logger = logging.getLogger("seokar")


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file.
        log_format: Format string for log messages.

    Returns:
        Configured logger instance.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Logger name (usually the short module name).

    Returns:
        Child logger instance.

    Example:
        from ..core.logging import get_logger
        logger = get_logger("transport")
        logger.debug("Sending request")
    """
    return logging.getLogger(f"seokar.{name}")


hooks_logger = get_logger("hooks")
transport_logger = get_logger("transport")
service_logger = get_logger("service")
api_logger = get_logger("api")
