"""Logging setup for the fare engine.

The root logger is configured once from Settings (LOG_LEVEL, LOG_FILE) when
this module is first imported. Modules only call get_logger(__name__).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from cabfare.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty HTTP client loggers pulled in by the estimator UI
QUIET_LOGGERS = ("httpx", "httpcore", "urllib3")


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """Set up the root logger with a console handler and optional file handler.

    Args:
        level: Logging level name. Unknown names fall back to INFO.
        log_file: Optional path to a log file

    Returns:
        Configured root logger instance

    Example:
        >>> logger = setup_logging(level="DEBUG")
        >>> logger.info("Fare estimator started")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return root_logger


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure logging from the log_level and log_file settings."""
    settings = settings or get_settings()
    return setup_logging(level=settings.log_level, log_file=settings.log_file)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


configure_logging()
