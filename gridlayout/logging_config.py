"""Structured logging configuration for the grid layout engine.

The engine itself only emits records through ``get_logger(__name__)``; the
embedding application decides where they go. ``setup_logging`` offers a
ready-made configuration: human-readable console output plus, optionally,
JSON structured records written to a rotating file (10MB, 5 backups).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger


def setup_logging(log_level: str | None = None, log_file: Path | str | None = None) -> logging.Logger:
    """Configure console logging and, optionally, JSON file output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            ``Settings.log_level`` when omitted
        log_file: Path of the JSON log file; ``Settings.log_file`` when
            omitted, no file handler if that is unset too

    Returns:
        Configured ``gridlayout`` package logger
    """
    from gridlayout.config import get_settings

    settings = get_settings()
    if log_level is None:
        log_level = settings.log_level
    if log_file is None:
        log_file = settings.log_file

    package_logger = logging.getLogger("gridlayout")
    package_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove any existing handlers
    package_logger.handlers.clear()

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # JSON file handler with rotation (10MB, 5 backups)
        json_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        json_formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
        json_handler.setFormatter(json_formatter)
        json_handler.setLevel(logging.DEBUG)  # Capture all levels to file
        package_logger.addHandler(json_handler)

    # Console handler with human-readable format
    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    package_logger.addHandler(console_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., area, event_type)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
