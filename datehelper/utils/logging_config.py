"""
Logging configuration for datehelper.
Library modules log through logging.getLogger(__name__); applications opt in to handlers here.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

from datehelper.config.constants import LOG_FORMAT, LOG_DATE_FORMAT, ROOT_LOGGER_NAME


# A library never emits records unless the application configures handlers
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(log_level: Optional[str] = None,
                  log_dir: Optional[str] = None,
                  log_file: str = "datehelper.log",
                  max_file_size: int = 10 * 1024 * 1024,  # 10MB
                  backup_count: int = 5,
                  console_output: bool = True) -> logging.Logger:
    """
    Set up logging for the datehelper logger hierarchy.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to DATEHELPER_LOG_LEVEL
        log_dir: Directory for log files; no file handler when None
        log_file: Name of the log file
        max_file_size: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
        console_output: Whether to output logs to console

    Returns:
        Configured logger instance
    """
    if log_level is None:
        from datehelper.config.settings import get_settings
        log_level = get_settings().log_level

    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )

    log_file_path = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, log_file)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)  # File gets all messages
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging initialized - Level: {log_level}, File: {log_file_path or 'none'}")

    return logger


def setup_module_logger(module_name: str, parent_logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Set up a module-specific logger that inherits from parent logger.

    Args:
        module_name: Name of the module (e.g., "formatting.formatter")
        parent_logger: Parent logger to inherit from

    Returns:
        Module-specific logger
    """
    if parent_logger:
        logger_name = f"{parent_logger.name}.{module_name}"
    else:
        logger_name = f"{ROOT_LOGGER_NAME}.{module_name}"

    return logging.getLogger(logger_name)


def configure_third_party_loggers(level: str = "WARNING") -> None:
    """
    Configure logging levels for third-party libraries to reduce noise.

    Args:
        level: Logging level to set for third-party libraries
    """
    third_party_loggers = [
        'babel',
        'tzlocal',
        'dotenv',
    ]

    for logger_name in third_party_loggers:
        logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))
