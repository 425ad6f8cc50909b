# rsconfig/core/utils/logger.py

"""
Logging configuration and utilities for rsconfig.

This module provides the single logger used by the configuration registry
and the command line. All messages go through the ``rsconfig`` namespace so
that a host application can attach its own handlers to it.

Key Features:
- Global logger instance with lazy initialization
- Level taken from ``RS_LOG_LEVEL`` unless given explicitly
- Standardized ``[MODULE] message | Context: ...`` format
- Configuration change logging
"""

import logging
import os
import sys
from typing import Any

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

LOGGER_NAME = "rsconfig"
LOG_LEVEL_ENV = "RS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name}")
    return resolved


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for rsconfig.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls
               back to ``RS_LOG_LEVEL`` and then to INFO.
        log_file: Path to log file (optional). If provided, logs will be
                 written to both console and file.
        format_string: Custom log format string (optional).

    Returns:
        Configured logger instance

    Note:
        Calling this again replaces the handlers installed by the previous
        call, so it is safe to reconfigure (e.g. from ``--log-level``).
    """
    global _logger

    numeric_level = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it will be set up with
    default configuration.
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_configuration_change(setting: str, old_value: Any, new_value: Any) -> None:
    """
    Log a configuration change.

    Args:
        setting: Name of the setting that changed
        old_value: Previous value of the setting
        new_value: New value of the setting
    """
    get_logger().info(f"Configuration changed: {setting} = {old_value} -> {new_value}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None
