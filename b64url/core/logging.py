"""Logging utilities for b64url modules."""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO


ROOT_LOGGER_NAME = "b64url"
DEFAULT_FORMAT = "%(name)s: %(levelname)s: %(message)s"


class LogLevel(Enum):
    """Log levels accepted by :func:`configure_logging`."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit configure_logging() calls. The logger will:
    - Live under the ``b64url`` namespace
    - Propagate to root logger (default behavior)
    - Only set a default package level if root logger has no handlers

    Args:
        name: Logger name relative to ``b64url`` (typically a module name)

    Returns:
        Configured logger instance
    """
    full_name = f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME
    logger = logging.getLogger(full_name)
    logger.propagate = True

    # Only set default level if root logger has no handlers
    # (i.e., basicConfig hasn't been called yet). Module loggers stay
    # NOTSET so configure_logging() on the package logger reaches them.
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger = logging.getLogger()
    if not root_logger.handlers and package_logger.level == logging.NOTSET:
        package_logger.setLevel(logging.WARNING)

    return logger


def configure_logging(
    level: LogLevel = LogLevel.WARNING,
    enable_console: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``b64url`` logger.

    Replaces any handler installed by a previous call, so it is safe to
    call once per CLI invocation.

    Args:
        level: Minimum level to emit
        enable_console: Attach a handler writing to ``stream``
        stream: Target stream, standard error by default

    Returns:
        The package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level.value)

    if enable_console:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level.value)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)

    return logger
