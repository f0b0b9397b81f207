"""
Logging configuration for RADIUS session analysis.

This module provides a centralized logging configuration that is used
throughout the radius_analyzer package. Diagnostics go to stderr by
default, leaving stdout to the report itself.

Usage:
    from radius_analyzer.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Reading log: %s", path)

To enable structured logging with timestamps:
    from radius_analyzer.logging_config import configure_logging
    import logging

    configure_logging(level=logging.DEBUG, simple_mode=False)
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "radius_analyzer"

# Format strings
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(message)s"

_configured: bool = False


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    simple_mode: bool = True,
) -> None:
    """
    Configure the package logger for session analysis.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string. If None, uses SIMPLE_FORMAT
            or DEFAULT_FORMAT based on simple_mode.
        stream: Output stream (default: sys.stderr).
        simple_mode: If True, use simple format without timestamps.
    """
    global _configured

    if format_string is None:
        format_string = SIMPLE_FORMAT if simple_mode else DEFAULT_FORMAT

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name, configuring the package first if needed.

    Args:
        name: Module name (typically __name__).

    Returns:
        Configured logger instance.
    """
    if not _configured:
        configure_logging()

    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Set the logging level for all radius_analyzer loggers."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug() -> None:
    """Enable debug-level logging."""
    set_level(logging.DEBUG)


def enable_quiet() -> None:
    """Set logging to WARNING level (suppress INFO messages)."""
    set_level(logging.WARNING)


def apply_verbosity(verbose: bool = False, quiet: bool = False) -> None:
    """Map the command-line verbosity flags onto the package log level.

    ``verbose`` wins when both are set.
    """
    if verbose:
        enable_debug()
    elif quiet:
        enable_quiet()
