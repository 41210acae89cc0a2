"""
SciClope Logging Configuration

Configurable logging with debug mode support.
"""

import os
import logging
import sys
from pathlib import Path
from typing import Optional

from sciclope.utils import option_str_to_bool


# Check for debug mode
DEBUG_MODE = option_str_to_bool(os.environ.get("SCICLOPE_DEBUG"))

DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if SCICLOPE_DEBUG, else INFO)
        log_file: Optional path to log file
        quiet: If True, suppress console output

    Returns:
        Configured logger
    """
    if level is None:
        level = logging.DEBUG if DEBUG_MODE else logging.INFO

    logger = logging.getLogger("sciclope")
    logger.setLevel(level)
    logger.handlers.clear()

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        if level <= logging.DEBUG:
            console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        else:
            console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "sciclope") -> logging.Logger:
    """Get a logger with the SciClope configuration.

    Args:
        name: Logger name (will be prefixed with 'sciclope.')

    Returns:
        Configured logger
    """
    if not name.startswith("sciclope"):
        name = f"sciclope.{name}"

    logger = logging.getLogger(name)

    # Ensure parent logger is configured
    parent = logging.getLogger("sciclope")
    if not parent.handlers:
        setup_logging()

    return logger
