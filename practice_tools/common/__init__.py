"""
================================================================================
Practice Tools Common Utilities
================================================================================

Logging setup shared by the command line tools.

Exports:
    - init_logger: Configure loguru with the standard console format

Usage:
    from practice_tools.common import init_logger

    init_logger()
    init_logger(level="DEBUG", log_file="logs/tools.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initialize the loguru logger with standard settings.

    Args:
        level: Log level; defaults to the LOG_LEVEL env var, then INFO
        format_string: Log format string
        log_file: Optional file path; defaults to the LOG_FILE env var
        force: Re-initialize even if already done in this process
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()

    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    format_string = format_string or DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or os.getenv("LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    _logger_initialized = True
    logger.debug("Logger initialized successfully")


__all__ = [
    "init_logger",
    "DEFAULT_FORMAT",
]
