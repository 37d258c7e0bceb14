"""
Logging setup for linegrep.

STDOUT is reserved for matched lines, so every log sink writes to STDERR.
Debug output is off unless LINEGREP_DEBUG=true or the CLI's --debug flag
turns it on.
"""

import os
import sys

from loguru import logger as loguru_logger

from linegrep.constants import ENV_DEBUG

_LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() == "true"


def configure_logging(debug: bool | None = None) -> None:
    """Route loguru output to STDERR at the requested level.

    Args:
        debug: Force debug logging on or off. None reads LINEGREP_DEBUG.
    """
    if debug is None:
        debug = is_debug_enabled()

    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format=_LOG_FORMAT,
        colorize=False,
    )


# Export loguru logger for direct use
logger = loguru_logger
