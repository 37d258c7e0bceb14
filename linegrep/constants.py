"""Shared constants and helpers for linegrep.

Centralizes exit codes, environment variable names and timezone-aware
datetime helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Used as a ``default_factory`` in error context dataclasses.
    """
    return datetime.now(timezone.utc)


# Process exit codes, following the grep convention.
EXIT_MATCH: int = 0
EXIT_NO_MATCH: int = 1
EXIT_ERROR: int = 2

# Environment variables read by linegrep.config.
ENV_DEBUG: str = "LINEGREP_DEBUG"
ENV_MAX_STEPS: str = "LINEGREP_MAX_STEPS"

# Pattern metacharacters.
ANCHOR_START: str = "^"
ANCHOR_END: str = "$"
ONE_OR_MORE: str = "+"
ESCAPE: str = "\\"
GROUP_OPEN: str = "["
GROUP_CLOSE: str = "]"
GROUP_NEGATE: str = "^"
