"""Runtime settings read from the environment.

LINEGREP_DEBUG       "true" enables debug logging
LINEGREP_MAX_STEPS   positive integer bounding backtracking work per line
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from linegrep.constants import ENV_DEBUG, ENV_MAX_STEPS
from linegrep.types.errors import ConfigurationError, ErrorContext, RecoveryAction


@dataclass(frozen=True)
class Settings:
    """Engine and CLI settings."""

    debug: bool = False
    max_steps: int | None = None


def _parse_max_steps(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_MAX_STEPS} must be an integer, got {raw!r}",
            user_message=f"{ENV_MAX_STEPS} is not a number.",
            context=ErrorContext(operation="load_settings", component="config"),
            recovery_actions=[RecoveryAction(description=f"Unset {ENV_MAX_STEPS} or set it to a positive integer")],
            original_error=e,
        ) from e
    if value <= 0:
        raise ConfigurationError(
            f"{ENV_MAX_STEPS} must be positive, got {value}",
            user_message=f"{ENV_MAX_STEPS} must be positive.",
            context=ErrorContext(operation="load_settings", component="config"),
        )
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of os.environ.

    Raises:
        ConfigurationError: If a variable holds an unusable value.
    """
    env = os.environ if environ is None else environ
    return Settings(
        debug=env.get(ENV_DEBUG, "").lower() == "true",
        max_steps=_parse_max_steps(env.get(ENV_MAX_STEPS)),
    )
