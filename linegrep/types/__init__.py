"""
linegrep type definitions.

This module exports the result and error types shared by the compiler,
the matcher and the CLI.
"""

# Core types
from .core import Span

# Error types
from .errors import (
    BacktrackLimitError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InputError,
    InvalidPatternError,
    LinegrepError,
    RecoveryAction,
)

__all__ = [
    # Core types
    "Span",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "LinegrepError",
    "InvalidPatternError",
    "BacktrackLimitError",
    "ConfigurationError",
    "InputError",
]
