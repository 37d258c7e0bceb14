"""
Structured error handling for linegrep.

Every error raised by the engine or the CLI derives from LinegrepError and
carries an error code, a user-facing message, a severity, context about the
failing operation and optional recovery suggestions.

Pattern compilation is the only stage that fails on user input; matching a
well-formed pattern returns True/False and only raises when the caller opted
into a backtracking budget.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from linegrep.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Pattern Errors (1000-1999)
    INVALID_PATTERN = 1001

    # Matching Errors (2000-2999)
    BACKTRACK_LIMIT_EXCEEDED = 2001

    # Input Errors (3000-3999)
    FILE_NOT_FOUND = 3001
    FILE_READ_FAILED = 3002

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None
    automated: bool = False


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    pattern: str | None = None
    file_path: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class LinegrepError(Exception):
    """Base error class for linegrep."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.pattern is not None:
            parts.append(f"   Pattern: {self.context.pattern}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "pattern": self.context.pattern,
                "file_path": self.context.file_path,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command, "automated": a.automated}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InvalidPatternError(LinegrepError):
    """Pattern text contains a malformed construct.

    Attributes:
        pattern: The full pattern text.
        position: Offset of the offending construct in the pattern.
        construct: Short name of the construct, e.g. "dangling quantifier".
    """

    def __init__(
        self,
        pattern: str,
        position: int,
        construct: str,
        user_message: str | None = None,
    ) -> None:
        self.pattern = pattern
        self.position = position
        self.construct = construct
        super().__init__(
            code=ErrorCode.INVALID_PATTERN,
            message=f"{construct} at position {position} in pattern {pattern!r}",
            user_message=user_message or f"Invalid pattern: {construct} at position {position}.",
            severity=ErrorSeverity.HIGH,
            context=ErrorContext(
                operation="compile",
                pattern=pattern,
                component="compiler",
                additional_info={"position": position, "construct": construct},
            ),
            recovery_actions=[
                RecoveryAction(
                    description="Supported syntax: literals, \\d, \\w, [abc], [^abc], ^, $ and +",
                ),
            ],
        )


class BacktrackLimitError(LinegrepError):
    """Matcher exhausted its configured step budget."""

    def __init__(self, pattern: str, max_steps: int) -> None:
        self.pattern = pattern
        self.max_steps = max_steps
        super().__init__(
            code=ErrorCode.BACKTRACK_LIMIT_EXCEEDED,
            message=f"backtracking budget of {max_steps} steps exhausted for pattern {pattern!r}",
            user_message="Pattern needed too much backtracking on this input.",
            severity=ErrorSeverity.MEDIUM,
            context=ErrorContext(
                operation="match",
                pattern=pattern,
                component="matcher",
                additional_info={"max_steps": max_steps},
            ),
            recovery_actions=[
                RecoveryAction(
                    description="Raise the budget or simplify adjacent '+' elements",
                    command="linegrep --max-steps <N> ...",
                ),
            ],
        )


class ConfigurationError(LinegrepError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class InputError(LinegrepError):
    """Error reading an input file."""

    def __init__(
        self,
        message: str,
        file_path: str,
        original_error: Exception | None = None,
    ) -> None:
        code = (
            ErrorCode.FILE_NOT_FOUND
            if isinstance(original_error, FileNotFoundError)
            else ErrorCode.FILE_READ_FAILED
        )
        super().__init__(
            code=code,
            message=message,
            user_message=f"Cannot read {file_path}.",
            severity=ErrorSeverity.MEDIUM,
            context=ErrorContext(operation="read", file_path=file_path, component="cli"),
            original_error=original_error,
        )
