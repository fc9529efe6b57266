"""
Structured error handling for shapematch.

A failed match is an ordinary ``None`` result and never an exception. The
types here cover the conditions that abort a call instead:

- MalformedPatternError: a pattern violates a structural invariant
  (raised while the pattern is being built)
- PredicateFaultError: a placeholder predicate raised, or returned a
  non-bool under strict predicates
- MatchDepthExceededError: the pattern nests deeper than the configured
  recursion budget
- ConfigurationError: an invalid MatchConfig value
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from shapematch.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Pattern construction errors (1000-1999)
    TEMPLATE_ARITY_MISMATCH = 1001
    INVALID_TEMPLATE_LITERAL = 1002
    INVALID_PLACEHOLDER_NAME = 1003
    INVALID_PREDICATE = 1004
    DUPLICATE_RECORD_KEY = 1005
    INVALID_RECORD_KEY = 1006
    INVALID_PATTERN_NODE = 1007
    CONTAINER_LITERAL = 1008
    CYCLIC_PATTERN = 1009
    INVALID_FORMAT_STRING = 1010

    # Matching errors (2000-2999)
    PREDICATE_RAISED = 2001
    PREDICATE_NOT_BOOLEAN = 2002
    DEPTH_LIMIT_EXCEEDED = 2003

    # Configuration errors (3000-3999)
    INVALID_CONFIG = 3001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    pattern: str | None = None  # repr of the offending node, truncated
    depth: int | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


_MAX_PATTERN_REPR = 120


def describe_node(node: Any) -> str:
    """Short repr of a pattern node for error contexts."""
    try:
        text = repr(node)
    except RecursionError:
        return f"<{type(node).__name__} nested too deeply to display>"
    if len(text) > _MAX_PATTERN_REPR:
        return text[: _MAX_PATTERN_REPR - 3] + "..."
    return text


class ShapeMatchError(Exception):
    """Base error class for shapematch."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value} ({self.code.name})",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")
        if self.context.pattern:
            parts.append(f"   Pattern: {self.context.pattern}")
        if self.context.depth is not None:
            parts.append(f"   Depth: {self.context.depth}")
        if self.original_error is not None:
            parts.append(
                f"   Caused by: {type(self.original_error).__name__}: {self.original_error}"
            )

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity.value,
            "context": {
                "operation": self.context.operation,
                "component": self.context.component,
                "pattern": self.context.pattern,
                "depth": self.context.depth,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class MalformedPatternError(ShapeMatchError):
    """A pattern violates a structural invariant."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_PATTERN_NODE,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Pattern is malformed.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )


class PredicateFaultError(ShapeMatchError):
    """A placeholder predicate failed to produce a boolean verdict."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PREDICATE_RAISED,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Placeholder predicate failed.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )


class MatchDepthExceededError(ShapeMatchError):
    """Pattern nesting exceeded the configured recursion budget."""

    def __init__(
        self,
        message: str,
        max_depth: int,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.DEPTH_LIMIT_EXCEEDED,
            message=message,
            user_message=user_message
            or f"Pattern nesting exceeds the depth limit of {max_depth}.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
        self.max_depth = max_depth


class ConfigurationError(ShapeMatchError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )
